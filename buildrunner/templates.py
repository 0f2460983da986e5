"""Build definition YAML template."""

from __future__ import annotations


def template_build(name: str, target: str = "web", out_dir: str = "pkg") -> str:
    return f"""\
apiVersion: buildrunner/v1
kind: Build
metadata:
  name: {name}
  description: WebAssembly web package
spec:
  compiler:
    command: wasm-pack
    target: {target}          # web | bundler | nodejs | no-modules | deno
    out_dir: {out_dir}
    # profile: release     # release | dev | profiling
    extra_args: []
  assets:
    source: assets
    enabled: true
  serve:
    command: python3 -m http.server
    port: 8000
    host: localhost
"""
