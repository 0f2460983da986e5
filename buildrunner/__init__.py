"""buildrunner: build orchestration for WebAssembly web packages."""

__version__ = "0.3.0"
