from .cli import CLI, main, build_parser

__all__ = ["CLI", "main", "build_parser"]
