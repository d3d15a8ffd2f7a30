"""An in-memory mock file system: text files, password proxies, a file factory and touch/remove commands."""

__version__ = "0.1.0"
__all__ = ["commands", "errors", "factory", "files", "filesystem", "parsing", "proxy"]