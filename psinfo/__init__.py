"""Show status information for Linux processes from /proc and write report files."""

__version__ = "0.1.0"
__all__ = ["args", "process", "cli"]