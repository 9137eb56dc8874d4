from .console import ConsoleScreen

__all__ = ["ConsoleScreen"]
