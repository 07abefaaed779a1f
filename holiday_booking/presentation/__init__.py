from .console import ConsoleUI

__all__ = ["ConsoleUI"]
