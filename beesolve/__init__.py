"""Solutions to classic programming-judge exercises, with a command-line runner."""

__version__ = "0.1.0"