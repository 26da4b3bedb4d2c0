"""Command-line utilities: comm, tail, fortune, cal and ls work-alikes, an ASCII table and a random text generator."""

__version__ = "0.1.0"
__all__ = ["comm", "tail", "fortune", "cal", "ls", "ascii", "biggie"]