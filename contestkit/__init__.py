"""Solutions to classic programming-contest exercises, one function per exercise."""

__version__ = "0.1.0"
__all__ = ["patterns", "text", "sorting", "numbers", "graphs", "grids", "sequences"]