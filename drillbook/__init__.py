"""Programming drills: array routines, number puzzles, text patterns, a calculator and small containers."""

__version__ = "0.1.0"
__all__ = ["arrays", "numbers", "cashier", "patterns", "containers"]