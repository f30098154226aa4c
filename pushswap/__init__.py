"""Sort a stack of integers with the push_swap moves, plus small string, memory and list helpers."""

__version__ = "1.0.0"