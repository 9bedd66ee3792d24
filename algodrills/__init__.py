"""Solutions to classic algorithm problems, grouped by technique."""

__version__ = "0.1.0"
__all__ = ["arrays_and_hashing", "two_pointers", "stack", "sliding_window", "binary_search"]