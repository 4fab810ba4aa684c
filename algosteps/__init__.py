"""Classic number, array, matrix, sorting and searching algorithms."""

__version__ = "0.1.0"
__all__ = [
    "basics",
    "sorting",
    "arrays_easy",
    "arrays_mid",
    "arrays_hard",
    "searching",
]