"""Classic programming exercises: sorting, patterns, expressions, grids, arrays, strings and numbers."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "combinatorics",
    "dynamic",
    "expressions",
    "grids",
    "linked_list",
    "numbers",
    "patterns",
    "sorting",
    "strings",
]