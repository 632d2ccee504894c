"""Classic algorithms and data structures for study and experiment."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "avl",
    "bst",
    "calculator",
    "extras",
    "graphs",
    "hanoi",
    "heap",
    "linked",
    "numbers",
    "optimize",
    "polynomial",
    "sorting",
    "stack",
    "suffix",
    "text",
]