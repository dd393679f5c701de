"""Classic algorithms and data structures: containers, searching, sorting, graphs, strings and arithmetic evaluation."""

__version__ = "0.1.0"