"""Classic algorithms: sorting, searching, recursion, greedy, dynamic programming, graphs and Strassen multiplication."""

__version__ = "0.1.0"

__all__ = ["dynamic", "graphs", "greedy", "recursion", "searching", "sorting", "strassen"]