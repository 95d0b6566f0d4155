"""
Command-Line Interface
======================

- **stc**: compile s-expression source to C-style calls

Implemented as a Click application.
"""

__all__ = ["stc"]
