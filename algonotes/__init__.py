"""Classic algorithms, data structures and small console games."""

__version__ = "0.1.0"