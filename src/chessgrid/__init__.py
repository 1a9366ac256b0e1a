"""chessgrid — a minimal 64-square chess board data model."""

__version__ = "0.1.0"
