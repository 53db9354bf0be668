"""Weighted implication rules over caller-supplied literals."""

__version__ = "0.1.0"
__all__ = ["rule"]