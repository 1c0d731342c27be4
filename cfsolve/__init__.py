"""Solvers for short classic programming exercises, with a small command-line front end."""

__version__ = "0.1.0"
__all__ = ["arithmetic", "words", "sequences", "cli"]