"""Classic data structures, sorting routines and small algorithmic puzzles."""

__version__ = "0.1.0"