"""Classic data structures and solvers for judge-style exercises."""

__version__ = "0.1.0"