"""Rubik's Cube models (3-D array, flat array, bitboard) and BFS, DFS and IDDFS solvers."""

__version__ = "0.1.0"