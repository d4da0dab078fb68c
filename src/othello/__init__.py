"""Othello rules engine and alpha-beta search core."""

__version__ = "0.1.0"
