"""Dama — a rules engine for 8x8 draughts."""

__version__ = "0.1.0"
