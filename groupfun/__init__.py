"""Pastime logic for group chat bots: sign-in, sleep tracking, tarot, fortune slips and more."""

__version__ = "0.1.0"