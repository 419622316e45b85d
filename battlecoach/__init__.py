"""ABOUTME: Battle coach package for the game-state overlay.
ABOUTME: Type effectiveness model and matchup suggestions for live battles."""

__version__ = "0.1.0"
