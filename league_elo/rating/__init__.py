"""Elo rating core."""
