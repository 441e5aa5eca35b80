"""Breakout candidate scoring for MLB hitters."""
