"""Bundled player cohorts."""

from .historical import HISTORICAL_COHORTS, available_years, historical_rows, load_historical

__all__ = ["HISTORICAL_COHORTS", "available_years", "historical_rows", "load_historical"]
