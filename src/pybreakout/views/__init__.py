"""Ranked list utilities (filtering, export)."""

from .export import EXPORT_HEADERS, export_ranked_to_csv
from .filtering import (
    FilterCriteria,
    FilteredPlayer,
    FilterResult,
    FilterSummary,
    filter_ranked,
)

__all__ = [
    "EXPORT_HEADERS",
    "FilterCriteria",
    "FilterResult",
    "FilterSummary",
    "FilteredPlayer",
    "export_ranked_to_csv",
    "filter_ranked",
]
