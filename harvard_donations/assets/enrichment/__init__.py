"""Enrichment assets - joined and filtered donation cohorts."""

from .harvard_donations import harvard_donations_asset
from .professor_donations import professor_donations_asset

__all__ = [
    'harvard_donations_asset',
    'professor_donations_asset',
]
