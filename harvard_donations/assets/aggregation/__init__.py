"""Aggregation assets - party and quarter rollups."""

from .party_cash_on_hand import party_cash_on_hand_asset
from .harvard_party_totals import harvard_party_totals_asset
from .professor_quarterly_counts import professor_quarterly_counts_asset

__all__ = [
    'party_cash_on_hand_asset',
    'harvard_party_totals_asset',
    'professor_quarterly_counts_asset',
]
