"""FEC Bulk Data Assets - parsed FEC tables

- weball.zip → candidates
- cm.zip → committees
- indiv.zip → contributions
"""

from .candidates import candidates_asset
from .committees import committees_asset
from .contributions import contributions_asset

__all__ = [
    'candidates_asset',
    'committees_asset',
    'contributions_asset',
]
