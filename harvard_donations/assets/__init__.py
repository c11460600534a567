"""Export all assets for use in Dagster definitions.

Asset Organization:
- sync/ → Data synchronization (downloads the FEC bulk archives)
- fec/ → Parsed FEC tables (candidates, committees, contributions)
- enrichment/ → Joined and filtered donation cohorts
- aggregation/ → Party and quarter rollups
- reports/ → HTML report and chart
"""

# Data sync (downloads all FEC files)
from .sync.data_sync import data_sync_asset

# FEC parsers
from .fec.candidates import candidates_asset
from .fec.committees import committees_asset
from .fec.contributions import contributions_asset

# Enrichment
from .enrichment.harvard_donations import harvard_donations_asset
from .enrichment.professor_donations import professor_donations_asset

# Aggregation
from .aggregation.party_cash_on_hand import party_cash_on_hand_asset
from .aggregation.harvard_party_totals import harvard_party_totals_asset
from .aggregation.professor_quarterly_counts import professor_quarterly_counts_asset

# Reports
from .reports.donation_report import donation_report_asset

__all__ = [
    # Data sync
    "data_sync_asset",

    # FEC parsers
    "candidates_asset",       # weball.zip - candidate summary
    "committees_asset",       # cm.zip - committee master
    "contributions_asset",    # indiv.zip - individual contributions

    # Enrichment
    "harvard_donations_asset",
    "professor_donations_asset",

    # Aggregation
    "party_cash_on_hand_asset",
    "harvard_party_totals_asset",
    "professor_quarterly_counts_asset",

    # Reports
    "donation_report_asset",
]
