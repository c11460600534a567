"""Harvard Donations - political donations by Harvard University employees.

This package contains the Dagster definitions for a single-cycle FEC pipeline:
who Harvard employees (and professors in particular) gave to, by party and by
calendar quarter.

Architecture:
- Assets:
  * sync/ → Downloads weball, cm and indiv for the cycle
  * fec/ → Parsed, normalized tables
  * enrichment/ → Harvard and professor donation cohorts
  * aggregation/ → Party totals and quarter × party cross-tab
  * reports/ → HTML tables and bar chart
- Jobs: harvard_donations_job
- Resources: FEC bulk download site (holds the cycle)

Data Flow:
  FEC.gov bulk files → candidates / committees / contributions
                     → harvard_donations → professor_donations
                     → aggregates → report.html + chart
"""

from dagster import Definitions

from harvard_donations.assets import (
    data_sync_asset,
    candidates_asset,
    committees_asset,
    contributions_asset,
    harvard_donations_asset,
    professor_donations_asset,
    party_cash_on_hand_asset,
    harvard_party_totals_asset,
    professor_quarterly_counts_asset,
    donation_report_asset,
)
from harvard_donations.jobs import harvard_donations_job
from harvard_donations.resources import fec_resource

ALL_ASSETS = [
    # Data sync
    data_sync_asset,

    # FEC parsers
    candidates_asset,
    committees_asset,
    contributions_asset,

    # Enrichment
    harvard_donations_asset,
    professor_donations_asset,

    # Aggregation
    party_cash_on_hand_asset,
    harvard_party_totals_asset,
    professor_quarterly_counts_asset,

    # Reports
    donation_report_asset,
]

# ============================================================================
# DEFINITIONS
# ============================================================================

defs = Definitions(
    assets=ALL_ASSETS,
    resources={
        "fec": fec_resource,
    },
    jobs=[
        harvard_donations_job,
    ],
)
