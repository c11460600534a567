"""Donation Report - HTML tables and the quarterly chart for one cycle.

Writes into {reports_dir}/{cycle}/:
- report.html: top parties by cash on hand, Harvard totals by committee party,
  professor donations per quarter, and the raw Harvard contribution total
- quarterly_donations.png: Harvard donation dollars per quarter and party
"""

from typing import Dict

import pandas as pd
from dagster import asset, AssetExecutionContext, MetadataValue, Output, Config, AssetIn

from harvard_donations.config import HARVARD_EMPLOYER
from harvard_donations.resources.fec import FECBulkResource
from harvard_donations.utils.aggregation import quarterly_amounts, raw_totals
from harvard_donations.utils.donations import filter_employer
from harvard_donations.utils.reporting import write_report
from harvard_donations.utils.storage import get_cycle_reports_dir


class DonationReportConfig(Config):
    employer: str = HARVARD_EMPLOYER
    """Employer used for the raw (pre-join) total line"""


@asset(
    name="donation_report",
    description="HTML report and bar chart of Harvard donations by party and quarter",
    group_name="reports",
    compute_kind="matplotlib",
    ins={
        "party_cash_on_hand": AssetIn("party_cash_on_hand"),
        "harvard_party_totals": AssetIn("harvard_party_totals"),
        "professor_quarterly_counts": AssetIn("professor_quarterly_counts"),
        "harvard_donations": AssetIn("harvard_donations"),
        "contributions": AssetIn("contributions"),
    },
)
def donation_report_asset(
    context: AssetExecutionContext,
    config: DonationReportConfig,
    fec: FECBulkResource,
    party_cash_on_hand: pd.DataFrame,
    harvard_party_totals: pd.DataFrame,
    professor_quarterly_counts: pd.DataFrame,
    harvard_donations: pd.DataFrame,
    contributions: pd.DataFrame,
) -> Output[Dict[str, str]]:
    """Render the report; returns {'report': path, 'chart': path}."""
    cycle = fec.cycle
    harvard_raw = raw_totals(filter_employer(contributions, config.employer))
    dollars = quarterly_amounts(harvard_donations, cycle)

    paths = write_report(
        get_cycle_reports_dir(cycle),
        cycle,
        party_cash=party_cash_on_hand,
        harvard_totals=harvard_party_totals,
        professor_counts=professor_quarterly_counts,
        quarterly_dollars=dollars,
        harvard_raw=harvard_raw,
    )
    context.log.info(f"📝 Report written to {paths['report']}")

    return Output(
        value={name: str(path) for name, path in paths.items()},
        metadata={
            "cycle": cycle,
            "report": MetadataValue.path(str(paths['report'])),
            "chart": MetadataValue.path(str(paths['chart'])),
            "harvard_contributions": harvard_raw['contributions'],
            "harvard_total_amount": harvard_raw['total_amount'],
        },
    )
