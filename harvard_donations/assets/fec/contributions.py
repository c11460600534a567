"""Contributions Asset - Parse FEC individual contributions (indiv.zip)

The indiv file is the large one (millions of rows per cycle); only the five
columns the pipeline uses are read.
"""

from pathlib import Path
from typing import Dict

import pandas as pd
from dagster import asset, AssetExecutionContext, Output, Config, AssetIn

from harvard_donations.api.fec_bulk_data import load_contributions
from harvard_donations.resources.fec import FECBulkResource


class ContributionsConfig(Config):
    keep_downloads: bool = False
    """Keep indiv.zip on disk after parsing"""


@asset(
    name="contributions",
    description="FEC individual contributions (indiv.zip) - committee id, employer, occupation, date, amount",
    group_name="fec",
    compute_kind="pandas",
    ins={"fec_downloads": AssetIn("fec_downloads")},
)
def contributions_asset(
    context: AssetExecutionContext,
    config: ContributionsConfig,
    fec: FECBulkResource,
    fec_downloads: Dict[str, str],
) -> Output[pd.DataFrame]:
    """Parse indiv.zip into the contribution table."""
    zip_path = Path(fec_downloads['indiv'])
    context.log.info(f"📂 Parsing {zip_path.name}...")

    contributions = load_contributions(zip_path)

    if not config.keep_downloads:
        fec.get_repository().discard(zip_path)

    total_amount = float(contributions['amount'].sum())
    context.log.info(f"   ✅ {len(contributions):,} contributions (${total_amount:,.0f})")

    return Output(
        value=contributions,
        metadata={
            "row_count": len(contributions),
            "total_amount": total_amount,
            "missing_date": int(contributions['date'].isna().sum()),
            "missing_amount": int(contributions['amount'].isna().sum()),
            "source_file": zip_path.name,
        },
    )
