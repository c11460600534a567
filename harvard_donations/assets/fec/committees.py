"""Committees Asset - Parse the FEC committee master file (cm.zip)"""

from pathlib import Path
from typing import Dict

import pandas as pd
from dagster import asset, AssetExecutionContext, MetadataValue, Output, Config, AssetIn

from harvard_donations.api.fec_bulk_data import load_committees
from harvard_donations.resources.fec import FECBulkResource


class CommitteesConfig(Config):
    keep_downloads: bool = False
    """Keep cm.zip on disk after parsing"""


@asset(
    name="committees",
    description="FEC committee master (cm.zip) - id, three-way party, linked candidate id",
    group_name="fec",
    compute_kind="pandas",
    ins={"fec_downloads": AssetIn("fec_downloads")},
)
def committees_asset(
    context: AssetExecutionContext,
    config: CommitteesConfig,
    fec: FECBulkResource,
    fec_downloads: Dict[str, str],
) -> Output[pd.DataFrame]:
    """Parse cm.zip into the committee table."""
    zip_path = Path(fec_downloads['cm'])
    context.log.info(f"📂 Parsing {zip_path.name}...")

    committees = load_committees(zip_path)

    if not config.keep_downloads:
        fec.get_repository().discard(zip_path)

    linked = int(committees['candidate_id'].notna().sum())
    context.log.info(f"   ✅ {len(committees):,} committees ({linked:,} linked to a candidate)")

    return Output(
        value=committees,
        metadata={
            "row_count": len(committees),
            "linked_to_candidate": linked,
            "by_party": MetadataValue.json(
                {str(k): int(v) for k, v in committees['committee_party'].value_counts().items()}
            ),
            "source_file": zip_path.name,
        },
    )
