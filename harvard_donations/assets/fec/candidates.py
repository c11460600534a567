"""Candidates Asset - Parse the FEC candidate summary file (weball.zip)"""

from pathlib import Path
from typing import Dict

import pandas as pd
from dagster import asset, AssetExecutionContext, MetadataValue, Output, Config, AssetIn

from harvard_donations.api.fec_bulk_data import load_candidates
from harvard_donations.resources.fec import FECBulkResource


class CandidatesConfig(Config):
    keep_downloads: bool = False
    """Keep weball.zip on disk after parsing"""


@asset(
    name="candidates",
    description="FEC candidate summary (weball.zip) - id, title-cased name, five-way party, cash on hand, state",
    group_name="fec",
    compute_kind="pandas",
    ins={"fec_downloads": AssetIn("fec_downloads")},
)
def candidates_asset(
    context: AssetExecutionContext,
    config: CandidatesConfig,
    fec: FECBulkResource,
    fec_downloads: Dict[str, str],
) -> Output[pd.DataFrame]:
    """Parse weball.zip into the candidate table."""
    zip_path = Path(fec_downloads['weball'])
    context.log.info(f"📂 Parsing {zip_path.name}...")

    candidates = load_candidates(zip_path)

    if not config.keep_downloads:
        fec.get_repository().discard(zip_path)

    party_counts = candidates['party'].value_counts().to_dict()
    context.log.info(f"   ✅ {len(candidates):,} candidates")

    return Output(
        value=candidates,
        metadata={
            "row_count": len(candidates),
            "by_party": MetadataValue.json({str(k): int(v) for k, v in party_counts.items()}),
            "missing_party": int(candidates['party'].isna().sum()),
            "source_file": zip_path.name,
        },
    )
