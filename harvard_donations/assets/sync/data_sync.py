"""
Data Sync Asset

Downloads the three FEC bulk archives the pipeline reads for one election cycle:
weball (candidate summary), cm (committee master) and indiv (individual contributions).

Archives younger than 7 days are reused unless force_refresh is set.
"""

from typing import Dict

from dagster import asset, AssetExecutionContext, Config, MetadataValue, Output

from harvard_donations.api.fec_bulk_data import FEC_FILE_MAPPING
from harvard_donations.resources.fec import FECBulkResource


class DataSyncConfig(Config):
    """Configuration for data sync operations."""

    force_refresh: bool = False
    """Force re-download even if files are fresh"""


@asset(
    name="fec_downloads",
    group_name="sync",
    compute_kind="download",
    description="Downloads the weball, cm and indiv bulk archives for the configured FEC cycle",
)
def data_sync_asset(
    context: AssetExecutionContext,
    config: DataSyncConfig,
    fec: FECBulkResource,
) -> Output[Dict[str, str]]:
    """
    Download the FEC bulk archives for the cycle.

    Download failures are not retried; the error fails the run.

    Returns:
        Dict of FEC basename → local archive path
    """
    context.log.info("=" * 80)
    context.log.info(f"DATA SYNC - FEC bulk files for cycle {fec.cycle}")
    context.log.info("=" * 80)

    paths = {}
    total_bytes = 0
    for basename in FEC_FILE_MAPPING:
        path = fec.download(basename, force_refresh=config.force_refresh)
        size = path.stat().st_size
        total_bytes += size
        paths[basename] = str(path)
        context.log.info(f"   ✅ {basename}: {path.name} ({size / 1024 / 1024:.1f} MB)")

    return Output(
        value=paths,
        metadata={
            "cycle": fec.cycle,
            "files": MetadataValue.json(paths),
            "total_mb": round(total_bytes / 1024 / 1024, 2),
            "force_refresh": config.force_refresh,
        },
    )
