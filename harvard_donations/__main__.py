"""
Runs the full pipeline in-process for one cycle and prints the report location.

    python -m harvard_donations --cycle 2006 [--force-refresh] [--keep-downloads]
"""

import argparse
import logging
import sys

from dagster import materialize_to_memory

from harvard_donations import ALL_ASSETS
from harvard_donations.config import DEFAULT_CYCLE, FEC_BULK_URL
from harvard_donations.resources.fec import FECBulkResource

logger = logging.getLogger("harvard_donations")


def build_run_config(force_refresh: bool = False, keep_downloads: bool = False) -> dict:
    """Per-asset config for one run."""
    return {
        "ops": {
            "fec_downloads": {"config": {"force_refresh": force_refresh}},
            "candidates": {"config": {"keep_downloads": keep_downloads}},
            "committees": {"config": {"keep_downloads": keep_downloads}},
            "contributions": {"config": {"keep_downloads": keep_downloads}},
        }
    }


def run_pipeline(cycle: str = DEFAULT_CYCLE, force_refresh: bool = False, keep_downloads: bool = False,
                 base_url: str = FEC_BULK_URL):
    """Materialize every asset in memory. Returns the donation_report output."""
    result = materialize_to_memory(
        ALL_ASSETS,
        resources={"fec": FECBulkResource(cycle=cycle, base_url=base_url)},
        run_config=build_run_config(force_refresh, keep_downloads),
    )
    return result.output_for_node("donation_report")


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="harvard_donations",
        description="Harvard University donations by party and quarter, from FEC bulk data",
    )
    parser.add_argument("--cycle", default=DEFAULT_CYCLE, help=f"Election cycle, even year (default: {DEFAULT_CYCLE})")
    parser.add_argument("--force-refresh", action="store_true", help="Re-download archives even if fresh")
    parser.add_argument("--keep-downloads", action="store_true", help="Keep archives on disk after parsing")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    logger.info("Running pipeline for cycle %s", args.cycle)
    paths = run_pipeline(args.cycle, args.force_refresh, args.keep_downloads)
    print(paths['report'])
    return 0


if __name__ == "__main__":
    sys.exit(main())
