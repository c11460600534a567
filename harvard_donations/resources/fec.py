"""FEC bulk data resource for Dagster."""

from pathlib import Path
from typing import Optional

from dagster import ConfigurableResource

from harvard_donations.api.fec_bulk_data import download_fec_file
from harvard_donations.config import DEFAULT_CYCLE, FEC_BULK_URL
from harvard_donations.data import DataRepository


class FECBulkResource(ConfigurableResource):
    """
    Dagster resource for the FEC bulk download site.

    Holds the election cycle for the run so every asset reads the same one.

    Usage in asset:
        @asset
        def my_asset(fec: FECBulkResource):
            zip_path = fec.download("cm")
            repo = fec.get_repository()
            # ... do work
    """

    base_url: str = FEC_BULK_URL
    """Root of the FEC bulk download site"""

    cycle: str = DEFAULT_CYCLE
    """Election cycle (even year, e.g. '2006')"""

    timeout: int = 300
    """Download timeout in seconds"""

    storage_path: Optional[str] = None
    """Data directory override (defaults to HARVARD_DONATIONS_DATA_DIR / storage root)"""

    def get_repository(self) -> DataRepository:
        return DataRepository(self.storage_path)

    def download(self, file_basename: str, force_refresh: bool = False) -> Path:
        """
        Download one bulk archive for this resource's cycle.

        Args:
            file_basename: 'weball', 'cm' or 'indiv'
            force_refresh: Re-download even if a fresh local copy exists

        Returns:
            Path to the local archive
        """
        return download_fec_file(
            file_basename,
            self.cycle,
            force_refresh=force_refresh,
            repository=self.get_repository(),
            base_url=self.base_url,
            timeout=self.timeout,
        )


fec_resource = FECBulkResource()
