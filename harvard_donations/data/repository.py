"""
Data Repository Manager

Manages the local data repository structure for the harvard-donations project.
Downloaded FEC bulk archives are organized per election cycle, with a small
metadata file recording where and when each archive came from.

This module is Dagster-agnostic - it can be used standalone or orchestrated by Dagster.
"""

from pathlib import Path
from typing import Optional, Dict, Any, Union
from datetime import datetime
import json
import logging

from harvard_donations.utils.storage import get_data_dir

logger = logging.getLogger(__name__)


class DataRepository:
    """
    Manages the data repository structure and file organization.

    Directory Structure:
    data/
    ├── fec/
    │   ├── 2006/
    │   │   ├── candidate_summary.zip          # weball06.zip
    │   │   ├── committees.zip                 # cm06.zip
    │   │   ├── individual_contributions.zip   # indiv06.zip
    │   │   └── metadata.json                  # download metadata
    """

    def __init__(self, base_path: Optional[Union[str, Path]] = None):
        """
        Initialize the data repository.

        Args:
            base_path: Base directory for all data storage (defaults to the storage data dir)
        """
        self.base_path = Path(base_path) if base_path is not None else get_data_dir()
        self._ensure_structure()

    def _ensure_structure(self):
        """Create the directory structure if it doesn't exist."""
        for directory in [self.base_path, self.fec_dir]:
            directory.mkdir(parents=True, exist_ok=True)

    # ==========================================================================
    # Directory Properties
    # ==========================================================================

    @property
    def fec_dir(self) -> Path:
        """Directory for FEC bulk data."""
        return self.base_path / "fec"

    def fec_cycle_dir(self, cycle: str) -> Path:
        """Get FEC directory for a specific cycle."""
        cycle_dir = self.fec_dir / cycle
        cycle_dir.mkdir(parents=True, exist_ok=True)
        return cycle_dir

    # ==========================================================================
    # FEC File Paths (with friendly names)
    # ==========================================================================

    def fec_candidate_summary_path(self, cycle: str) -> Path:
        """Path to FEC candidate summary file (weball{YY}.zip)."""
        return self.fec_cycle_dir(cycle) / "candidate_summary.zip"

    def fec_committees_path(self, cycle: str) -> Path:
        """Path to FEC committees file (cm{YY}.zip)."""
        return self.fec_cycle_dir(cycle) / "committees.zip"

    def fec_individual_contributions_path(self, cycle: str) -> Path:
        """Path to FEC individual contributions file (indiv{YY}.zip)."""
        return self.fec_cycle_dir(cycle) / "individual_contributions.zip"

    def fec_cycle_metadata_path(self, cycle: str) -> Path:
        """Path to FEC cycle metadata file."""
        return self.fec_cycle_dir(cycle) / "metadata.json"

    # ==========================================================================
    # Metadata Management
    # ==========================================================================

    def load_metadata(self, metadata_path: Path) -> Dict[str, Any]:
        """Load metadata from a JSON file (empty dict if missing or unreadable)."""
        if not metadata_path.exists():
            return {}

        try:
            with open(metadata_path) as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Ignoring unreadable metadata file %s: %s", metadata_path, e)
            return {}

    def save_metadata(self, metadata_path: Path, metadata: Dict[str, Any]):
        """Save metadata to a JSON file."""
        metadata_path.parent.mkdir(parents=True, exist_ok=True)

        with open(metadata_path, 'w') as f:
            json.dump(metadata, f, indent=2, default=str)

    def update_file_metadata(
        self,
        metadata_path: Path,
        file_key: str,
        **kwargs
    ):
        """
        Update metadata for a specific file.

        Args:
            metadata_path: Path to metadata file
            file_key: Key for this file in metadata
            **kwargs: Metadata fields to update (downloaded_at, size_bytes, url, etc.)
        """
        metadata = self.load_metadata(metadata_path)

        if 'files' not in metadata:
            metadata['files'] = {}

        if file_key not in metadata['files']:
            metadata['files'][file_key] = {}

        metadata['files'][file_key].update(kwargs)
        metadata['files'][file_key]['updated_at'] = datetime.now().isoformat()

        self.save_metadata(metadata_path, metadata)

    # ==========================================================================
    # File Age Checking
    # ==========================================================================

    def is_file_fresh(self, file_path: Path, max_age_days: int = 7) -> bool:
        """
        Check if a file is fresh (recently downloaded).

        Args:
            file_path: Path to file
            max_age_days: Maximum age in days

        Returns:
            True if file exists and is fresh
        """
        if not file_path.exists():
            return False

        file_age = datetime.now() - datetime.fromtimestamp(file_path.stat().st_mtime)
        return file_age.days < max_age_days

    # ==========================================================================
    # Cleanup
    # ==========================================================================

    def discard(self, file_path: Path) -> bool:
        """
        Delete a downloaded archive once it has been parsed.

        Returns:
            True if a file was removed
        """
        if not file_path.exists():
            return False

        file_path.unlink()
        logger.info("Removed local copy %s", file_path.name)
        return True


# ==========================================================================
# Global Repository Instance
# ==========================================================================

# Singleton instance
_repository: Optional[DataRepository] = None


def get_repository(base_path: Optional[Union[str, Path]] = None) -> DataRepository:
    """
    Get the global data repository instance.

    Args:
        base_path: Base directory for data storage (only used on first call)

    Returns:
        DataRepository instance
    """
    global _repository

    if _repository is None:
        _repository = DataRepository(base_path)

    return _repository
