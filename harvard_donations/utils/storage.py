"""Centralized storage configuration for Harvard Donations.

All persistent data lives in ~/workspace/.harvard-donations/ to:
- Keep multi-GB FEC downloads out of the project directory
- Keep generated reports next to the data they came from

Structure:
    ~/workspace/.harvard-donations/
    ├── data/                      # Raw FEC downloads (see DataRepository)
    │   └── fec/
    │       └── 2006/
    │           ├── candidate_summary.zip
    │           ├── committees.zip
    │           ├── individual_contributions.zip
    │           └── metadata.json
    └── reports/                   # Rendered HTML tables and charts
        └── 2006/
            ├── report.html
            └── quarterly_donations.png
"""

import os
from pathlib import Path

# Environment variable overrides (for containerized environments)
STORAGE_ROOT_ENV = "HARVARD_DONATIONS_STORAGE"
DATA_DIR_ENV = "HARVARD_DONATIONS_DATA_DIR"
REPORTS_DIR_ENV = "HARVARD_DONATIONS_REPORTS_DIR"

# Default storage root
DEFAULT_STORAGE_ROOT = Path.home() / "workspace" / ".harvard-donations"


def get_storage_root() -> Path:
    """Get the root storage directory.

    Priority:
        1. HARVARD_DONATIONS_STORAGE env var
        2. ~/workspace/.harvard-donations/
    """
    env_root = os.environ.get(STORAGE_ROOT_ENV)
    if env_root:
        return Path(env_root)
    return DEFAULT_STORAGE_ROOT


def get_data_dir() -> Path:
    """Get the raw FEC data directory.

    Priority:
        1. HARVARD_DONATIONS_DATA_DIR env var
        2. {storage_root}/data/
    """
    env_dir = os.environ.get(DATA_DIR_ENV)
    if env_dir:
        return Path(env_dir)
    return get_storage_root() / "data"


def get_reports_dir() -> Path:
    """Get the rendered reports directory.

    Priority:
        1. HARVARD_DONATIONS_REPORTS_DIR env var
        2. {storage_root}/reports/
    """
    env_dir = os.environ.get(REPORTS_DIR_ENV)
    if env_dir:
        return Path(env_dir)
    return get_storage_root() / "reports"


def get_cycle_reports_dir(cycle: str) -> Path:
    """Get the reports directory for a specific cycle, creating it if needed.

    Example: ~/workspace/.harvard-donations/reports/2006/
    """
    reports_dir = get_reports_dir() / cycle
    reports_dir.mkdir(parents=True, exist_ok=True)
    return reports_dir
