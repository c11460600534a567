"""
FEC Bulk Data API

Downloads and parses FEC bulk data files (https://www.fec.gov/files/bulk-downloads).
Uses DataRepository for organized storage.
"""

import logging
import zipfile
from pathlib import Path
from typing import Optional
from datetime import datetime

import pandas as pd
import requests

from harvard_donations.config import FEC_BULK_URL
from harvard_donations.data import get_repository, DataRepository
from harvard_donations.utils.fec_schema import FECSchema, get_schema
from harvard_donations.utils.parties import (
    normalize_candidate_parties,
    normalize_committee_parties,
    normalize_text,
    title_case,
)

logger = logging.getLogger(__name__)

# Mapping of FEC basenames to the schema layout and repository path method
FEC_FILE_MAPPING = {
    'weball': 'fec_candidate_summary_path',
    'cm': 'fec_committees_path',
    'indiv': 'fec_individual_contributions_path',
}

DOWNLOAD_CHUNK_BYTES = 1024 * 1024


def fec_file_url(file_basename: str, cycle: str, base_url: str = FEC_BULK_URL) -> str:
    """e.g. ('cm', '2006') → https://www.fec.gov/files/bulk-downloads/2006/cm06.zip"""
    year_suffix = cycle[-2:]
    return f"{base_url.rstrip('/')}/{cycle}/{file_basename}{year_suffix}.zip"


def download_fec_file(
    file_basename: str,
    cycle: str,
    force_refresh: bool = False,
    repository: Optional[DataRepository] = None,
    base_url: str = FEC_BULK_URL,
    timeout: int = 300,
) -> Path:
    """
    Download a FEC bulk data file into the data repository.

    Args:
        file_basename: FEC file basename ('weball', 'cm' or 'indiv')
        cycle: Election cycle (e.g., '2006')
        force_refresh: Force re-download even if a fresh copy exists
        repository: DataRepository instance (uses the global one if not provided)
        base_url: Root of the FEC bulk download site
        timeout: Request timeout in seconds

    Returns:
        Path to downloaded file

    Raises:
        ValueError: Unknown basename
        requests.RequestException: Source unavailable (no retry)
    """
    if repository is None:
        repository = get_repository()

    if file_basename not in FEC_FILE_MAPPING:
        raise ValueError(f"Unknown FEC file basename: {file_basename}")

    path_method = getattr(repository, FEC_FILE_MAPPING[file_basename])
    cache_path = path_method(cycle)

    if not force_refresh and repository.is_file_fresh(cache_path, max_age_days=7):
        age_days = (datetime.now() - datetime.fromtimestamp(cache_path.stat().st_mtime)).days
        logger.info("✓ Using cached %s (%d days old)", cache_path.name, age_days)
        return cache_path

    url = fec_file_url(file_basename, cycle, base_url)
    logger.info("⬇️  Downloading %s...", url)

    cache_path.parent.mkdir(parents=True, exist_ok=True)
    partial_path = cache_path.with_suffix(cache_path.suffix + '.part')
    size_bytes = 0

    with requests.get(url, timeout=timeout, stream=True) as response:
        response.raise_for_status()
        with open(partial_path, 'wb') as f:
            for chunk in response.iter_content(chunk_size=DOWNLOAD_CHUNK_BYTES):
                f.write(chunk)
                size_bytes += len(chunk)

    partial_path.replace(cache_path)
    logger.info("✓ Downloaded %s (%.1f MB)", cache_path.name, size_bytes / 1024 / 1024)

    repository.update_file_metadata(
        repository.fec_cycle_metadata_path(cycle),
        file_basename,
        downloaded_at=datetime.now().isoformat(),
        size_bytes=size_bytes,
        url=url,
    )

    return cache_path


def read_fec_table(
    zip_path: Path,
    file_type: str,
    schema: Optional[FECSchema] = None,
) -> pd.DataFrame:
    """Read the kept columns of a FEC bulk archive into a typed DataFrame.

    The first .txt member of the archive is read as pipe-delimited Latin-1 text
    with no header (FEC extracts are not UTF-8 clean). Short lines are padded
    with nulls and extra trailing fields are ignored, on any line including
    the first; lines pandas cannot tokenize are skipped with a warning.
    Values that do not parse as their declared kind become null.

    Raises:
        FileNotFoundError: Archive missing or without a .txt member
    """
    schema = schema or get_schema()
    layout = schema.get_layout(file_type)

    if not zip_path.exists():
        raise FileNotFoundError(f"FEC archive not found: {zip_path}")

    with zipfile.ZipFile(zip_path) as zf:
        txt_files = [name for name in zf.namelist() if name.endswith('.txt')]
        if not txt_files:
            raise FileNotFoundError(f"No .txt files found in {zip_path}")

        logger.info("📖 Parsing %s from %s...", txt_files[0], zip_path.name)
        with zf.open(txt_files[0]) as f:
            frame = pd.read_csv(
                f,
                sep='|',
                header=None,
                names=list(range(schema.get_field_count(file_type))),
                usecols=schema.usecols(file_type),
                dtype=str,
                keep_default_na=False,
                na_values=[''],
                quoting=layout.quoting,
                encoding='latin-1',
                index_col=False,
                on_bad_lines='warn',
            )

    frame = frame.rename(columns=schema.renames(file_type))
    frame = frame[[column.name for column in schema.get_columns(file_type)]]
    frame = schema.coerce_types(frame, file_type)

    logger.info("✓ Read %s rows from %s", f"{len(frame):,}", zip_path.name)
    return frame


# ==========================================================================
# Normalized tables
# ==========================================================================

def load_candidates(zip_path: Path) -> pd.DataFrame:
    """Candidate table: candidate_id, name (title case), party (five-way), cash_on_hand, state."""
    candidates = read_fec_table(zip_path, 'weball')
    candidates['name'] = title_case(candidates['name'])
    candidates['party'] = normalize_candidate_parties(candidates['party'])
    return candidates


def load_committees(zip_path: Path) -> pd.DataFrame:
    """Committee table: committee_id, committee_party (three-way), candidate_id."""
    committees = read_fec_table(zip_path, 'cm')
    committees['committee_party'] = normalize_committee_parties(committees['committee_party'])
    return committees


def load_contributions(zip_path: Path) -> pd.DataFrame:
    """Contribution table: committee_id, employer/occupation (upper case), date, amount."""
    contributions = read_fec_table(zip_path, 'indiv')
    contributions['employer'] = normalize_text(contributions['employer'])
    contributions['occupation'] = normalize_text(contributions['occupation'])
    return contributions
