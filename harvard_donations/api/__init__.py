"""FEC bulk data download and parsing."""

from .fec_bulk_data import (
    FEC_FILE_MAPPING,
    download_fec_file,
    fec_file_url,
    read_fec_table,
    load_candidates,
    load_committees,
    load_contributions,
)

__all__ = [
    'FEC_FILE_MAPPING',
    'download_fec_file',
    'fec_file_url',
    'read_fec_table',
    'load_candidates',
    'load_committees',
    'load_contributions',
]
