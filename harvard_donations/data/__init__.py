"""
On-disk FEC archives: per-cycle paths, download metadata, freshness and cleanup.
"""

from .repository import DataRepository, get_repository

__all__ = ['DataRepository', 'get_repository']
