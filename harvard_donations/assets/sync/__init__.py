"""Data synchronization assets."""

from .data_sync import data_sync_asset

__all__ = ['data_sync_asset']
