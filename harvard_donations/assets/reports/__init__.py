"""Report assets."""

from .donation_report import donation_report_asset

__all__ = ['donation_report_asset']
