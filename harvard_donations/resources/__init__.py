"""Dagster resources for Harvard Donations."""
from harvard_donations.resources.fec import fec_resource, FECBulkResource

__all__ = [
    "fec_resource",
    "FECBulkResource",
]
