"""Export job definitions for the harvard-donations pipeline."""

from harvard_donations.jobs.asset_jobs import harvard_donations_job

__all__ = [
    "harvard_donations_job",
]
