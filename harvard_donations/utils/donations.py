"""Donation records - join contributions to committees and candidates, then select cohorts.

Join chain (both left joins, every contribution is kept):

    contribution.committee_id → committee.committee_id
    committee.candidate_id    → candidate.candidate_id

A contribution whose committee is unknown, or whose committee has no known
candidate, keeps null committee/candidate fields. Those rows are expected data
and are only removed by drop_unresolved() ahead of party-keyed aggregates.
Neither side of either join is deduplicated, so duplicate keys fan out rows.
"""

import logging

import pandas as pd

logger = logging.getLogger(__name__)

DONATION_COLUMNS = [
    'committee_id',
    'employer',
    'occupation',
    'date',
    'amount',
    'committee_party',
    'candidate_id',
    'name',
    'party',
    'state',
]


def join_donations(
    contributions: pd.DataFrame,
    committees: pd.DataFrame,
    candidates: pd.DataFrame,
) -> pd.DataFrame:
    """Left join contributions → committees → candidates into donation records.

    Inputs are left untouched; the result is a new frame with DONATION_COLUMNS.
    """
    with_committees = contributions.merge(
        committees[['committee_id', 'committee_party', 'candidate_id']].dropna(subset=['committee_id']),
        on='committee_id',
        how='left',
    )
    donations = with_committees.merge(
        candidates[['candidate_id', 'name', 'party', 'state']].dropna(subset=['candidate_id']),
        on='candidate_id',
        how='left',
    )

    unmatched = int(donations['party'].isna().sum())
    logger.info(
        "Joined %d contributions into %d donation records (%d without a resolved party)",
        len(contributions), len(donations), unmatched,
    )
    return donations[DONATION_COLUMNS]


def filter_employer(frame: pd.DataFrame, employer: str) -> pd.DataFrame:
    """Rows whose employer is exactly `employer`."""
    return frame[frame['employer'] == employer].copy()


def filter_occupation(frame: pd.DataFrame, token: str) -> pd.DataFrame:
    """Rows whose occupation contains `token` (case-sensitive); null occupations never match."""
    mask = frame['occupation'].map(lambda value: isinstance(value, str) and token in value)
    return frame[mask.astype(bool)].copy()


def drop_unresolved(frame: pd.DataFrame, column: str = 'party') -> pd.DataFrame:
    """Hard filter: drop rows with no party before any party-keyed aggregate."""
    return frame[frame[column].notna()].copy()
