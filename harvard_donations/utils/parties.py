"""Party normalization - collapse FEC party codes to small closed label sets.

FEC party fields are free-ish codes (DEM, REP, DFL, IND, LIB, GRE, UNK, ...)
with inconsistent casing. Two collapses are used:

- candidate level, five labels: Democrat, Republican, Independent, Libertarian, Other
- committee level, three labels: Democrat, Republican, Other

Both are total functions: the value is stripped and upper-cased, looked up in
an explicit alias table, and anything unmapped lands in Other. Null or blank
stays None and is dropped before any party-keyed aggregate. Output labels are
themselves aliases, so normalizing twice is a no-op.
"""

from enum import Enum
from typing import Dict, Optional

import pandas as pd


class Party(str, Enum):
    DEMOCRAT = "Democrat"
    REPUBLICAN = "Republican"
    INDEPENDENT = "Independent"
    LIBERTARIAN = "Libertarian"
    OTHER = "Other"


CANDIDATE_PARTY_ALIASES: Dict[str, Party] = {
    "DEM": Party.DEMOCRAT,
    "DFL": Party.DEMOCRAT,  # Democratic-Farmer-Labor (MN)
    "DEMOCRAT": Party.DEMOCRAT,
    "DEMOCRATIC": Party.DEMOCRAT,
    "REP": Party.REPUBLICAN,
    "GOP": Party.REPUBLICAN,
    "REPUBLICAN": Party.REPUBLICAN,
    "IND": Party.INDEPENDENT,
    "IDP": Party.INDEPENDENT,  # Independence Party
    "NPA": Party.INDEPENDENT,  # No Party Affiliation
    "NNE": Party.INDEPENDENT,  # None
    "INDEPENDENT": Party.INDEPENDENT,
    "LIB": Party.LIBERTARIAN,
    "LIBERTARIAN": Party.LIBERTARIAN,
    "OTHER": Party.OTHER,
}

COMMITTEE_PARTY_ALIASES: Dict[str, Party] = {
    "DEM": Party.DEMOCRAT,
    "DFL": Party.DEMOCRAT,
    "DEMOCRAT": Party.DEMOCRAT,
    "DEMOCRATIC": Party.DEMOCRAT,
    "REP": Party.REPUBLICAN,
    "GOP": Party.REPUBLICAN,
    "REPUBLICAN": Party.REPUBLICAN,
}

CANDIDATE_PARTIES = frozenset(party.value for party in Party)
COMMITTEE_PARTIES = frozenset({Party.DEMOCRAT.value, Party.REPUBLICAN.value, Party.OTHER.value})


def _normalize(value, aliases: Dict[str, Party]) -> Optional[str]:
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return None

    key = str(value).strip().upper()
    if not key:
        return None

    return aliases.get(key, Party.OTHER).value


def normalize_candidate_party(value) -> Optional[str]:
    """Collapse a candidate party code to one of the five candidate labels (None for null/blank)."""
    return _normalize(value, CANDIDATE_PARTY_ALIASES)


def normalize_committee_party(value) -> Optional[str]:
    """Collapse a committee party code to Democrat, Republican or Other (None for null/blank)."""
    return _normalize(value, COMMITTEE_PARTY_ALIASES)


def _none_for_missing(series: pd.Series) -> pd.Series:
    # Series.map over string data can turn a None result into NaN
    result = series.astype(object)
    return result.where(result.notna(), None)


def normalize_candidate_parties(series: pd.Series) -> pd.Series:
    return _none_for_missing(series.map(normalize_candidate_party))


def normalize_committee_parties(series: pd.Series) -> pd.Series:
    return _none_for_missing(series.map(normalize_committee_party))


def normalize_text(series: pd.Series) -> pd.Series:
    """Strip and upper-case free text so case variants compare equal."""
    return _none_for_missing(series.map(lambda value: value.strip().upper() if isinstance(value, str) else None))


def title_case(series: pd.Series) -> pd.Series:
    """Display casing for names. Cosmetic only; joins never use names."""
    return _none_for_missing(series.map(lambda value: value.strip().title() if isinstance(value, str) else None))
