"""Aggregations over candidates and donation records.

- top_parties_by_cash: party → summed candidate cash on hand, top N
- party_totals: party → contribution count and total amount
- raw_totals: count/amount before any join
- quarterly_crosstab / quarterly_amounts: quarter × party wide tables

Quarter buckets are calendar quarters labelled "YYYY Qn". A cycle named by
its even year (e.g. "2006") spans the eight quarters of the odd and even
year ("2005 Q1" through "2006 Q4"); dates outside that window get no bucket.
"""

from typing import Dict, List, Optional, Sequence

import pandas as pd

from harvard_donations.config import DISPLAY_PARTIES, TOP_N_PARTIES
from harvard_donations.utils.donations import drop_unresolved

QUARTER_COLUMN = 'quarter'


def top_parties_by_cash(candidates: pd.DataFrame, n: int = TOP_N_PARTIES) -> pd.DataFrame:
    """Sum cash on hand per party, largest first, keep the top `n`.

    Ties on the sum are ordered by party label so the cut is deterministic.
    """
    resolved = drop_unresolved(candidates, 'party')
    totals = (
        resolved.groupby('party', as_index=False)['cash_on_hand']
        .sum()
        .sort_values(['cash_on_hand', 'party'], ascending=[False, True], kind='mergesort')
    )
    return totals.head(n).reset_index(drop=True)


def party_totals(donations: pd.DataFrame, column: str = 'committee_party') -> pd.DataFrame:
    """Contribution count and total amount per party (null parties excluded)."""
    resolved = drop_unresolved(donations, column)
    totals = (
        resolved.groupby(column)
        .agg(contributions=('amount', 'size'), total_amount=('amount', 'sum'))
        .reset_index()
        .rename(columns={column: 'party'})
    )
    return totals.sort_values(
        ['total_amount', 'party'], ascending=[False, True], kind='mergesort'
    ).reset_index(drop=True)


def raw_totals(contributions: pd.DataFrame) -> Dict[str, float]:
    """Count and amount of contributions before any join or party filter."""
    return {
        'contributions': int(len(contributions)),
        'total_amount': float(contributions['amount'].sum()),
    }


# ==========================================================================
# Quarter buckets
# ==========================================================================

def quarter_label(date) -> Optional[str]:
    """Calendar quarter label for a date, e.g. 2005-03-01 → "2005 Q1"."""
    if date is None or pd.isna(date):
        return None
    timestamp = pd.Timestamp(date)
    return f"{timestamp.year} Q{timestamp.quarter}"


def cycle_quarters(cycle: str) -> List[str]:
    """The eight quarter labels of a two-year cycle, in calendar order."""
    last_year = int(cycle)
    return [f"{year} Q{quarter}" for year in (last_year - 1, last_year) for quarter in range(1, 5)]


def assign_quarters(frame: pd.DataFrame, cycle: str) -> pd.DataFrame:
    """Copy of `frame` with a quarter column; out-of-cycle or missing dates get None."""
    in_cycle = set(cycle_quarters(cycle))
    result = frame.copy()
    labels = result['date'].map(quarter_label).astype(object)
    result[QUARTER_COLUMN] = labels.where(labels.isin(in_cycle), None)
    return result


def _wide_by_quarter(
    donations: pd.DataFrame,
    cycle: str,
    values: pd.Series,
    expected: Sequence[str],
    fill_value,
) -> pd.DataFrame:
    quarters = cycle_quarters(cycle)
    present = [label for label in quarters if label in set(donations[QUARTER_COLUMN])]
    extra = sorted(set(donations['party']) - set(expected))
    columns = list(expected) + extra

    if donations.empty:
        wide = pd.DataFrame(fill_value, index=pd.Index([], name=QUARTER_COLUMN), columns=columns)
    else:
        wide = (
            values.groupby([donations[QUARTER_COLUMN], donations['party']])
            .sum()
            .unstack('party', fill_value=fill_value)
        )
        wide = wide.reindex(index=present, columns=columns, fill_value=fill_value)

    wide.index.name = QUARTER_COLUMN
    wide.columns.name = 'party'
    return wide


def _bucketed(donations: pd.DataFrame, cycle: str) -> pd.DataFrame:
    bucketed = assign_quarters(drop_unresolved(donations, 'party'), cycle)
    return bucketed[bucketed[QUARTER_COLUMN].notna()]


def quarterly_crosstab(
    donations: pd.DataFrame,
    cycle: str,
    expected: Sequence[str] = DISPLAY_PARTIES,
) -> pd.DataFrame:
    """Count donations per quarter and party, one column per party.

    One row per quarter present in the input, in calendar order. The expected
    parties are always columns; other parties present follow them. Absent
    (quarter, party) combinations are 0, never missing.
    """
    bucketed = _bucketed(donations, cycle)
    ones = pd.Series(1, index=bucketed.index, dtype='int64')
    return _wide_by_quarter(bucketed, cycle, ones, expected, 0).astype('int64')


def quarterly_amounts(
    donations: pd.DataFrame,
    cycle: str,
    expected: Sequence[str] = DISPLAY_PARTIES,
) -> pd.DataFrame:
    """Summed donation amounts per quarter and party, same shape as quarterly_crosstab."""
    bucketed = _bucketed(donations, cycle)
    amounts = bucketed['amount'].fillna(0.0).astype(float)
    return _wide_by_quarter(bucketed, cycle, amounts, expected, 0.0).astype(float)
