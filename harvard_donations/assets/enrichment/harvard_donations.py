"""Harvard Donations - contributions from Harvard University employees, joined to party.

Contributions are filtered on employer first, then left joined to committees
and candidates. The employer predicate only reads contribution columns, so
filtering before the join yields the same rows as filtering after it.
"""

import pandas as pd
from dagster import asset, AssetExecutionContext, MetadataValue, Output, Config, AssetIn

from harvard_donations.config import HARVARD_EMPLOYER
from harvard_donations.utils.donations import filter_employer, join_donations


class HarvardDonationsConfig(Config):
    employer: str = HARVARD_EMPLOYER
    """Exact (upper-case) employer string to select"""


@asset(
    name="harvard_donations",
    description="Contributions with employer HARVARD UNIVERSITY, joined to committee and candidate party",
    group_name="enrichment",
    compute_kind="pandas",
    ins={
        "contributions": AssetIn("contributions"),
        "committees": AssetIn("committees"),
        "candidates": AssetIn("candidates"),
    },
)
def harvard_donations_asset(
    context: AssetExecutionContext,
    config: HarvardDonationsConfig,
    contributions: pd.DataFrame,
    committees: pd.DataFrame,
    candidates: pd.DataFrame,
) -> Output[pd.DataFrame]:
    """Employer cohort as donation records (unresolved parties kept)."""
    cohort = filter_employer(contributions, config.employer)
    context.log.info(f"🎓 {len(cohort):,} of {len(contributions):,} contributions list employer {config.employer}")

    donations = join_donations(cohort, committees, candidates)
    resolved = int(donations['party'].notna().sum())
    context.log.info(f"   ✅ {len(donations):,} donation records, {resolved:,} with a resolved party")

    return Output(
        value=donations,
        metadata={
            "employer": config.employer,
            "row_count": len(donations),
            "resolved_party": resolved,
            "unresolved_party": len(donations) - resolved,
            "by_party": MetadataValue.json(
                {str(k): int(v) for k, v in donations['party'].value_counts().items()}
            ),
        },
    )
