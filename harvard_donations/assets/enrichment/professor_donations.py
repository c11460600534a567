"""Professor Donations - the Harvard cohort narrowed to professors."""

import pandas as pd
from dagster import asset, AssetExecutionContext, Output, Config, AssetIn

from harvard_donations.config import PROFESSOR_TOKEN
from harvard_donations.utils.donations import filter_occupation, drop_unresolved


class ProfessorDonationsConfig(Config):
    occupation_token: str = PROFESSOR_TOKEN
    """Substring the (upper-case) occupation must contain"""


@asset(
    name="professor_donations",
    description="Harvard donations whose occupation contains PROFESSOR and whose party resolved",
    group_name="enrichment",
    compute_kind="pandas",
    ins={"harvard_donations": AssetIn("harvard_donations")},
)
def professor_donations_asset(
    context: AssetExecutionContext,
    config: ProfessorDonationsConfig,
    harvard_donations: pd.DataFrame,
) -> Output[pd.DataFrame]:
    professors = filter_occupation(harvard_donations, config.occupation_token)
    resolved = drop_unresolved(professors, 'party')
    context.log.info(
        f"👩‍🏫 {len(professors):,} professor donations, "
        f"{len(professors) - len(resolved):,} dropped without a party"
    )

    return Output(
        value=resolved,
        metadata={
            "occupation_token": config.occupation_token,
            "row_count": len(resolved),
            "dropped_unresolved": len(professors) - len(resolved),
            "total_amount": float(resolved['amount'].sum()),
        },
    )
