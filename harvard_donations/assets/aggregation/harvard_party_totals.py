"""Harvard Party Totals - Harvard donations per committee party."""

import pandas as pd
from dagster import asset, AssetExecutionContext, MetadataValue, Output, AssetIn

from harvard_donations.utils.aggregation import party_totals


@asset(
    name="harvard_party_totals",
    description="Count and total of Harvard donations per committee party (Democrat/Republican/Other)",
    group_name="aggregation",
    compute_kind="aggregation",
    ins={"harvard_donations": AssetIn("harvard_donations")},
)
def harvard_party_totals_asset(
    context: AssetExecutionContext,
    harvard_donations: pd.DataFrame,
) -> Output[pd.DataFrame]:
    totals = party_totals(harvard_donations, column='committee_party')
    context.log.info(f"📊 {int(totals['contributions'].sum()):,} Harvard donations across {len(totals)} parties")

    return Output(
        value=totals,
        metadata={
            "row_count": len(totals),
            "total_amount": float(totals['total_amount'].sum()),
            "by_party": MetadataValue.json(
                {row.party: int(row.contributions) for row in totals.itertuples(index=False)}
            ),
        },
    )
