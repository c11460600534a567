"""Party Cash on Hand - candidate cash on hand summed per party, top N."""

import pandas as pd
from dagster import asset, AssetExecutionContext, MetadataValue, Output, Config, AssetIn

from harvard_donations.config import TOP_N_PARTIES
from harvard_donations.utils.aggregation import top_parties_by_cash


class PartyCashOnHandConfig(Config):
    top_n: int = TOP_N_PARTIES


@asset(
    name="party_cash_on_hand",
    description="Top parties by summed end-of-period candidate cash on hand",
    group_name="aggregation",
    compute_kind="aggregation",
    ins={"candidates": AssetIn("candidates")},
)
def party_cash_on_hand_asset(
    context: AssetExecutionContext,
    config: PartyCashOnHandConfig,
    candidates: pd.DataFrame,
) -> Output[pd.DataFrame]:
    totals = top_parties_by_cash(candidates, n=config.top_n)
    for row in totals.itertuples(index=False):
        context.log.info(f"   {row.party}: ${row.cash_on_hand:,.0f}")

    return Output(
        value=totals,
        metadata={
            "row_count": len(totals),
            "totals": MetadataValue.json(
                {row.party: float(row.cash_on_hand) for row in totals.itertuples(index=False)}
            ),
        },
    )
