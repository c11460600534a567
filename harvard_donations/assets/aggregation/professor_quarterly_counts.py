"""Professor Quarterly Counts - quarter × party cross-tab of professor donations.

One row per quarter present, one column per party. Democrat, Republican and
Independent are always columns; missing combinations are 0.
"""

import pandas as pd
from dagster import asset, AssetExecutionContext, MetadataValue, Output, AssetIn

from harvard_donations.resources.fec import FECBulkResource
from harvard_donations.utils.aggregation import quarterly_crosstab


@asset(
    name="professor_quarterly_counts",
    description="Number of Harvard professor donations per calendar quarter and party",
    group_name="aggregation",
    compute_kind="aggregation",
    ins={"professor_donations": AssetIn("professor_donations")},
)
def professor_quarterly_counts_asset(
    context: AssetExecutionContext,
    fec: FECBulkResource,
    professor_donations: pd.DataFrame,
) -> Output[pd.DataFrame]:
    counts = quarterly_crosstab(professor_donations, fec.cycle)
    context.log.info(f"📅 {len(counts)} quarters × {len(counts.columns)} parties")

    return Output(
        value=counts,
        metadata={
            "cycle": fec.cycle,
            "row_count": len(counts),
            "quarters": MetadataValue.json([str(q) for q in counts.index]),
            "parties": MetadataValue.json([str(p) for p in counts.columns]),
            "donations_counted": int(counts.to_numpy().sum()),
        },
    )
