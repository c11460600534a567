"""Asset materialization jobs for the harvard-donations pipeline.

Individual assets can be materialized directly in the UI; the job runs the
whole graph for one cycle.

Available Job:
- harvard_donations_job: Download → Parse → Join/filter → Aggregate → Report
"""

from dagster import define_asset_job, AssetSelection

# ============================================================================
# MAIN PIPELINE JOB
# ============================================================================

harvard_donations_job = define_asset_job(
    name="harvard_donations_job",
    description="Complete pipeline: Download → Parse → Join/filter → Aggregate → Report",
    selection=AssetSelection.keys(
        # Phase 1: Download source archives
        "fec_downloads",

        # Phase 2: Parse
        "candidates",               # weball.zip
        "committees",               # cm.zip
        "contributions",            # indiv.zip

        # Phase 3: Join and filter
        "harvard_donations",
        "professor_donations",

        # Phase 4: Aggregation
        "party_cash_on_hand",
        "harvard_party_totals",
        "professor_quarterly_counts",

        # Phase 5: Report
        "donation_report",
    ),
    tags={
        "team": "data",
        "pipeline": "harvard-donations",
    },
)
