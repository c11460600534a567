# Utility helpers for harvard-donations

# storage.py: on-disk locations (data, reports)
# fec_schema.py: FEC bulk file layouts
# parties.py: party/text normalization
# donations.py: join and cohort filters
# aggregation.py: party and quarter aggregates
# reporting.py: HTML tables and chart
