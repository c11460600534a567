# Utility for loading environment variables and the pipeline's fixed literals
import os
from dotenv import load_dotenv

load_dotenv()

FEC_BULK_URL = os.getenv("FEC_BULK_URL", "https://www.fec.gov/files/bulk-downloads")
DEFAULT_CYCLE = os.getenv("FEC_CYCLE", "2006")

# Cohort predicates
HARVARD_EMPLOYER = "HARVARD UNIVERSITY"
PROFESSOR_TOKEN = "PROFESSOR"

TOP_N_PARTIES = 5

# Parties shown as columns in the quarterly table and chart, with their bar colors
DISPLAY_PARTIES = ["Democrat", "Republican", "Independent"]
PARTY_COLORS = {
    "Democrat": "#1f4e9c",
    "Republican": "#c0282d",
    "Independent": "#3a8f3a",
}

SOURCE_CITATION = "Source: Federal Election Commission bulk data (fec.gov)"
