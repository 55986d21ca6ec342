"""
Load weekly COVID-19 case counts (one row per public health unit per week).

Expected header (other columns are kept as-is):
  Week start date, Public health unit, Disease, # of cases, Population,
  Cases per 100,000 population
"""

from pathlib import Path

import pandas as pd

from wastewater.ingest.tables import load_table

CASE_COLUMNS = [
    "Week start date",
    "Public health unit",
    "Disease",
    "# of cases",
    "Population",
    "Cases per 100,000 population",
]


def load_cases(path: str | Path) -> pd.DataFrame:
    return load_table(path, fmt="excel", required=CASE_COLUMNS)
