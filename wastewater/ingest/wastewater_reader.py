"""
Load the two wastewater sources:

  surveillance.xlsx  daily standardized, log-transformed signal per zone
                     (Sample Date, Province, GTA, ...)
  aggregate.csv      weekly weighted average concentration per city
                     (weekstart, city, measureid, province, w_avg)
"""

from pathlib import Path

import pandas as pd

from wastewater.ingest.tables import load_table

LOCAL_SIGNAL_COLUMNS = ["Sample Date", "Province", "GTA"]
REGIONAL_COLUMNS = ["weekstart", "city", "measureid", "province", "w_avg"]


def load_local_signal(path: str | Path) -> pd.DataFrame:
    return load_table(path, fmt="excel", required=LOCAL_SIGNAL_COLUMNS)


def load_regional_average(path: str | Path) -> pd.DataFrame:
    return load_table(path, fmt="csv", required=REGIONAL_COLUMNS)
