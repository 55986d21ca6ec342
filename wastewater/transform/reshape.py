"""Wide ↔ long reshaping for multi-series plots."""

from typing import Dict, Mapping, Sequence

import pandas as pd

from wastewater.transform.combine import CASES_NORM, WASTEWATER_NORM
from wastewater.transform.dates import SAMPLE_DATE

# legend labels; metrics not listed here keep their column name
METRIC_LABELS: Dict[str, str] = {
    CASES_NORM: "COVID-19 Cases",
    WASTEWATER_NORM: "Wastewater Viral Load",
}


def to_long(
    df: pd.DataFrame,
    id_col: str = SAMPLE_DATE,
    value_cols: Sequence[str] = (CASES_NORM, WASTEWATER_NORM),
    labels: Mapping[str, str] = METRIC_LABELS,
) -> pd.DataFrame:
    """One row per (id, metric): columns [id_col, Metric, Value]."""
    long_df = df.melt(
        id_vars=[id_col],
        value_vars=list(value_cols),
        var_name="Metric",
        value_name="Value",
    )
    long_df["Metric"] = long_df["Metric"].map(lambda m: labels.get(m, m))
    return long_df


def to_wide(
    long_df: pd.DataFrame,
    id_col: str = SAMPLE_DATE,
    labels: Mapping[str, str] = METRIC_LABELS,
) -> pd.DataFrame:
    """Inverse of :func:`to_long`; display labels are mapped back to column names."""
    inverse = {v: k for k, v in labels.items()}
    wide = (
        long_df.assign(Metric=long_df["Metric"].map(lambda m: inverse.get(m, m)))
        .pivot(index=id_col, columns="Metric", values="Value")
        .reset_index()
    )
    wide.columns.name = None
    return wide
