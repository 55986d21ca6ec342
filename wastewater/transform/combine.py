"""Join weekly cases with the regional wastewater average and min-max scale both metrics."""

import sys
from typing import Optional

import pandas as pd

from wastewater.errors import NormalizationUndefinedError, SchemaMismatchError
from wastewater.ingest.tables import check_columns
from wastewater.transform.dates import SAMPLE_DATE

CASES_COL = "cases_per_100k"
WASTEWATER_COL = "weighted_avg"
CASES_NORM = "cases_norm"
WASTEWATER_NORM = "wastewater_norm"
COMBINED_COLUMNS = [SAMPLE_DATE, CASES_COL, WASTEWATER_COL, CASES_NORM, WASTEWATER_NORM]


def join_weekly(cases: pd.DataFrame, regional: pd.DataFrame, on: str = SAMPLE_DATE) -> pd.DataFrame:
    """Left join anchored on ``cases``; each case week appears once in the result."""
    case_dups = cases.duplicated(on)
    if case_dups.any():
        weeks = sorted({f"{d:%Y-%m-%d}" for d in cases.loc[case_dups, on]})
        raise SchemaMismatchError(
            f"case table has {int(case_dups.sum())} duplicate '{on}' row(s) ({', '.join(weeks)}); "
            f"the jurisdiction and disease filters should leave one row per week",
            stage="combine",
            source="cases",
        )

    dups = regional.duplicated(on)
    if dups.any():
        print(
            f"[WARN] regional table has {int(dups.sum())} duplicate '{on}' row(s); keeping the first",
            file=sys.stderr,
        )
        regional = regional.loc[~dups]
    return pd.merge(cases, regional, on=on, how="left")


def to_float(s: pd.Series, name: Optional[str] = None) -> pd.Series:
    """Cast a metric column to float; values that are present but not numeric are an error."""
    name = name or str(s.name)
    out = pd.to_numeric(s, errors="coerce").astype(float)
    bad = out.isna() & s.notna()
    if bad.any():
        examples = s[bad].astype(str).unique().tolist()[:5]
        raise SchemaMismatchError(
            f"{int(bad.sum())} non-numeric value(s) in '{name}', e.g. {examples}",
            stage="combine",
            source=name,
        )
    return out


def min_max_normalize(s: pd.Series, name: Optional[str] = None) -> pd.Series:
    """
    (x - min) / (max - min) over the non-missing values of ``s``.

    Missing inputs stay missing. A column with no values, or a single repeated
    value, has no defined scaling and raises NormalizationUndefinedError.
    """
    name = name or str(s.name)
    s = to_float(s, name)
    lo, hi = s.min(skipna=True), s.max(skipna=True)
    if pd.isna(lo) or pd.isna(hi):
        raise NormalizationUndefinedError(f"'{name}' has no non-missing values to scale", source=name)
    if hi == lo:
        raise NormalizationUndefinedError(
            f"'{name}' is constant ({lo}); min-max scaling would divide by zero", source=name
        )
    return (s - lo) / (hi - lo)


def build_combined(
    cases: pd.DataFrame,
    regional: pd.DataFrame,
    case_metric: str = "Cases per 100,000 population",
    regional_metric: str = "w_avg",
) -> pd.DataFrame:
    check_columns(cases, [SAMPLE_DATE, case_metric], source="cases", stage="combine")
    check_columns(regional, [SAMPLE_DATE, regional_metric], source="regional", stage="combine")

    joined = join_weekly(
        cases[[SAMPLE_DATE, case_metric]],
        regional[[SAMPLE_DATE, regional_metric]],
    ).rename(columns={case_metric: CASES_COL, regional_metric: WASTEWATER_COL})
    joined[CASES_COL] = to_float(joined[CASES_COL])
    joined[WASTEWATER_COL] = to_float(joined[WASTEWATER_COL])

    joined[CASES_NORM] = min_max_normalize(joined[CASES_COL])
    joined[WASTEWATER_NORM] = min_max_normalize(joined[WASTEWATER_COL])

    n_missing = int(joined[WASTEWATER_COL].isna().sum())
    print(f"[combine] {len(joined):,} weeks joined; {n_missing} without a wastewater value")
    return joined[COMBINED_COLUMNS]
