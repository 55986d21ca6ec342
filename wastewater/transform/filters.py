"""Restrict a normalized table to one year, a set of equality predicates and a column list."""

import sys
from typing import Any, Dict, Optional, Sequence

import pandas as pd

from wastewater.errors import EmptyResultError
from wastewater.ingest.tables import check_columns
from wastewater.transform.dates import SAMPLE_DATE


def filter_table(
    df: pd.DataFrame,
    year: int,
    equals: Optional[Dict[str, Any]] = None,
    keep: Optional[Sequence[str]] = None,
    allow_empty: bool = False,
    source: Optional[str] = None,
) -> pd.DataFrame:
    """
    Stable filter: output rows keep their input order (no sort).

    1. SampleDate falls in ``year``
    2. every ``column == value`` predicate holds
    3. project onto ``keep`` in the order given
    4. drop rows with a missing value in any retained column
    """
    equals = equals or {}
    keep = list(keep) if keep is not None else list(df.columns)
    source = source or "table"
    check_columns(df, [SAMPLE_DATE, *equals.keys(), *keep], source=source, stage="filter")

    mask = df[SAMPLE_DATE].dt.year == year
    for col, value in equals.items():
        mask &= df[col] == value

    out = df.loc[mask, keep].dropna().reset_index(drop=True)
    print(f"[filter] {source}: {len(df):,} → {len(out):,} rows (year={year}, {len(equals)} predicate(s))")

    if out.empty:
        msg = f"No rows left after filtering on year={year} and {equals}"
        if not allow_empty:
            raise EmptyResultError(msg, source=source)
        print(f"[WARN] {source}: {msg}", file=sys.stderr)
    return out
