"""Standardize a source-specific date column to the shared ``SampleDate`` column."""

import sys

import pandas as pd

from wastewater.errors import DateParseError, SchemaMismatchError

SAMPLE_DATE = "SampleDate"
DATE_FORMAT = "%Y-%m-%d"
DATE_POLICIES = ("strict", "coerce")


def _present(s: pd.Series) -> pd.Series:
    """True where a value was actually supplied (blank strings count as missing)."""
    blank = s.map(lambda v: isinstance(v, str) and not v.strip())
    return s.notna() & ~blank


def parse_dates(
    s: pd.Series,
    fmt: str = DATE_FORMAT,
    policy: str = "strict",
    source: str | None = None,
) -> pd.Series:
    if policy not in DATE_POLICIES:
        raise ValueError(f"Unknown date policy '{policy}'; expected one of {DATE_POLICIES}")

    # Excel date cells arrive already typed; only the time component is dropped
    if pd.api.types.is_datetime64_any_dtype(s):
        return s.dt.normalize()

    parsed = pd.to_datetime(s, format=fmt, errors="coerce")
    bad = parsed.isna() & _present(s)
    n_bad = int(bad.sum())
    if n_bad:
        examples = s[bad].astype(str).unique().tolist()[:5]
        msg = f"{n_bad} value(s) in '{s.name}' do not match {fmt}, e.g. {examples}"
        if policy == "strict":
            raise DateParseError(msg, source=source)
        print(f"[WARN] {source or s.name}: {msg}; coerced to missing", file=sys.stderr)
    return parsed.dt.normalize()


def normalize_date_column(
    df: pd.DataFrame,
    date_col: str,
    target: str = SAMPLE_DATE,
    policy: str = "strict",
    fmt: str = DATE_FORMAT,
    source: str | None = None,
) -> pd.DataFrame:
    # a table that already went through this step carries only the target column
    if date_col not in df.columns and target in df.columns:
        date_col = target
    if date_col not in df.columns:
        raise SchemaMismatchError(
            f"Expected date column '{date_col}'; got {df.columns.tolist()}",
            stage="normalize",
            source=source,
        )

    out = df.copy()
    out[date_col] = parse_dates(out[date_col], fmt=fmt, policy=policy, source=source)
    if date_col != target:
        out = out.rename(columns={date_col: target})
    return out
