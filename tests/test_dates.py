import numpy as np
import pandas as pd
import pytest

from wastewater.errors import DateParseError, SchemaMismatchError
from wastewater.transform.dates import SAMPLE_DATE, normalize_date_column


def test_string_dates_parsed_and_renamed(regional_raw):
    out = normalize_date_column(regional_raw, "weekstart")
    assert "weekstart" not in out.columns
    assert pd.api.types.is_datetime64_any_dtype(out[SAMPLE_DATE])
    assert out[SAMPLE_DATE].iloc[1] == pd.Timestamp("2024-01-07")
    # other columns untouched, input not mutated
    pd.testing.assert_series_equal(out["w_avg"], regional_raw["w_avg"])
    assert "weekstart" in regional_raw.columns


def test_time_component_dropped():
    df = pd.DataFrame({"Week start date": pd.to_datetime(["2024-01-07 13:45", "2024-01-14 00:00"])})
    out = normalize_date_column(df, "Week start date")
    assert (out[SAMPLE_DATE] == out[SAMPLE_DATE].dt.normalize()).all()
    assert out[SAMPLE_DATE].iloc[0] == pd.Timestamp("2024-01-07")


def test_normalizing_twice_is_a_no_op(local_raw):
    once = normalize_date_column(local_raw, "Sample Date")
    twice = normalize_date_column(once, SAMPLE_DATE)
    pd.testing.assert_frame_equal(once, twice)
    # also when called again with the source column name
    pd.testing.assert_frame_equal(once, normalize_date_column(once, "Sample Date"))


def test_strict_policy_rejects_bad_dates():
    df = pd.DataFrame({"weekstart": ["2024-01-07", "07/01/2024", "2024-13-01"]})
    with pytest.raises(DateParseError) as exc:
        normalize_date_column(df, "weekstart", source="aggregate.csv")
    msg = str(exc.value)
    assert "aggregate.csv" in msg
    assert "2 value(s)" in msg
    assert "07/01/2024" in msg


def test_coerce_policy_warns_and_leaves_missing(capsys):
    df = pd.DataFrame({"weekstart": ["2024-01-07", "not a date"], "w_avg": [1.0, 2.0]})
    out = normalize_date_column(df, "weekstart", policy="coerce", source="aggregate.csv")
    assert out[SAMPLE_DATE].isna().tolist() == [False, True]
    assert "[WARN]" in capsys.readouterr().err


def test_existing_missing_values_are_not_parse_errors():
    df = pd.DataFrame({"weekstart": ["2024-01-07", np.nan, ""]})
    out = normalize_date_column(df, "weekstart")
    assert out[SAMPLE_DATE].isna().tolist() == [False, True, True]


def test_missing_date_column():
    with pytest.raises(SchemaMismatchError):
        normalize_date_column(pd.DataFrame({"x": [1]}), "weekstart")


def test_unknown_policy():
    with pytest.raises(ValueError):
        normalize_date_column(pd.DataFrame({"d": ["2024-01-01"]}), "d", policy="lenient")
