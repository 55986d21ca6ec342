import pandas as pd

from wastewater.transform.combine import build_combined
from wastewater.transform.dates import SAMPLE_DATE
from wastewater.transform.reshape import METRIC_LABELS, to_long, to_wide


def _combined():
    cases = pd.DataFrame(
        {SAMPLE_DATE: pd.to_datetime(["2024-01-07", "2024-01-14"]), "Cases per 100,000 population": [10.0, 20.0]}
    )
    regional = pd.DataFrame({SAMPLE_DATE: pd.to_datetime(["2024-01-07", "2024-01-14"]), "w_avg": [5.0, 15.0]})
    return build_combined(cases, regional)


def test_long_table_has_one_row_per_date_and_metric():
    long_df = to_long(_combined())
    assert long_df.columns.tolist() == [SAMPLE_DATE, "Metric", "Value"]
    assert len(long_df) == 4
    assert set(long_df["Metric"]) == {"COVID-19 Cases", "Wastewater Viral Load"}
    first = long_df[long_df[SAMPLE_DATE] == pd.Timestamp("2024-01-07")]
    assert first["Value"].tolist() == [0.0, 0.0]


def test_unmapped_metric_passes_through():
    combined = _combined()
    long_df = to_long(combined, value_cols=["cases_norm", "weighted_avg"])
    assert set(long_df["Metric"]) == {"COVID-19 Cases", "weighted_avg"}


def test_long_back_to_wide_reproduces_metrics():
    combined = _combined()
    wide = to_wide(to_long(combined))
    metrics = list(METRIC_LABELS)
    expected = combined[[SAMPLE_DATE, *metrics]].sort_values(SAMPLE_DATE).reset_index(drop=True)
    pd.testing.assert_frame_equal(wide[[SAMPLE_DATE, *metrics]], expected)
