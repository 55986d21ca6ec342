import matplotlib

matplotlib.use("Agg")

import pandas as pd
import pytest


@pytest.fixture
def cases_raw():
    return pd.DataFrame(
        {
            "Week start date": pd.to_datetime(
                ["2023-12-31", "2024-01-07", "2024-01-07", "2024-01-14", "2024-01-21", "2024-01-14"]
            ),
            "Public health unit": [
                "Toronto Public Health",
                "Toronto Public Health",
                "Ottawa Public Health",
                "Toronto Public Health",
                "Toronto Public Health",
                "Toronto Public Health",
            ],
            "Disease": ["COVID-19", "COVID-19", "COVID-19", "COVID-19", "COVID-19", "Influenza"],
            "# of cases": [300, 300, 90, 600, 450, 40],
            "Population": [3000000] * 6,
            "Cases per 100,000 population": [10.0, 10.0, 9.0, 20.0, 15.0, 1.3],
        }
    )


@pytest.fixture
def local_raw():
    return pd.DataFrame(
        {
            "Sample Date": ["2023-12-30", "2024-01-02", "2024-01-01", "2024-01-03", "2024-01-04"],
            "Province": ["ON"] * 5,
            "GTA": [0.4, -0.25, 0.1, None, 0.75],
            "Site": ["A", "A", "B", "A", "B"],
        }
    )


@pytest.fixture
def regional_raw():
    return pd.DataFrame(
        {
            "weekstart": ["2023-12-31", "2024-01-07", "2024-01-14", "2024-01-07", "2024-01-07"],
            "city": ["Toronto", "Toronto", "Toronto", "Toronto", "Ottawa"],
            "measureid": ["covN2", "covN2", "covN2", "covN1", "covN2"],
            "province": ["ON"] * 5,
            "w_avg": [2.0, 5.0, 15.0, 99.0, 7.0],
        }
    )


@pytest.fixture
def data_dir(tmp_path, cases_raw, local_raw, regional_raw):
    d = tmp_path / "raw"
    d.mkdir()
    cases_raw.to_excel(d / "cases.xlsx", index=False)
    local_raw.to_excel(d / "surveillance.xlsx", index=False)
    regional_raw.to_csv(d / "aggregate.csv", index=False)
    return d
