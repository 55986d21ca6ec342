"""
Load → normalize → filter → combine → reshape → render.

Every table is built before the first chart is drawn, so a failing stage
leaves no partial chart output behind.
"""

from pathlib import Path
from typing import Any, Callable, Dict, List

import pandas as pd

from wastewater.ingest.cases_reader import load_cases
from wastewater.ingest.wastewater_reader import load_local_signal, load_regional_average
from wastewater.plots.line_charts import LineChartRenderer
from wastewater.transform.combine import build_combined
from wastewater.transform.dates import SAMPLE_DATE, normalize_date_column
from wastewater.transform.filters import filter_table
from wastewater.transform.reshape import to_long

LOADERS: Dict[str, Callable[[Path], pd.DataFrame]] = {
    "cases": load_cases,
    "local_signal": load_local_signal,
    "regional": load_regional_average,
}


def date_span(dates: pd.Series) -> str:
    if dates.dropna().empty:
        return "no dates"
    return f"{dates.min():%Y-%m-%d} → {dates.max():%Y-%m-%d}"


def prepare_source(name: str, src_cfg: Dict[str, Any], data_dir: Path, cfg: Dict[str, Any]) -> pd.DataFrame:
    path = data_dir / src_cfg["file"]
    df = LOADERS[name](path)
    df = normalize_date_column(
        df,
        src_cfg["date_col"],
        policy=cfg.get("date_policy", "strict"),
        source=path.name,
    )
    print(f"[normalize] {path.name}: '{src_cfg['date_col']}' → '{SAMPLE_DATE}', {date_span(df[SAMPLE_DATE])}")
    return filter_table(
        df,
        year=int(cfg["year"]),
        equals=src_cfg.get("equals") or {},
        keep=src_cfg.get("keep"),
        allow_empty=bool(cfg.get("filters", {}).get("allow_empty", False)),
        source=path.name,
    )


def build_tables(cfg: Dict[str, Any], data_dir: Path) -> Dict[str, pd.DataFrame]:
    tables = {name: prepare_source(name, cfg["sources"][name], data_dir, cfg) for name in LOADERS}
    metrics = cfg["metrics"]
    tables["combined"] = build_combined(
        tables["cases"],
        tables["regional"],
        case_metric=metrics["cases"],
        regional_metric=metrics["regional"],
    )
    tables["long"] = to_long(tables["combined"])
    return tables


def chart_specs(cfg: Dict[str, Any]) -> List[Dict[str, Any]]:
    year = cfg["year"]
    city = cfg["place"]["city"]
    local_area = cfg["place"]["local_area"]
    metrics = cfg["metrics"]
    return [
        dict(
            table="local_signal",
            y="GTA",
            title=f"Daily Wastewater SARS-CoV-2 Concentration in the {local_area} ({year})",
            ylabel="Standardized, Log-Transformed SARS-CoV-2 Signal",
            filename="local_signal",
        ),
        dict(
            table="regional",
            y=metrics["regional"],
            title=f"Weekly Average Wastewater SARS-CoV-2 Concentration in {city} ({year})",
            ylabel="Avg SARS-CoV-2 Concentration (Unspecific units)",
            filename="regional_average",
        ),
        dict(
            table="cases",
            y=metrics["cases"],
            title=f"Weekly Reported COVID-19 Cases in {city} ({year})",
            ylabel="Cases per 100,000 Population",
            filename="weekly_cases",
        ),
        dict(
            table="long",
            y="Value",
            color="Metric",
            title=f"Normalized Weekly Trends: COVID-19 Cases vs. Wastewater SARS-CoV-2 in {city} ({year})",
            ylabel="Normalized Value (0–1)",
            filename="normalized_overlay",
            linewidth=1.8,
        ),
    ]


def run_pipeline(cfg: Dict[str, Any], data_dir: Path, renderer: LineChartRenderer) -> Dict[str, Any]:
    """Build every table, then render the four charts. Returns tables and chart paths."""
    tables = build_tables(cfg, Path(data_dir))

    charts = []
    for spec in chart_specs(cfg):
        spec = dict(spec)
        table = tables[spec.pop("table")]
        charts.append(renderer.render(table, x=SAMPLE_DATE, xlabel="Date", **spec))

    print(f"[run] rendered {len(charts)} charts")
    return {"tables": tables, "charts": charts}
