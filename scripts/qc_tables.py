"""Quick QC of the filtered and combined tables before trusting the charts."""
from pathlib import Path
import sys

sys.path.append(str(Path(__file__).resolve().parents[1]))

from wastewater.pipeline import build_tables, date_span
from wastewater.utils.io import load_config, resolve_paths


def qc_issues(tables):
    issues = []
    cases, regional, combined = tables["cases"], tables["regional"], tables["combined"]

    # one row per week expected after the jurisdiction filter
    for name, df in (("cases", cases), ("regional", regional)):
        dups = df.duplicated(["SampleDate"]).sum()
        if dups:
            issues.append(f"{name}: {dups} duplicate rows on SampleDate")

    if (cases["# of cases"] < 0).any():
        issues.append("cases: negative case counts found")
    if (regional["w_avg"] < 0).any():
        issues.append("regional: negative weighted averages found")

    missing = combined.loc[combined["weighted_avg"].isna(), "SampleDate"]
    if len(missing):
        weeks = ", ".join(f"{d:%Y-%m-%d}" for d in missing)
        issues.append(f"combined: {len(missing)} case weeks without wastewater data ({weeks})")
    return issues


def main(config=None):
    cfg = load_config(config)
    cfg["output"]["mode"] = "display"  # nothing is written by QC
    paths = resolve_paths(cfg)
    tables = build_tables(cfg, paths["data"])

    for name in ("cases", "local_signal", "regional", "combined"):
        df = tables[name]
        print(f"[qc] {name}: rows={len(df):,} range={date_span(df['SampleDate'])}")

    issues = qc_issues(tables)
    print("[qc] OK" if not issues else "[qc] Issues:")
    for m in issues:
        print(" -", m)
    return issues


if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else None)
