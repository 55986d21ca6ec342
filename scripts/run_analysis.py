#!/usr/bin/env python
"""
Wastewater SARS-CoV-2 signal vs. weekly COVID-19 cases for one city and year.

Inputs (in data_dir, see configs/pipeline.yaml):
  - cases.xlsx          weekly cases per public health unit
  - surveillance.xlsx   daily standardized wastewater signal
  - aggregate.csv       weekly weighted average concentration

Outputs (output.mode=file):
  - artifacts/figures/local_signal.png
  - artifacts/figures/regional_average.png
  - artifacts/figures/weekly_cases.png
  - artifacts/figures/normalized_overlay.png

Usage:
  python scripts/run_analysis.py --config configs/pipeline.yaml --output-mode file
"""

from __future__ import annotations

import pathlib

# --- repo-root import shim (so `import wastewater` works from scripts/) ---
import sys

sys.path.append(str(pathlib.Path(__file__).resolve().parents[1]))
# --------------------------------------------------------------------------

import argparse
from typing import List, Optional

import matplotlib

from wastewater.errors import PipelineError
from wastewater.utils.io import CONFIG_PATH, load_config, resolve_paths


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    ap.add_argument("--config", default=str(CONFIG_PATH), help="YAML config (default: configs/pipeline.yaml)")
    ap.add_argument("--data-dir", default=None, help="directory holding the three input files")
    ap.add_argument("--year", type=int, default=None, help="calendar year to keep")
    ap.add_argument("--output-mode", choices=["display", "file"], default=None)
    ap.add_argument("--output-dir", default=None, help="where PNGs go when --output-mode=file")
    ap.add_argument(
        "--date-policy",
        choices=["strict", "coerce"],
        default=None,
        help="strict: abort on unparsable dates; coerce: treat them as missing",
    )
    ap.add_argument(
        "--allow-empty",
        action="store_true",
        help="warn instead of aborting when a filter leaves no rows",
    )
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_argparser().parse_args(argv)

    cfg = load_config(args.config)
    if args.data_dir is not None:
        cfg["data_dir"] = args.data_dir
    if args.year is not None:
        cfg["year"] = args.year
    if args.output_mode is not None:
        cfg["output"]["mode"] = args.output_mode
    if args.output_dir is not None:
        cfg["output"]["dir"] = args.output_dir
    if args.date_policy is not None:
        cfg["date_policy"] = args.date_policy
    if args.allow_empty:
        cfg["filters"]["allow_empty"] = True

    out_cfg = cfg["output"]
    if out_cfg["mode"] == "file":
        matplotlib.use("Agg")

    # imported after the backend is chosen
    from wastewater.pipeline import run_pipeline
    from wastewater.plots.line_charts import LineChartRenderer

    paths = resolve_paths(cfg)
    print(f"[run] data: {paths['data']}  year: {cfg['year']}  output: {out_cfg['mode']}")

    renderer = LineChartRenderer(
        output_mode=out_cfg["mode"],
        output_dir=paths["figures"],
        dpi=int(out_cfg.get("dpi", 150)),
    )
    try:
        run_pipeline(cfg, paths["data"], renderer)
    except PipelineError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
