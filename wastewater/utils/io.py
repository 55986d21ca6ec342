"""IO helpers: YAML loading, config defaults, path resolution, and dir creation."""

import copy
from pathlib import Path
from typing import Any, Dict

import yaml

CONFIG_PATH = Path(__file__).resolve().parents[2] / "configs" / "pipeline.yaml"

# run-level settings only; sources, metrics and place names live in the YAML file
DEFAULT_CONFIG: Dict[str, Any] = {
    "project_root": ".",
    "data_dir": "data/raw",
    "date_policy": "strict",
    "filters": {"allow_empty": False},
    "output": {"mode": "file", "dir": "artifacts/figures", "dpi": 150},
}
REQUIRED_KEYS = ("year", "place", "sources", "metrics")


def load_yaml(path: str | Path) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def ensure_dir(p: Path) -> None:
    p.mkdir(parents=True, exist_ok=True)


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    out = copy.deepcopy(base)
    for k, v in override.items():
        # predicate and column lists replace rather than merge
        if isinstance(v, dict) and isinstance(out.get(k), dict) and k != "equals":
            out[k] = _merge(out[k], v)
        else:
            out[k] = copy.deepcopy(v)
    return out


def load_config(path: str | Path | None = None) -> Dict[str, Any]:
    """Run-level defaults overlaid with the YAML file at ``path`` (configs/pipeline.yaml if omitted)."""
    path = Path(path) if path is not None else CONFIG_PATH
    cfg = _merge(DEFAULT_CONFIG, load_yaml(path))
    missing = [k for k in REQUIRED_KEYS if k not in cfg]
    if missing:
        raise KeyError(f"{path.name} is missing required key(s) {missing}")
    return cfg


def resolve_paths(cfg: Dict[str, Any]) -> Dict[str, Path]:
    """
    Returns a dict of canonical project paths.

    Keys returned:
      root, data, figures

    Relative ``data_dir`` and ``output.dir`` are taken from the project root.
    The figures directory is only created when charts are written to disk.
    """
    root = Path(cfg.get("project_root", ".")).resolve()
    data_dir = Path(cfg.get("data_dir", "data/raw"))
    out_cfg = cfg.get("output", {})
    fig_dir = Path(out_cfg.get("dir", "artifacts/figures"))

    paths: Dict[str, Path] = {
        "root": root,
        "data": data_dir if data_dir.is_absolute() else root / data_dir,
        "figures": fig_dir if fig_dir.is_absolute() else root / fig_dir,
    }

    if out_cfg.get("mode", "file") == "file":
        ensure_dir(paths["figures"])

    return paths
