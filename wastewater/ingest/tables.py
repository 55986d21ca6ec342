"""Generic table loader: spreadsheet or delimited text → DataFrame, header untouched."""

from pathlib import Path
from typing import Iterable, Optional

import pandas as pd

from wastewater.errors import SchemaMismatchError, SourceFormatError, SourceNotFoundError

SUFFIX_TO_FORMAT = {
    ".xlsx": "excel",
    ".xlsm": "excel",
    ".xls": "excel",
    ".csv": "csv",
    ".txt": "csv",
}


def infer_format(path: Path) -> str:
    fmt = SUFFIX_TO_FORMAT.get(path.suffix.lower())
    if fmt is None:
        raise SourceFormatError(
            f"Cannot infer table format from suffix '{path.suffix}'; "
            f"pass fmt='excel' or fmt='csv'",
            source=path.name,
        )
    return fmt


def check_columns(df: pd.DataFrame, required: Iterable[str], source: str, stage: str = "load") -> None:
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise SchemaMismatchError(
            f"Expected columns {missing} not found; got {df.columns.tolist()}",
            stage=stage,
            source=source,
        )


def load_table(
    path: str | Path,
    fmt: Optional[str] = None,
    required: Iterable[str] = (),
    sheet: int | str = 0,
) -> pd.DataFrame:
    p = Path(path)
    if not p.is_file():
        raise SourceNotFoundError(f"Input file does not exist: {p}", source=p.name)

    fmt = fmt or infer_format(p)
    if fmt == "excel":
        df = pd.read_excel(p, sheet_name=sheet)
    elif fmt == "csv":
        df = pd.read_csv(p)
    else:
        raise SourceFormatError(f"Unknown table format '{fmt}'", source=p.name)

    check_columns(df, required, source=p.name)
    print(f"[load] {p.name}: {len(df):,} rows, {df.shape[1]} cols")
    return df
