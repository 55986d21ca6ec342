"""
Line charts for the filtered and combined tables.

The renderer is constructed once and passed into the pipeline; it decides
whether figures are shown or written to ``output_dir`` as PNG files.
"""

from pathlib import Path
from typing import Optional, Tuple

import matplotlib.pyplot as plt
import pandas as pd

from wastewater.utils.io import ensure_dir

OUTPUT_MODES = ("display", "file")


class LineChartRenderer:
    def __init__(
        self,
        output_mode: str = "file",
        output_dir: str | Path | None = None,
        dpi: int = 150,
        figsize: Tuple[float, float] = (10, 5),
    ):
        if output_mode not in OUTPUT_MODES:
            raise ValueError(f"output_mode must be one of {OUTPUT_MODES}, got '{output_mode}'")
        if output_mode == "file" and output_dir is None:
            raise ValueError("output_dir is required when output_mode='file'")
        self.output_mode = output_mode
        self.output_dir = Path(output_dir) if output_dir is not None else None
        self.dpi = dpi
        self.figsize = figsize

    def render(
        self,
        df: pd.DataFrame,
        x: str,
        y: str,
        title: str,
        xlabel: str,
        ylabel: str,
        color: Optional[str] = None,
        filename: Optional[str] = None,
        line_color: str = "steelblue",
        linewidth: float = 1.5,
    ) -> Optional[Path]:
        """Draw ``y`` against ``x`` (ascending), one line per ``color`` group if given."""
        data = df.sort_values(x, kind="stable")
        fig, ax = plt.subplots(figsize=self.figsize)

        if color is None:
            ax.plot(data[x], data[y], color=line_color, linewidth=linewidth)
        else:
            for key, grp in data.groupby(color, sort=False):
                ax.plot(grp[x], grp[y], label=str(key), linewidth=linewidth)
            ax.legend(
                title=color,
                loc="lower center",
                bbox_to_anchor=(0.5, 1.0),
                ncol=max(1, data[color].nunique()),
                frameon=False,
            )

        ax.set_title(title, loc="center", pad=28 if color is not None else 6)
        ax.set_xlabel(xlabel)
        ax.set_ylabel(ylabel)
        ax.grid(True, alpha=0.3)
        for side in ("top", "right"):
            ax.spines[side].set_visible(False)
        fig.autofmt_xdate()
        fig.tight_layout()

        out = None
        try:
            if self.output_mode == "file":
                ensure_dir(self.output_dir)
                out = self.output_dir / f"{filename or y}.png"
                fig.savefig(out, dpi=self.dpi, bbox_inches="tight")
                print(f"[render] {title} → {out}")
            else:
                plt.show()
        finally:
            plt.close(fig)
        return out
