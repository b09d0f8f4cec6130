"""
World population chart rendering and SVG export.
"""

from pathlib import Path
from typing import Union

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

from sentibot.models.schemas import PopulationProjection  # noqa: E402

WIDTH_PX, HEIGHT_PX, DPI = 800, 600, 100
TITLE = "World Population Growth Over Time"
CAPTION = "Source: World Bank API"


def _ensure_dir(p: Path) -> None:
    if p.parent and not p.parent.exists():
        p.parent.mkdir(parents=True, exist_ok=True)


def render_chart(projection: PopulationProjection, out_path: Union[str, Path]) -> Path:
    """
    Scatter of historical points plus the regression line over history and
    projection, written as SVG to ``out_path``.
    """
    out_path = Path(out_path)
    _ensure_dir(out_path)

    hist_years = [p.year for p in projection.history]
    hist_pops = [p.population for p in projection.history]
    proj_years = [p.year for p in projection.projected]
    proj_pops = [p.population for p in projection.projected]

    line_years = hist_years + proj_years
    line_pops = [projection.fit.predict(y) for y in line_years]

    fig, ax = plt.subplots(figsize=(WIDTH_PX / DPI, HEIGHT_PX / DPI), dpi=DPI)
    try:
        ax.scatter(hist_years, hist_pops, s=9, color="steelblue", label="Actual")
        ax.plot(line_years, line_pops, color="red", linewidth=1.2, label="Linear trend")

        ax.set_xlim(min(hist_years), max(line_years))
        # top covers a declining trend too
        ax.set_ylim(min(hist_pops), max(proj_pops + hist_pops))
        ax.set_xlabel("Year")
        ax.set_ylabel("Population")
        ax.set_title(TITLE, fontsize=14, fontweight="bold")
        fig.text(0.5, 0.01, CAPTION, ha="center", fontsize=9)
        ax.legend(loc="upper left")

        fig.savefig(out_path, format="svg")
    finally:
        plt.close(fig)

    return out_path
