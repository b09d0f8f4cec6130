"""
World population projection: batch entry point.

fetch dataset -> linear fit -> 50-year projection -> SVG chart.
"""

import sys
from pathlib import Path
from typing import Optional, Union

import httpx
from loguru import logger

from sentibot.config import settings
from sentibot.main import configure_logging
from sentibot.services.chart_service import render_chart
from sentibot.services.population_service import (
    PopulationDataError,
    build_projection,
    fetch_dataset,
    parse_dataset,
)


def run_pipeline(
    out_path: Union[str, Path, None] = None,
    url: Optional[str] = None,
    client: Optional[httpx.Client] = None,
    years: Optional[int] = None,
) -> Path:
    payload = fetch_dataset(url, client=client)
    points = parse_dataset(payload)
    projection = build_projection(points, years)
    path = render_chart(projection, out_path or settings.CHART_PATH)
    logger.info(
        f"Chart written to {path} ({len(points)} historical, {len(projection.projected)} projected points)"
    )
    return path


def run() -> int:
    configure_logging()
    try:
        run_pipeline()
    except PopulationDataError as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(run())
