"""
World population data: fetch, parse, linear fit and projection.
"""

from typing import Any, List, Optional

import httpx
import numpy as np
import pandas as pd
from loguru import logger

from sentibot.config import settings
from sentibot.models.schemas import LinearFit, PopulationPoint, PopulationProjection


class PopulationDataError(ValueError):
    """Raised when the population dataset cannot be fetched or used."""


def fetch_dataset(url: Optional[str] = None, client: Optional[httpx.Client] = None) -> Any:
    """GET the dataset and return the decoded JSON body."""
    url = url or settings.POPULATION_API_URL
    owns_client = client is None
    client = client or httpx.Client(timeout=30.0, follow_redirects=True)
    try:
        response = client.get(url)
        response.raise_for_status()
        payload = response.json()
    except httpx.HTTPError as e:
        raise PopulationDataError(f"Failed to fetch population dataset: {e}") from e
    except ValueError as e:
        raise PopulationDataError(f"Population dataset is not valid JSON: {e}") from e
    finally:
        if owns_client:
            client.close()

    logger.info(f"Fetched population dataset from {url}")
    return payload


def parse_dataset(payload: Any) -> List[PopulationPoint]:
    """
    Turn a World Bank ``[meta, records]`` payload into year/population points.

    Records whose ``date`` or ``value`` is missing or non-numeric are dropped.
    The result is sorted by year.
    """
    if not isinstance(payload, list) or len(payload) < 2 or not isinstance(payload[1], list):
        raise PopulationDataError("Unexpected dataset shape: expected [metadata, records]")

    df = pd.DataFrame(payload[1])
    missing = [c for c in ("date", "value") if c not in df.columns]
    if missing:
        raise PopulationDataError(f"Dataset records are missing fields: {missing}")

    df = pd.DataFrame({
        "year": pd.to_numeric(df["date"], errors="coerce"),
        "population": pd.to_numeric(df["value"], errors="coerce"),
    }).dropna()

    dropped = len(payload[1]) - len(df)
    if dropped:
        logger.warning(f"Dropped {dropped} record(s) with missing or non-numeric fields")

    if df["year"].nunique() < 2:
        raise PopulationDataError("Need at least two distinct years to fit a trend")

    df = df.sort_values("year")
    return [
        PopulationPoint(year=int(year), population=float(pop))
        for year, pop in df.itertuples(index=False)
    ]


def fit_linear(points: List[PopulationPoint]) -> LinearFit:
    """Ordinary least-squares line through the points."""
    years = np.array([p.year for p in points], dtype=float)
    pops = np.array([p.population for p in points], dtype=float)
    slope, intercept = np.polyfit(years, pops, 1)
    return LinearFit(slope=float(slope), intercept=float(intercept))


def project(points: List[PopulationPoint], fit: LinearFit, years: Optional[int] = None) -> List[PopulationPoint]:
    years = settings.POPULATION_PROJECTION_YEARS if years is None else years
    last = max(p.year for p in points)
    return [
        PopulationPoint(year=year, population=float(round(fit.predict(year))))
        for year in range(last + 1, last + years + 1)
    ]


def build_projection(points: List[PopulationPoint], years: Optional[int] = None) -> PopulationProjection:
    fit = fit_linear(points)
    logger.info(f"Linear fit: slope={fit.slope:.2f}/yr, intercept={fit.intercept:.2f}")
    return PopulationProjection(history=points, fit=fit, projected=project(points, fit, years))
