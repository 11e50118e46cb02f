"""Retrieve and decode the latest METAR observation for a given ICAO station."""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional, Tuple

import httpx

from metar_decoder.model.report import Report
from metar_decoder.parser.decoder import decode
from metar_decoder.settings import BACKOFF, FEED_URL, MAX_RETRIES, TIMEOUT_S

__all__ = ["LatestObservation", "MetarFeedError", "latest_report", "fetch_latest"]

logger = logging.getLogger(__name__)


class MetarFeedError(RuntimeError):
    """Raised when the observation feed cannot be retrieved or understood."""


@dataclass(frozen=True)
class LatestObservation:
    """Feed issue time, the raw report line and its decoded form."""

    observed_at: datetime
    raw: str
    report: Report


async def _fetch_text_with_retry(
    url: str, transport: Optional[httpx.AsyncBaseTransport] = None
) -> str:  # noqa: D401
    async with httpx.AsyncClient(timeout=TIMEOUT_S, transport=transport) as client:
        delay = 0.5
        for attempt in range(1, MAX_RETRIES + 1):
            if attempt > 1:
                await asyncio.sleep(delay)
                delay *= BACKOFF
            try:
                resp = await client.get(url)
                resp.raise_for_status()
                return resp.text
            except (httpx.HTTPError, httpx.TimeoutException) as exc:
                logger.warning("METAR fetch attempt %d/%d failed: %s", attempt, MAX_RETRIES, exc)
                if attempt == MAX_RETRIES:
                    raise MetarFeedError("Failed to fetch METAR after retries") from exc
    raise MetarFeedError("No fetch attempts configured")


def _split_feed_text(text: str) -> Tuple[datetime, str]:  # noqa: D401
    """Split a station file into its issue time and report line.

    The file holds two lines: ``YYYY/MM/DD HH:MM`` and the report itself.
    """
    lines = [line.strip() for line in text.strip().splitlines() if line.strip()]
    if len(lines) < 2:
        raise MetarFeedError("Unexpected METAR format")

    try:
        observed_at = datetime.strptime(lines[0], "%Y/%m/%d %H:%M").replace(tzinfo=timezone.utc)
    except ValueError as exc:
        raise MetarFeedError("Invalid observation time in METAR feed") from exc

    return observed_at, lines[1]


async def fetch_latest(
    icao: str, transport: Optional[httpx.AsyncBaseTransport] = None
) -> LatestObservation:
    """Fetch and decode the latest report; decode failures propagate as ParseError."""
    url = FEED_URL.format(icao=icao.upper())
    text = await _fetch_text_with_retry(url, transport=transport)
    observed_at, raw = _split_feed_text(text)
    logger.info("Fetched %s report issued %s", icao.upper(), observed_at.isoformat())
    return LatestObservation(observed_at=observed_at, raw=raw, report=decode(raw))


def latest_report(icao: str) -> LatestObservation:  # noqa: D401
    """Return the latest decoded observation for station ICAO.

    Synchronous wrapper around :func:`fetch_latest`.
    """
    return asyncio.run(fetch_latest(icao))
