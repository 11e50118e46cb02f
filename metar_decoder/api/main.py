"""REST API exposing the report decoder."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from metar_decoder.errors import ParseError
from metar_decoder.export.serialize import report_to_dict
from metar_decoder.parser.decoder import decode
from metar_decoder.realtime.feed import MetarFeedError, fetch_latest

logger = logging.getLogger(__name__)

app = FastAPI(title="METAR Decoder API")

# Allow any origin (development). In production, restrict as needed.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


class DecodeRequest(BaseModel):
    """Payload carrying one raw report."""

    report: str = Field(
        ...,
        min_length=1,
        description="Raw report text, e.g. 'KXYZ 151854Z 18012KT 9999 FEW030 22/18 Q1013'",
    )


def _parse_error_detail(exc: ParseError) -> dict[str, Any]:
    return {
        "message": exc.args[0],
        "offset": exc.offset,
        "element": exc.element,
        "expected": list(exc.expected),
    }


@app.get("/health")
def health() -> dict[str, bool]:
    """Basic health check."""
    return {"ok": True}


@app.post("/decode")
def decode_report(payload: DecodeRequest):  # noqa: D401
    """Decode a raw report into its structured form."""
    try:
        report = decode(payload.report)
    except ParseError as exc:
        logger.info("Rejected report %r: %s", payload.report, exc.args[0])
        raise HTTPException(status_code=422, detail=_parse_error_detail(exc)) from exc
    return report_to_dict(report)


@app.get("/latest/{icao}")
async def latest(icao: str):  # noqa: D401
    """Fetch and decode the latest observation for station ICAO."""
    if len(icao) != 4 or not icao.isalpha():
        raise HTTPException(status_code=400, detail="ICAO code must be four letters")
    try:
        observation = await fetch_latest(icao)
    except MetarFeedError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
    except ParseError as exc:
        raise HTTPException(status_code=422, detail=_parse_error_detail(exc)) from exc
    return {
        "observed_at": observation.observed_at.isoformat(),
        "raw": observation.raw,
        "report": report_to_dict(observation.report),
    }
