from __future__ import annotations
from typing import Any, Mapping

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError

from natal_points.config import Settings, get_settings
from natal_points.deps import get_engine
from natal_points.exceptions import InvalidFieldError, MissingFieldError
from natal_points.models.schemas import BIRTH_FIELDS, BirthMoment, ChartResult, ErrorResponse
from natal_points.services.chart import assemble_chart
from natal_points.services.provider import EphemerisEngine

router = APIRouter(tags=["chart"])

_ERRORS = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}

def parse_birth_moment(data: Mapping[str, Any], source: str) -> BirthMoment:
    """Pflichtfelder prüfen (in fester Reihenfolge) und in BirthMoment umwandeln."""
    for k in BIRTH_FIELDS:
        if k not in data:
            raise MissingFieldError(source, k)
    try:
        return BirthMoment(**{k: data[k] for k in BIRTH_FIELDS})
    except ValidationError as e:
        field = str(e.errors()[0]["loc"][0])
        raise InvalidFieldError(source, field) from e

def _query_doc() -> dict:
    types = {"year": "integer", "month": "integer", "day": "integer"}
    return {"parameters": [
        {"name": k, "in": "query", "required": True, "schema": {"type": types.get(k, "number")}}
        for k in BIRTH_FIELDS
    ]}

@router.get("/chart", response_model=ChartResult, responses=_ERRORS, openapi_extra=_query_doc())
async def chart_from_query(
    request: Request,
    engine: EphemerisEngine = Depends(get_engine),
    settings: Settings = Depends(get_settings),
):
    moment = parse_birth_moment(request.query_params, "query param")
    return await assemble_chart(moment, engine, settings.house_system)

@router.post("/chart", response_model=ChartResult, responses=_ERRORS)
async def chart_from_body(
    request: Request,
    engine: EphemerisEngine = Depends(get_engine),
    settings: Settings = Depends(get_settings),
):
    try:
        body = await request.json()
    except ValueError:
        body = None
    if not isinstance(body, dict):
        body = {}
    moment = parse_birth_moment(body, "body field")
    return await assemble_chart(moment, engine, settings.house_system)
