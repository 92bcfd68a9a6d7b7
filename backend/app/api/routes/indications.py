"""Indications Route — the relay's single request handler.

Invariants:
    - POST only; any other method → 405 text/plain "Method Not Allowed"
      (mapped in app/api/error_handlers.py), nothing else runs
    - Body parsed before the API key is checked
    - Success → 200 {"text": ...}; every failure raises and is mapped to
      500 {"error": ...} by app/api/error_handlers.py
    - Served on /api/v1/generate-indications and on the legacy
      /.netlify/functions/generate-indications path used by existing front-ends

Design Decisions:
    - Body parsed by hand instead of a pydantic body parameter: FastAPI would turn
      malformed JSON into a 422, but malformed input is a 500 like every other failure
"""

import json
import logging

import httpx
from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError

from app.config import Settings, get_settings
from app.core.errors import InvalidRequestBodyError
from app.infrastructure.gemini_client import get_upstream_transport
from app.schemas.indications import (
    ErrorResponse, IndicationsRequest, IndicationsResponse,
)
from app.services.generate_indications import generate_indications

logger = logging.getLogger(__name__)
router = APIRouter(tags=["indications"])


async def parse_indications_body(request: Request) -> IndicationsRequest:
    """Decode the raw body into an IndicationsRequest or raise InvalidRequestBodyError."""
    raw = await request.body()
    try:
        data = json.loads(raw)
    except ValueError as e:
        raise InvalidRequestBodyError(f"Invalid JSON body: {e}") from e
    try:
        return IndicationsRequest.model_validate(data)
    except ValidationError as e:
        raise InvalidRequestBodyError(
            f"Invalid request body: {_describe_validation_errors(e)}",
        ) from e


def _describe_validation_errors(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        field = ".".join(str(loc) for loc in err["loc"])
        parts.append(f"{field}: {err['msg']}" if field else err["msg"])
    return "; ".join(parts)


@router.post(
    "/api/v1/generate-indications",
    response_model=IndicationsResponse,
    responses={500: {"model": ErrorResponse}},
)
@router.post(
    "/.netlify/functions/generate-indications",
    response_model=IndicationsResponse,
    include_in_schema=False,
)
async def generate_indications_route(
    request: Request,
    settings: Settings = Depends(get_settings),
    transport: httpx.AsyncBaseTransport | None = Depends(get_upstream_transport),
):
    """Compare two versions of a legal text and draft the indications."""
    body = await parse_indications_body(request)
    text = await generate_indications(body, settings, transport)
    return IndicationsResponse(text=text)
