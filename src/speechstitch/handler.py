"""Serverless entry point: validate the event, stitch, report where the audio went."""

from __future__ import annotations

import asyncio
import base64
import json
import logging
from typing import Any

from pydantic import ValidationError

from speechstitch.models import ErrorBody, StitchRequest
from speechstitch.services.stitcher import get_stitcher

logger = logging.getLogger(__name__)

TEXTS_ERROR = "texts must be a non-empty array of strings"
INVALID_JSON_ERROR = "Invalid request: body is not valid JSON"


def _validation_message(exc: ValidationError) -> str:
    errors = exc.errors()
    if any(err["loc"] and err["loc"][0] == "texts" for err in errors):
        return TEXTS_ERROR
    err = errors[0]
    field = ".".join(str(part) for part in err["loc"]) or "body"
    return f"Invalid request: {field}: {err['msg']}"


def bad_request(message: str) -> tuple[int, dict[str, Any]]:
    logger.info(f"Rejected request: {message}")
    return 400, ErrorBody(error=message).model_dump()


async def handle_payload(payload: Any) -> tuple[int, dict[str, Any]]:
    """Validate *payload* and run the stitcher; returns (status code, JSON body)."""
    if not isinstance(payload, dict):
        return bad_request(TEXTS_ERROR)
    try:
        request = StitchRequest.model_validate(payload)
    except ValidationError as e:
        return bad_request(_validation_message(e))

    result = await get_stitcher().stitch(request)
    return 200, result.model_dump(by_alias=True)


def _extract_payload(event: Any) -> Any:
    """Unwrap an API Gateway proxy event; direct invocations are the payload."""
    if isinstance(event, dict) and "texts" not in event and isinstance(event.get("body"), str):
        body = event["body"]
        if event.get("isBase64Encoded"):
            body = base64.b64decode(body).decode("utf-8")
        return json.loads(body)
    return event


def handler(event: Any, context: Any = None) -> dict[str, Any]:
    """Lambda handler."""
    try:
        payload = _extract_payload(event)
    except ValueError:
        status, body = bad_request(INVALID_JSON_ERROR)
    else:
        status, body = asyncio.run(handle_payload(payload))
    return {"statusCode": status, "body": json.dumps(body)}
