"""Thin ingress boundary helpers for the Azure Functions HTTP entrypoints.

Keeps ``function_app.py`` down to route bindings and handoff:

- **deserialize_request_body** — normalises the JSON body (``str``,
  ``bytes`` or already-parsed ``dict``) to a plain dict.
- **build_area_request** — validates the body against the pydantic
  ``AreaRequest`` schema, turning schema failures into ``ContractError``.
- **handle_area_request** — runs the calculation and maps the outcome
  to an HTTP status code and JSON-ready body.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError as PydanticValidationError

from land_area.core.exceptions import ContractError, LandAreaError

if TYPE_CHECKING:
    from land_area.core.config import CalculatorConfig
    from land_area.models.payloads import AreaRequest

logger = logging.getLogger("land_area.core.ingress")

HTTP_OK = 200
HTTP_BAD_REQUEST = 400
HTTP_UNPROCESSABLE = 422


# ---------------------------------------------------------------------------
# Request body deserialisation
# ---------------------------------------------------------------------------


def deserialize_request_body(raw: str | bytes | dict[str, Any] | object) -> dict[str, Any]:
    """Normalise an HTTP request body to a plain dict.

    Args:
        raw: The raw body bytes/text, or a dict that was already parsed.

    Returns:
        Parsed dict payload.

    Raises:
        ContractError: If *raw* is not a JSON object.
    """
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            msg = f"Request body is not valid UTF-8: {exc}"
            raise ContractError(msg, stage="ingress", code="INVALID_ENCODING") from exc
    if isinstance(raw, str):
        try:
            parsed = json.loads(raw)
        except (json.JSONDecodeError, ValueError) as exc:
            msg = f"Request body is not valid JSON: {exc}"
            raise ContractError(msg, stage="ingress", code="INVALID_JSON") from exc
        if not isinstance(parsed, dict):
            msg = f"Request body JSON must be an object, got {type(parsed).__name__}"
            raise ContractError(msg, stage="ingress", code="INVALID_INPUT_TYPE")
        return parsed
    if isinstance(raw, dict):
        return raw
    msg = f"Unexpected request body type: {type(raw).__name__}"
    raise ContractError(msg, stage="ingress", code="INVALID_INPUT_TYPE")


# ---------------------------------------------------------------------------
# Schema validation
# ---------------------------------------------------------------------------


def build_area_request(payload: dict[str, Any]) -> AreaRequest:
    """Validate a body dict against ``AreaRequest``.

    Raises:
        ContractError: If the payload does not match the schema.
    """
    from land_area.models.payloads import AreaRequest

    try:
        return AreaRequest.model_validate(payload)
    except PydanticValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or 'body'}: {err['msg']}"
            for err in exc.errors()
        )
        msg = f"Invalid area request: {problems}"
        raise ContractError(msg, stage="ingress", code="INVALID_REQUEST") from exc


# ---------------------------------------------------------------------------
# Request handler
# ---------------------------------------------------------------------------


def handle_area_request(
    raw: str | bytes | dict[str, Any] | object,
    *,
    config: CalculatorConfig | None = None,
    correlation_id: str = "",
) -> tuple[int, dict[str, object]]:
    """Run an area calculation for an HTTP request body.

    Args:
        raw: Request body (see ``deserialize_request_body``).
        config: Calculator configuration.
        correlation_id: Invocation identifier echoed in error payloads.

    Returns:
        ``(status_code, body)``: 200 with the calculation, 400 for a
        malformed request, 422 for a well-formed request whose
        coordinates cannot be measured.
    """
    from land_area.calculator import calculate_area

    try:
        request = build_area_request(deserialize_request_body(raw))
        calculation = calculate_area(request.mode, request.calculator_points(), config=config)
    except LandAreaError as exc:
        exc.correlation_id = exc.correlation_id or correlation_id
        status = HTTP_BAD_REQUEST if exc.category == "contract" else HTTP_UNPROCESSABLE
        logger.info(
            "Area request rejected | status=%d | code=%s | correlation_id=%s | %s",
            status,
            exc.code,
            correlation_id,
            exc.message,
        )
        return status, {"error": exc.to_error_dict()}

    return HTTP_OK, calculation.to_dict()
