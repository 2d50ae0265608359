"""Azure Functions entry point — Land Area Calculator.

This module registers the HTTP functions using the Python v2 programming
model.

All business logic lives in the land_area package. This file is purely
the wiring layer between Azure Functions bindings and application code.
"""

from __future__ import annotations

import json
import logging

import azure.functions as func

from land_area.calculator import InvalidModeError, load_sample
from land_area.conversion import unit_table
from land_area.core.config import CalculatorConfig
from land_area.core.constants import MODE_GPS
from land_area.core.ingress import HTTP_BAD_REQUEST, HTTP_OK, handle_area_request

app = func.FunctionApp(http_auth_level=func.AuthLevel.ANONYMOUS)

logger = logging.getLogger("land_area.function_app")

# Fail fast on bad app settings at cold start
CONFIG = CalculatorConfig.from_env()


def _json_response(body: object, status_code: int = HTTP_OK) -> func.HttpResponse:
    return func.HttpResponse(
        json.dumps(body, ensure_ascii=False),
        status_code=status_code,
        mimetype="application/json",
        charset="utf-8",
    )


# ---------------------------------------------------------------------------
# HTTP: Calculate Area
# ---------------------------------------------------------------------------


@app.function_name("calculate_area")
@app.route(route="area", methods=["POST"])
def calculate_area(req: func.HttpRequest, context: func.Context) -> func.HttpResponse:
    """Compute the area of a polygon posted as ``{"mode": ..., "points": [...]}``."""
    status, body = handle_area_request(
        req.get_body(),
        config=CONFIG,
        correlation_id=context.invocation_id,
    )
    return _json_response(body, status)


# ---------------------------------------------------------------------------
# HTTP: Sample input and unit table
# ---------------------------------------------------------------------------


@app.function_name("area_sample")
@app.route(route="area/sample", methods=["GET"])
def area_sample(req: func.HttpRequest) -> func.HttpResponse:
    """Return the example vertices for ``?mode=gps`` (default) or ``?mode=manual``."""
    mode = req.params.get("mode", MODE_GPS)
    try:
        points = load_sample(mode)
    except InvalidModeError as exc:
        return _json_response({"error": exc.to_error_dict()}, HTTP_BAD_REQUEST)
    return _json_response({"mode": mode, "points": points})


@app.function_name("area_units")
@app.route(route="area/units", methods=["GET"])
def area_units(req: func.HttpRequest) -> func.HttpResponse:
    """Return the supported land units and their square-foot definitions."""
    return _json_response({"units": unit_table()})
