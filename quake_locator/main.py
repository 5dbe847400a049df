"""Cloud Function Entry Points.

Thin HTTP wrappers that load configuration, run one action through the
orchestrator, and return its state as JSON.
"""

import json
import logging
import os
from typing import Any

import functions_framework
from flask import Request

from quake_locator.core.search import SearchForm
from quake_locator.core.state import SearchState, Status, state_to_dict
from quake_locator.orchestrator import Orchestrator
from quake_locator.shell.config_loader import load_config


# Configure logging
log_level = os.environ.get("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


STATUS_CODES = {
    Status.READY: 200,
    Status.EMPTY: 200,
    Status.INVALID: 400,
    Status.NOT_FOUND: 404,
    Status.FAILED: 502,
}


def _get_orchestrator() -> Orchestrator:
    """Build an orchestrator from the configured file and environment."""
    return Orchestrator(load_config())


def _respond(state: SearchState) -> tuple[dict[str, Any], int]:
    return state_to_dict(state), STATUS_CODES.get(state.status, 200)


def _form_from_args(args: Any) -> SearchForm:
    return SearchForm(
        location=args.get("location", ""),
        start_date=args.get("start_date", ""),
        end_date=args.get("end_date", ""),
        min_magnitude=args.get("min_magnitude", ""),
        radius_km=args.get("radius_km", ""),
    )


@functions_framework.http
def earthquake_search(request: Request) -> tuple[dict[str, Any], int]:
    """HTTP entry point for the full search form.

    Query parameters: location, start_date, end_date (DD-MM-YYYY),
    min_magnitude, radius_km.

    Args:
        request: Flask request object

    Returns:
        Tuple of (state dict, HTTP status code)
    """
    form = _form_from_args(request.args)
    logger.info("Search request for %r", form.location)

    try:
        state = _get_orchestrator().search_form(form)
    except Exception as e:
        logger.exception("Unexpected error in earthquake search")
        return {
            "status": "error",
            "message": str(e),
        }, 500

    return _respond(state)


@functions_framework.http
def quick_search(request: Request) -> tuple[dict[str, Any], int]:
    """HTTP entry point for quick search (query parameter: location)."""
    location = request.args.get("location", "")
    logger.info("Quick search request for %r", location)

    try:
        state = _get_orchestrator().quick_search(location)
    except Exception as e:
        logger.exception("Unexpected error in quick search")
        return {
            "status": "error",
            "message": str(e),
        }, 500

    return _respond(state)


@functions_framework.http
def latest_earthquake(request: Request) -> tuple[dict[str, Any], int]:
    """HTTP entry point describing the most recent earthquake."""
    try:
        summary = _get_orchestrator().latest_summary()
    except Exception as e:
        logger.exception("Unexpected error fetching latest earthquake")
        return {
            "status": "error",
            "message": str(e),
        }, 500

    return {"summary": summary}, 200


# For local testing
if __name__ == "__main__":
    import sys

    class MockRequest:
        args = {"location": sys.argv[1] if len(sys.argv) > 1 else "Tokyo"}

    response, status = quick_search(MockRequest())
    print(f"\nResponse ({status}):")
    print(json.dumps(response, indent=2))
