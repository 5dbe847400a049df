"""Cloud Function Entry Point - Root Module.

This is the root-level entry point for Google Cloud Functions.
It imports from the quake_locator package.
"""

from quake_locator.main import (
    earthquake_search,
    latest_earthquake,
    quick_search,
)

__all__ = [
    "earthquake_search",
    "latest_earthquake",
    "quick_search",
]
