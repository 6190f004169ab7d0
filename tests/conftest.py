"""Pytest bootstrap configuration.

Pin settings that affect generated locations before application modules
are imported, and reset the cached builder between tests.
"""
import os

import pytest

os.environ.setdefault("DEBUG", "false")
os.environ.setdefault("LOCATION__IDENTIFIER", "id")

from infrastructure.external.storage import get_location_builder, get_location_config


@pytest.fixture(autouse=True)
def _reset_location_cache():
    get_location_config.cache_clear()
    get_location_builder.cache_clear()
    yield
    get_location_config.cache_clear()
    get_location_builder.cache_clear()
