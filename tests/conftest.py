from __future__ import annotations

import pytest

from semver32.config import get_settings
from semver32.number import Number

# (major, minor, patch, bump major fails, bump minor fails, bump patch fails, short, full)
REFERENCE_NUMBERS = [
    (0, 0, 0, False, False, False, "0", "0.0.0"),
    (0, 0, 1, False, False, False, "0.0.1", "0.0.1"),
    (0, 0, 255, False, False, True, "0.0.255", "0.0.255"),
    (0, 1, 0, False, False, False, "0.1", "0.1.0"),
    (0, 1, 1, False, False, False, "0.1.1", "0.1.1"),
    (0, 1, 255, False, False, True, "0.1.255", "0.1.255"),
    (0, 255, 0, False, True, False, "0.255", "0.255.0"),
    (0, 255, 1, False, True, False, "0.255.1", "0.255.1"),
    (0, 255, 255, False, True, True, "0.255.255", "0.255.255"),
    (1, 0, 0, False, False, False, "1", "1.0.0"),
    (1, 0, 1, False, False, False, "1.0.1", "1.0.1"),
    (1, 0, 255, False, False, True, "1.0.255", "1.0.255"),
    (1, 1, 0, False, False, False, "1.1", "1.1.0"),
    (1, 1, 1, False, False, False, "1.1.1", "1.1.1"),
    (1, 1, 255, False, False, True, "1.1.255", "1.1.255"),
    (1, 255, 0, False, True, False, "1.255", "1.255.0"),
    (1, 255, 1, False, True, False, "1.255.1", "1.255.1"),
    (1, 255, 255, False, True, True, "1.255.255", "1.255.255"),
    (65535, 0, 0, True, False, False, "65535", "65535.0.0"),
    (65535, 0, 1, True, False, False, "65535.0.1", "65535.0.1"),
    (65535, 0, 255, True, False, True, "65535.0.255", "65535.0.255"),
    (65535, 1, 0, True, False, False, "65535.1", "65535.1.0"),
    (65535, 1, 1, True, False, False, "65535.1.1", "65535.1.1"),
    (65535, 1, 255, True, False, True, "65535.1.255", "65535.1.255"),
    (65535, 255, 0, True, True, False, "65535.255", "65535.255.0"),
    (65535, 255, 1, True, True, False, "65535.255.1", "65535.255.1"),
    (65535, 255, 255, True, True, True, "65535.255.255", "65535.255.255"),
]


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(params=REFERENCE_NUMBERS, ids=lambda row: row[7])
def reference(request):
    return request.param


@pytest.fixture
def reference_number(reference) -> Number:
    major, minor, patch = reference[:3]
    return Number.new(major, minor, patch)
