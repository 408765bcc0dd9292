"""
Minimal test configuration/fixtures for the keyword-to-image resolver.
"""

import logging
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from app.core.pyd_schemas import PhotoResult
from app.infrastructure.adapters.keyword_table_static import StaticKeywordTable


def pytest_configure(config):  # pylint: disable=unused-argument
    """Send app debug logs to pytest's captured output."""
    logging.getLogger("app").setLevel(logging.DEBUG)


@pytest.fixture
def keyword_table():
    """A small table with one single-image and one multi-image keyword."""
    return StaticKeywordTable(
        {
            "moon": ["/images/moon/moon01.jpg"],
            "river": [
                "/images/river/river01.jpg",
                "/images/river/river02.jpg",
                "/images/river/river03.jpg",
                "/images/river/river04.jpg",
            ],
        }
    )


@pytest.fixture
def fake_adapters(keyword_table):
    """Adapters container with an AsyncMock image search.

    The search returns a fixed photo so miss-path assertions can check both
    the request and the mapped result.
    """
    image_search = SimpleNamespace(
        random_photo=AsyncMock(
            return_value=PhotoResult(
                url="https://img/x.jpg", description="a calm ocean"
            )
        )
    )
    return SimpleNamespace(keyword_table=keyword_table, image_search=image_search)
