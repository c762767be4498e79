"""Pytest configuration and shared fixtures."""

from collections.abc import Callable
from typing import Any
from unittest.mock import AsyncMock

import httpx
import pytest

from frinkiac.config import Settings
from frinkiac.core.middleware import limiter


@pytest.fixture(autouse=True)
def reset_rate_limits():
    """Start every test with fresh rate limit counters."""
    limiter.reset()
    yield


@pytest.fixture
def mock_http_client():
    """Mock httpx.AsyncClient for external API calls."""
    mock_client = AsyncMock(spec=httpx.AsyncClient)
    mock_client.get = AsyncMock()
    mock_client.aclose = AsyncMock()
    return mock_client


@pytest.fixture
def mock_settings():
    """Settings instance with test values."""
    return Settings(
        api_host="127.0.0.1",
        api_port=8000,
        frinkiac_scheme="https",
        frinkiac_host="frinkiac.test",
        frinkiac_api_path="api",
        request_timeout=5.0,
        max_line_length=25,
        items_per_row=3,
        frame_image_width=640,
        frame_image_height=480,
    )


@pytest.fixture
def make_response() -> Callable[..., httpx.Response]:
    """Build a real httpx.Response bound to a request, so raise_for_status works."""

    def _make(data: Any = None, status_code: int = 200, url: str = "https://frinkiac.test/api/x", text=None):
        request = httpx.Request("GET", url)
        if text is not None:
            return httpx.Response(status_code, text=text, request=request)
        return httpx.Response(status_code, json=data, request=request)

    return _make


@pytest.fixture
def mock_search_response():
    """Frinkiac /api/search response."""
    return [
        {"Id": 1009, "Episode": "S07E21", "Timestamp": 302134},
        {"Id": 1010, "Episode": "S07E21", "Timestamp": 302635},
        {"Id": 2001, "Episode": "S05E14", "Timestamp": 92541},
    ]


@pytest.fixture
def mock_caption_response():
    """Frinkiac /api/caption response."""
    return {
        "Episode": {
            "Id": 142,
            "Key": "S07E21",
            "Season": 7,
            "EpisodeNumber": 21,
            "Title": "22 Short Films About Springfield",
            "Director": "Jim Reardon",
            "Writer": "Richard Appel",
            "OriginalAirDate": "14-Apr-96",
            "WikiLink": "https://en.wikipedia.org/wiki/22_Short_Films_About_Springfield",
        },
        "Frame": {"Id": 1009, "Episode": "S07E21", "Timestamp": 302134},
        "Subtitles": [
            {
                "Id": 3,
                "RepresentativeTimestamp": 301467,
                "Episode": "S07E21",
                "StartTimestamp": 300300,
                "EndTimestamp": 302135,
                "Content": "Well, Seymour, you are an odd fellow,",
                "Language": "en",
            },
            {
                "Id": 4,
                "RepresentativeTimestamp": 303303,
                "Episode": "S07E21",
                "StartTimestamp": 302302,
                "EndTimestamp": 304304,
                "Content": "but I must say, you steam a good ham.",
                "Language": "en",
            },
        ],
        "Nearby": [
            {"Id": 1008, "Episode": "S07E21", "Timestamp": 301934},
            {"Id": 1009, "Episode": "S07E21", "Timestamp": 302134},
            {"Id": 1010, "Episode": "S07E21", "Timestamp": 302635},
        ],
    }
