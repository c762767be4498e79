"""Frinkiac API service for frame search, captions and random quotes."""

from collections.abc import Callable
from typing import Any, TypeVar

import httpx

from frinkiac.config import Settings, get_settings
from frinkiac.exceptions import ErrorCode, FrinkiacAPIException, FrinkiacException
from frinkiac.links import api_url
from frinkiac.logging_config import get_logger, log_with_context
from frinkiac.models.frinkiac import Caption, Frame

logger = get_logger(__name__)

T = TypeVar("T")


async def _request(
    client: httpx.AsyncClient,
    endpoint: str,
    settings: Settings,
    parse: Callable[[Any], T],
    params: dict[str, str | int] | None = None,
) -> T:
    """GET an API endpoint and parse its JSON body.

    Args:
        client: Shared HTTP client for making requests
        endpoint: API route, e.g. "search"
        settings: Settings instance
        parse: Converts the decoded JSON into the result type
        params: Optional query parameters

    Returns:
        Parsed result

    Raises:
        FrinkiacAPIException: If Frinkiac answers with an error status
        FrinkiacException: On network failure or an unparseable payload
    """
    url = api_url(endpoint, settings)

    try:
        response = await client.get(url, params=params, timeout=settings.request_timeout, follow_redirects=True)
        response.raise_for_status()
        data = response.json()
        return parse(data)

    except httpx.HTTPStatusError as e:
        raise FrinkiacAPIException(
            f"Frinkiac API request failed (HTTP {e.response.status_code}): {e.response.text}",
            status_code=e.response.status_code,
            details={"endpoint": endpoint, "api_response": e.response.text},
        ) from e
    except httpx.HTTPError as e:
        raise FrinkiacException(
            f"Failed to reach Frinkiac: {str(e)}",
            code=ErrorCode.FRINKIAC_NETWORK_ERROR,
            status_code=502,
            details={"endpoint": endpoint, "error_type": "network_error"},
        ) from e
    except ValueError as e:  # pydantic ValidationError and JSONDecodeError
        log_with_context(
            logger,
            "warning",
            "Unparseable Frinkiac payload",
            endpoint=endpoint,
            error=str(e),
            event_type="frinkiac_parse_error",
        )
        raise FrinkiacException(
            f"Failed to process Frinkiac data: {str(e)}",
            code=ErrorCode.FRINKIAC_PARSE_ERROR,
            status_code=502,
            details={"endpoint": endpoint, "error_type": "parsing_error"},
        ) from e


def _parse_frames(data: Any) -> list[Frame]:
    if not isinstance(data, list):
        return []
    return [Frame.model_validate(item) for item in data]


async def search(client: httpx.AsyncClient, quote: str, settings: Settings | None = None) -> list[Frame]:
    """Search for frames whose subtitles contain ``quote``.

    Args:
        client: Shared HTTP client for making requests
        quote: The text to be searched for
        settings: Settings instance (defaults to singleton)

    Returns:
        Matching frames; empty when the response is not a JSON list
    """
    if settings is None:
        settings = get_settings()

    frames = await _request(client, "search", settings, _parse_frames, params={"q": quote})
    log_with_context(
        logger,
        "info",
        "Frinkiac search completed",
        quote=quote,
        result_count=len(frames),
        event_type="frinkiac_search",
    )
    return frames


async def get_caption(client: httpx.AsyncClient, frame: Frame, settings: Settings | None = None) -> Caption:
    """Fetch the caption (episode, subtitles, nearby frames) for ``frame``."""
    if settings is None:
        settings = get_settings()

    return await _request(
        client,
        "caption",
        settings,
        Caption.model_validate,
        params={"e": frame.episode, "t": frame.timestamp},
    )


async def get_random(client: httpx.AsyncClient, settings: Settings | None = None) -> Caption:
    """Fetch a random caption."""
    if settings is None:
        settings = get_settings()

    return await _request(client, "random", settings, Caption.model_validate)
