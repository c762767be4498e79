"""Unit tests for the Frinkiac API service."""

import httpx
import pytest

from frinkiac.exceptions import ErrorCode, FrinkiacAPIException, FrinkiacException
from frinkiac.models.frinkiac import Caption, Frame
from frinkiac.services import frinkiac_service


@pytest.mark.asyncio
async def test_search_success(mock_http_client, mock_settings, mock_search_response, make_response):
    """Test successful frame search."""
    mock_http_client.get.return_value = make_response(mock_search_response)

    frames = await frinkiac_service.search(mock_http_client, "steamed hams", mock_settings)

    assert len(frames) == 3
    assert all(isinstance(frame, Frame) for frame in frames)
    assert frames[0].episode == "S07E21"
    assert frames[0].timestamp == 302134

    mock_http_client.get.assert_called_once()
    call_args = mock_http_client.get.call_args
    assert call_args.args[0] == "https://frinkiac.test/api/search"
    assert call_args.kwargs["params"] == {"q": "steamed hams"}
    assert call_args.kwargs["timeout"] == mock_settings.request_timeout


@pytest.mark.asyncio
async def test_search_non_list_body_returns_empty(mock_http_client, mock_settings, make_response):
    """A search body that is not a JSON list yields no frames."""
    mock_http_client.get.return_value = make_response({"unexpected": "object"})

    frames = await frinkiac_service.search(mock_http_client, "anything", mock_settings)

    assert frames == []


@pytest.mark.asyncio
async def test_get_caption_success(mock_http_client, mock_settings, mock_caption_response, make_response):
    """Test fetching a caption for a frame."""
    mock_http_client.get.return_value = make_response(mock_caption_response)
    frame = Frame(episode="S07E21", timestamp=302134)

    caption = await frinkiac_service.get_caption(mock_http_client, frame, mock_settings)

    assert isinstance(caption, Caption)
    assert caption.episode.title == "22 Short Films About Springfield"
    assert caption.caption.startswith("Well, Seymour, you are an\n")

    call_args = mock_http_client.get.call_args
    assert call_args.args[0] == "https://frinkiac.test/api/caption"
    assert call_args.kwargs["params"] == {"e": "S07E21", "t": 302134}


@pytest.mark.asyncio
async def test_get_random_success(mock_http_client, mock_settings, mock_caption_response, make_response):
    """Test fetching a random caption."""
    mock_http_client.get.return_value = make_response(mock_caption_response)

    caption = await frinkiac_service.get_random(mock_http_client, mock_settings)

    assert caption.frame.episode == "S07E21"
    call_args = mock_http_client.get.call_args
    assert call_args.args[0] == "https://frinkiac.test/api/random"
    assert call_args.kwargs["params"] is None


@pytest.mark.asyncio
async def test_api_error_status(mock_http_client, mock_settings, make_response):
    """Test Frinkiac returning an error status."""
    mock_http_client.get.return_value = make_response(status_code=404, text="Not Found")

    with pytest.raises(FrinkiacAPIException) as exc_info:
        await frinkiac_service.get_caption(mock_http_client, Frame(episode="S99E99", timestamp=1), mock_settings)

    assert exc_info.value.status_code == 404
    assert exc_info.value.code == ErrorCode.FRINKIAC_API_ERROR
    assert "404" in str(exc_info.value)
    assert exc_info.value.details["endpoint"] == "caption"


@pytest.mark.asyncio
async def test_network_error(mock_http_client, mock_settings):
    """Test network error during a request."""
    mock_http_client.get.side_effect = httpx.ConnectError("Connection failed")

    with pytest.raises(FrinkiacException) as exc_info:
        await frinkiac_service.search(mock_http_client, "d'oh", mock_settings)

    assert exc_info.value.details["error_type"] == "network_error"
    assert exc_info.value.code == ErrorCode.FRINKIAC_NETWORK_ERROR


@pytest.mark.asyncio
async def test_timeout(mock_http_client, mock_settings):
    """Test timeout during a request."""
    mock_http_client.get.side_effect = httpx.ReadTimeout("Request timed out")

    with pytest.raises(FrinkiacException) as exc_info:
        await frinkiac_service.get_random(mock_http_client, mock_settings)

    assert "Failed to reach Frinkiac" in str(exc_info.value)


@pytest.mark.asyncio
async def test_invalid_caption_payload(mock_http_client, mock_settings, make_response):
    """A caption without its frame cannot be parsed."""
    mock_http_client.get.return_value = make_response({"Subtitles": []})

    with pytest.raises(FrinkiacException) as exc_info:
        await frinkiac_service.get_random(mock_http_client, mock_settings)

    assert exc_info.value.details["error_type"] == "parsing_error"
    assert exc_info.value.code == ErrorCode.FRINKIAC_PARSE_ERROR
    assert "Failed to process Frinkiac data" in str(exc_info.value)


@pytest.mark.asyncio
async def test_invalid_json_body(mock_http_client, mock_settings, make_response):
    """A non-JSON body is reported as a parsing error."""
    mock_http_client.get.return_value = make_response(text="<html>maintenance</html>")

    with pytest.raises(FrinkiacException) as exc_info:
        await frinkiac_service.search(mock_http_client, "cromulent", mock_settings)

    assert exc_info.value.details["error_type"] == "parsing_error"
