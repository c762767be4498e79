"""Tests for dependency injection functions."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import AsyncClient

from frinkiac.dependencies import get_http_client


class TestDependencies:
    """Tests for dependency injection functions."""

    @pytest.mark.asyncio
    async def test_get_http_client(self):
        """Test getting HTTP client from app state."""
        mock_request = MagicMock()
        mock_client = AsyncMock(spec=AsyncClient)
        mock_request.app.state.http_client = mock_client

        client = await get_http_client(mock_request)

        assert client == mock_client

    @pytest.mark.asyncio
    async def test_get_http_client_not_initialized(self):
        """Test error when HTTP client is missing from app state."""
        mock_request = MagicMock()
        mock_request.app.state.http_client = None

        with pytest.raises(RuntimeError, match="HTTP client not initialized"):
            await get_http_client(mock_request)
