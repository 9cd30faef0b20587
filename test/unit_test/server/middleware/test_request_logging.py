"""
Unit tests for the request logging middleware.

This test suite covers:
- Reporting requests through log_api_request
- The X-Process-Time header
- Failing requests reported as 500 and re-raised
- Slow request warnings
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi import Request
from starlette.responses import Response

from unguka.server.middleware import RequestLoggingMiddleware


def _request(method="GET", path="/api/v1/cooperatives"):
    request = AsyncMock(spec=Request)
    request.method = method
    request.url.path = path
    request.state = MagicMock()
    return request


class TestRequestLoggingMiddleware:
    """Test RequestLoggingMiddleware.dispatch."""

    @pytest.mark.asyncio
    async def test_successful_request_is_reported(self):
        async def call_next(request):
            return Response(content="ok", status_code=201)

        middleware = RequestLoggingMiddleware(app=AsyncMock())

        with patch("unguka.server.middleware.request_logging.log_api_request") as mock_log:
            response = await middleware.dispatch(_request("POST"), call_next)

        assert response.status_code == 201
        mock_log.assert_called_once()
        kwargs = mock_log.call_args[1]
        assert kwargs["method"] == "POST"
        assert kwargs["path"] == "/api/v1/cooperatives"
        assert kwargs["status_code"] == 201
        assert kwargs["duration_ms"] >= 0

    @pytest.mark.asyncio
    async def test_process_time_header(self):
        async def call_next(request):
            return Response(content="ok", status_code=200)

        middleware = RequestLoggingMiddleware(app=AsyncMock())

        with patch("unguka.server.middleware.request_logging.log_api_request"):
            response = await middleware.dispatch(_request(), call_next)

        assert float(response.headers["X-Process-Time"]) >= 0

    @pytest.mark.asyncio
    async def test_failure_is_reported_as_500_and_raised(self):
        async def call_next(request):
            raise RuntimeError("database is gone")

        middleware = RequestLoggingMiddleware(app=AsyncMock())

        with patch("unguka.server.middleware.request_logging.log_api_request") as mock_log, patch(
            "unguka.server.middleware.request_logging.logger"
        ) as mock_logger:
            with pytest.raises(RuntimeError, match="database is gone"):
                await middleware.dispatch(_request(), call_next)

        assert mock_log.call_args[1]["status_code"] == 500
        mock_logger.error.assert_called_once()
        assert mock_logger.error.call_args[1]["extra"]["error"] == "database is gone"

    @pytest.mark.asyncio
    async def test_slow_request_warns(self):
        async def call_next(request):
            return Response(content="ok", status_code=200)

        middleware = RequestLoggingMiddleware(app=AsyncMock())

        with patch("unguka.server.middleware.request_logging.log_api_request"), patch(
            "unguka.server.middleware.request_logging.SLOW_REQUEST_MS", -1
        ), patch("unguka.server.middleware.request_logging.logger") as mock_logger:
            await middleware.dispatch(_request(), call_next)

        mock_logger.warning.assert_called_once()
        assert mock_logger.warning.call_args[1]["extra"]["status_code"] == 200
