"""HTTP relaying utilities for upstream requests."""

import json

import httpx
from fastapi import Response

from core.exceptions import (
    UpstreamConnectionError,
    UpstreamError,
    UpstreamRequestError,
    UpstreamTimeoutError,
)
from core.protocols import RequestLogger
from core.request_types import PreparedRequest


class UpstreamClient:
    """Relay prepared requests to the upstream messages API."""

    def __init__(self, client: httpx.AsyncClient, provider: str = "Anthropic") -> None:
        self._client = client
        self._provider = provider

    async def relay(self, prepared: PreparedRequest, logger: RequestLogger) -> Response:
        """Relay a request and translate the outcome into a client response.

        Success is always answered with 200 and the upstream body verbatim.
        """
        try:
            response = await self.send(prepared)
        except UpstreamError as e:
            return self._error_response(e, logger)

        return Response(
            content=response.content,
            status_code=200,
            media_type=response.headers.get("content-type", "application/json"),
        )

    async def send(self, prepared: PreparedRequest) -> httpx.Response:
        """POST the payload upstream, raising UpstreamError on any failure."""
        try:
            request = self._client.build_request(
                "POST",
                prepared.target_url,
                json=prepared.body,
                headers=prepared.headers,
            )
        except (UnicodeEncodeError, ValueError) as e:
            # Non-ASCII header values, NaN/Infinity in the payload
            raise UpstreamRequestError(_describe(e), provider=self._provider) from e

        try:
            response = await self._client.send(request)
        except httpx.TimeoutException as e:
            raise UpstreamTimeoutError(_describe(e), provider=self._provider) from e
        except httpx.RequestError as e:
            raise UpstreamConnectionError(_describe(e), provider=self._provider) from e

        if not response.is_success:
            raise UpstreamError(
                f"Request failed with status code {response.status_code}",
                status_code=response.status_code,
                body=response.content,
                content_type=response.headers.get("content-type"),
                provider=self._provider,
            )
        return response

    def _error_response(self, error: UpstreamError, logger: RequestLogger) -> Response:
        """Build the failure envelope: upstream status/body, else 500/message."""
        status_code = error.status_code or 500

        if error.body:
            logger.log_error(self._provider, status_code, error.body.decode("utf-8", errors="replace"))
            return Response(
                content=error.body,
                status_code=status_code,
                media_type=error.content_type or "application/json",
            )

        logger.log_error(self._provider, status_code, error.message)
        return Response(
            content=json.dumps({"message": error.message}),
            status_code=status_code,
            media_type="application/json",
        )


def _describe(error: Exception) -> str:
    """Human-readable failure text, never empty."""
    return str(error) or type(error).__name__
