"""FastAPI route handlers."""

import json
from json import JSONDecodeError
from typing import Any

from fastapi import Request, Response

from core.protocols import RequestLogger

MAX_BODY_SIZE = 50 * 1024 * 1024  # 50MB


async def _parse_json_body(request: Request) -> dict[str, Any] | Response:
    """Parse request body as a JSON object, return it or an error Response."""
    raw_body = await request.body()
    if len(raw_body) > MAX_BODY_SIZE:
        return Response(
            content='{"error": "Request body too large"}',
            status_code=413,
            media_type="application/json",
        )

    text_body = raw_body.decode("utf-8", errors="replace")
    try:
        body = json.loads(text_body)
    except (JSONDecodeError, ValueError) as e:
        return Response(
            content=json.dumps({"error": f"Invalid JSON: {e}"}),
            status_code=400,
            media_type="application/json",
        )

    if not isinstance(body, dict):
        return Response(
            content='{"error": "Request body must be a JSON object"}',
            status_code=400,
            media_type="application/json",
        )
    return body


async def handle_relay(request: Request, logger: RequestLogger) -> Response:
    """Handle /api/claude: strip the credential and relay to the upstream API."""
    result = await _parse_json_body(request)
    if isinstance(result, Response):
        return result

    relay_service = request.app.state.relay_service
    prepared = relay_service.prepare(result, path=request.url.path)
    upstream = request.app.state.upstream_client

    return await upstream.relay(prepared, logger)
