"""Request helpers shared by the API routes."""
import json
from typing import Any

from fastapi import Request

from src.shared.exceptions import PayloadTooLarge


async def read_json_body(request: Request, max_bytes: int) -> Any:
    """
    Drain the request body and decode it as JSON.

    The body is read as a stream and rejected as soon as it grows past
    max_bytes. A declared Content-Length above the limit is rejected before
    reading anything.

    Args:
        request: Incoming request
        max_bytes: Largest accepted body size

    Returns:
        The decoded JSON value

    Raises:
        PayloadTooLarge: If the body exceeds max_bytes
        json.JSONDecodeError: If the body is not valid JSON
    """
    declared = request.headers.get("content-length")
    if declared and declared.isdigit() and int(declared) > max_bytes:
        raise PayloadTooLarge(max_bytes)

    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if len(body) > max_bytes:
            raise PayloadTooLarge(max_bytes)

    return json.loads(body)
