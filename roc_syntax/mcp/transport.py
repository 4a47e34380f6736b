"""MCP JSON-RPC endpoint for the HTTP transport."""

import json
import logging

from fastapi import APIRouter, Request, Response
from fastapi.responses import JSONResponse

from ..config import settings
from .dispatch import handle_message
from .jsonrpc import INVALID_REQUEST, PARSE_ERROR, jsonrpc_error

logger = logging.getLogger(__name__)

router = APIRouter(tags=["MCP"])


@router.post("/mcp")
async def mcp_jsonrpc_endpoint(request: Request) -> Response:
    """Handle a JSON-RPC message or batch posted by an MCP client.

    Requests that contain only notifications are acknowledged with 202.
    """
    body = await request.body()
    if len(body) > settings.max_json_payload_size:
        return JSONResponse(
            status_code=413,
            content={
                "success": False,
                "error": f"JSON payload too large. Maximum size: {settings.max_json_payload_size} bytes",
            },
        )

    try:
        payload = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return JSONResponse(content=jsonrpc_error(None, PARSE_ERROR, "Parse error"))

    if isinstance(payload, list):
        if not payload:
            return JSONResponse(content=jsonrpc_error(None, INVALID_REQUEST, "Empty batch"))
        responses = [r for r in [await handle_message(m) for m in payload] if r is not None]
        if not responses:
            return Response(status_code=202)
        return JSONResponse(content=responses)

    response = await handle_message(payload)
    if response is None:
        return Response(status_code=202)
    return JSONResponse(content=response)
