"""stdio transport: newline-delimited JSON-RPC over stdin/stdout.

stdout carries protocol messages only. Logs and the readiness line go
to stderr.
"""

import asyncio
import json
import logging
import sys
from typing import IO

from .engine import SyntaxEngine
from .mcp import INVALID_REQUEST, PARSE_ERROR, handle_message, jsonrpc_error

logger = logging.getLogger(__name__)

READY_MESSAGE = "Roc Syntax MCP Server running on stdio"


async def process_line(line: str, engine: SyntaxEngine) -> str | None:
    """Handle one input line.

    Returns:
        The serialized response, or None when nothing should be written
    """
    line = line.strip()
    if not line:
        return None

    try:
        payload = json.loads(line)
    except json.JSONDecodeError:
        return json.dumps(jsonrpc_error(None, PARSE_ERROR, "Parse error"))

    if isinstance(payload, list):
        if not payload:
            return json.dumps(jsonrpc_error(None, INVALID_REQUEST, "Empty batch"))
        responses = [r for r in [await handle_message(m, engine) for m in payload] if r is not None]
        return json.dumps(responses) if responses else None

    response = await handle_message(payload, engine)
    return json.dumps(response) if response is not None else None


async def serve(stdin: IO[str], stdout: IO[str], engine: SyntaxEngine | None = None) -> None:
    """Serve requests until stdin is closed."""
    engine = engine or SyntaxEngine()
    print(READY_MESSAGE, file=sys.stderr, flush=True)
    logger.debug(f"Serving syntax reference from {engine.syntax_file}")

    loop = asyncio.get_running_loop()
    while True:
        # readline blocks, so it runs in the default executor
        line = await loop.run_in_executor(None, stdin.readline)
        if not line:
            break
        response = await process_line(line, engine)
        if response is not None:
            stdout.write(response + "\n")
            stdout.flush()

    logger.info("stdin closed, shutting down")


def run_stdio(engine: SyntaxEngine | None = None) -> None:
    """Run the stdio transport on the process's standard streams."""
    asyncio.run(serve(sys.stdin, sys.stdout, engine))
