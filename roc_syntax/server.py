"""FastAPI MCP Server for the Roc syntax reference."""

import logging
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from . import __version__
from .config import settings
from .engine import SyntaxEngine
from .engine.core import load_document
from .mcp import sanitize_error_message
from .mcp.transport import router as mcp_router
from .models import (
    HealthResponse,
    MCPRequest,
    MCPResponse,
    ReadyResponse,
    UsageInfo,
)

logger = logging.getLogger(__name__)

# ============ SENTRY INITIALIZATION ============

if settings.sentry_dsn:
    try:
        import sentry_sdk

        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=0.1 if settings.environment == "production" else 1.0,
        )
        logger.info("Sentry error tracking initialized")
    except ImportError:
        logger.warning("Sentry DSN configured but sentry-sdk not installed")
else:
    logger.debug("Sentry DSN not configured - error tracking disabled")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    logger.info(f"Starting Roc Syntax MCP Server v{__version__}")

    if not settings.debug and settings.cors_allowed_origins == "*":
        logger.warning(
            "SECURITY WARNING: CORS is configured to allow all origins ('*'). "
            "Set CORS_ALLOWED_ORIGINS to specific domains in production."
        )

    if not load_document().loaded:
        logger.warning(
            f"Syntax reference not readable at {settings.syntax_file_path}; "
            "tools will return the load-error text"
        )

    yield
    logger.info("Roc Syntax MCP Server stopped")


app = FastAPI(
    title="Roc Syntax MCP Server",
    description="MCP endpoint exposing the Roc syntax reference by topic",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=settings.cors_origins_list != ["*"],
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "Mcp-Session-Id"],
)

# Mount MCP JSON-RPC transport
app.include_router(mcp_router)


# ============ EXCEPTION HANDLERS ============


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Handle HTTP exceptions with consistent response format."""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "success": False,
            "error": exc.detail,
            "usage": {"latency_ms": 0},
        },
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions with sanitized error messages."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "An internal server error occurred. Please try again.",
            "usage": {"latency_ms": 0},
        },
    )


# ============ HEALTH ENDPOINTS ============


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check() -> HealthResponse:
    """Health check endpoint (lightweight liveness check)."""
    return HealthResponse(
        status="healthy",
        version=__version__,
        timestamp=datetime.now(timezone.utc),
    )


@app.get("/ready", tags=["Health"])
async def readiness_check():
    """Readiness check - verifies the syntax reference can be read."""
    checks = {"syntax_reference": load_document().loaded}
    all_ok = all(checks.values())

    response = ReadyResponse(
        status="ready" if all_ok else "not_ready",
        version=__version__,
        checks=checks,
    )
    return JSONResponse(
        content=response.model_dump(mode="json"),
        status_code=200 if all_ok else 503,
    )


@app.get("/", tags=["Health"])
async def root():
    """Root endpoint with API info."""
    return {
        "name": "Roc Syntax MCP Server",
        "version": __version__,
        "mcp": "/mcp",
        "docs": "/docs",
        "health": "/health",
    }


# ============ REST MCP ENDPOINT ============


@app.post("/v1/mcp", response_model=MCPResponse, tags=["MCP"])
async def mcp_endpoint(request: MCPRequest) -> MCPResponse:
    """
    Execute a syntax tool.

    Args:
        request: The MCP request with tool and parameters

    Returns:
        MCPResponse with result or error
    """
    start_time = time.perf_counter()

    try:
        result = await SyntaxEngine().execute(request.tool, request.params)
        latency_ms = int((time.perf_counter() - start_time) * 1000)

        return MCPResponse(
            success=True,
            result=result.data,
            usage=UsageInfo(
                input_tokens=result.input_tokens,
                output_tokens=result.output_tokens,
                latency_ms=latency_ms,
            ),
        )

    except ValidationError as e:
        latency_ms = int((time.perf_counter() - start_time) * 1000)
        fields = ", ".join(str(err["loc"][0]) for err in e.errors() if err["loc"])
        return MCPResponse(
            success=False,
            error=f"Invalid parameter(s) for {request.tool.value}: {fields}",
            usage=UsageInfo(latency_ms=latency_ms),
        )
    except Exception as e:
        latency_ms = int((time.perf_counter() - start_time) * 1000)
        return MCPResponse(
            success=False,
            error=sanitize_error_message(e),
            usage=UsageInfo(latency_ms=latency_ms),
        )


# ============ MAIN ============


def main():
    """Run the server with uvicorn."""
    import uvicorn

    uvicorn.run(
        "roc_syntax.server:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
