"""CLI for running the Roc Syntax MCP Server.

    roc-syntax-mcp                      # stdio (for MCP clients)
    roc-syntax-mcp --transport http     # FastAPI + uvicorn
"""

import argparse
import os
import sys
from pathlib import Path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="roc-syntax-mcp",
        description="Serve the Roc syntax reference over MCP",
    )
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        help="Transport to serve on (default: TRANSPORT env or stdio)",
    )
    parser.add_argument("--host", help="Host to bind to for http (default: 127.0.0.1)")
    parser.add_argument("-p", "--port", type=int, help="Port to bind to for http (default: 8000)")
    parser.add_argument("--syntax-file", type=Path, help="Path to an alternative syntax sample file")
    parser.add_argument("--log-level", help="Logging level (default: INFO)")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    # field name -> (env var, value)
    overrides = {
        "transport": ("TRANSPORT", args.transport),
        "host": ("HOST", args.host),
        "port": ("PORT", args.port),
        "syntax_file": ("ROC_SYNTAX_FILE", args.syntax_file),
        "log_level": ("LOG_LEVEL", args.log_level),
    }
    # Exported too so a reloading uvicorn worker sees the same values
    for env_var, value in overrides.values():
        if value is not None:
            os.environ[env_var] = str(value)

    from .config import configure_logging, settings

    for field, (_, value) in overrides.items():
        if value is not None:
            setattr(settings, field, value)

    configure_logging()

    try:
        if settings.transport == "http":
            from .server import main as run_http

            run_http()
        else:
            from .stdio import run_stdio

            run_stdio()
    except KeyboardInterrupt:
        print("\nServer stopped", file=sys.stderr)
        sys.exit(0)


if __name__ == "__main__":
    main()
