"""Syntax reference loading.

The reference is read from disk on every call. A read failure never
propagates: callers receive a sentinel string they can serve as-is.
"""

import logging
from pathlib import Path

from ...config import settings
from .document import SyntaxDocument

logger = logging.getLogger(__name__)

LOAD_ERROR_SENTINEL = "Error: Could not load Roc syntax reference file."


def _read(path: Path) -> tuple[str, bool]:
    try:
        return path.read_bytes().decode("utf-8"), True
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to load syntax reference from {path}: {e}")
        return f"{LOAD_ERROR_SENTINEL} ({e})", False


def load_syntax_reference(path: Path | str | None = None) -> str:
    """Read the full syntax reference.

    Args:
        path: File to read (defaults to the configured syntax file)

    Returns:
        The file contents, or the load-error sentinel with the failure detail
    """
    text, _ = _read(Path(path) if path else settings.syntax_file_path)
    return text


def load_document(path: Path | str | None = None) -> SyntaxDocument:
    """Read the syntax reference into a SyntaxDocument.

    ``loaded`` is False when the text is the load-error sentinel.
    """
    text, loaded = _read(Path(path) if path else settings.syntax_file_path)
    return SyntaxDocument.from_text(text, loaded=loaded)
