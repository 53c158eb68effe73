"""Command-line bootstrap."""

from __future__ import annotations

import logging
import sys

from acapella_index.config.settings import IndexSettings, load_settings
from acapella_index.core.library import build_library
from acapella_index.core.serializer import write_library
from acapella_index.errors import AcapellaIndexError, format_error_for_user
from acapella_index.runtime_paths import is_frozen, program_root


def _configure_logger() -> logging.Logger:
    logger = logging.getLogger("acapella_index")
    if logger.handlers:
        return logger

    logger.setLevel(logging.INFO)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def run_app(settings: IndexSettings | None = None) -> int:
    """Generate the library manifest and return a process exit code."""
    logger = _configure_logger()
    logger.debug("startup mode frozen=%s program_root=%s", is_frozen(), program_root())
    try:
        if settings is None:
            settings = load_settings()
        document = build_library(settings)
        write_library(document, settings.output_path)
    except AcapellaIndexError as exc:
        logger.error("%s", format_error_for_user(exc))
        logger.debug("error details: %s", exc.to_dict())
        return 1
    return 0
