"""Write the library manifest to disk."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from acapella_index.core.library import LibraryDocument
from acapella_index.errors import AcapellaIndexError, ErrorCode

logger = logging.getLogger(__name__)


def to_json(document: LibraryDocument) -> str:
    return json.dumps(document.to_dict(), indent=2, ensure_ascii=False)


def write_library(document: LibraryDocument, output_path: str | Path) -> Path:
    """Replace *output_path* with the serialized document.

    The JSON goes to a temporary sibling first, so the previous manifest is
    either fully replaced or left untouched.
    """
    output_path = Path(output_path)
    payload = to_json(document)
    tmp_name = ""
    try:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{output_path.name}.", suffix=".tmp", dir=output_path.parent
        )
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(payload)
        os.replace(tmp_name, output_path)
    except OSError as exc:
        raise AcapellaIndexError(
            ErrorCode.OUTPUT_WRITE_FAILED,
            path=output_path,
            details={"original": str(exc)},
        ) from exc
    finally:
        if tmp_name and os.path.exists(tmp_name):
            os.unlink(tmp_name)

    logger.info(
        "[SUCCESS] Generated %s with %d tracks.", output_path.name, len(document.tracks)
    )
    return output_path
