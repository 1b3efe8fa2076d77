"""Persist the rendered report."""

from __future__ import annotations

from pathlib import Path

import structlog

log = structlog.get_logger("pkgreport.writer")


def write_report(path: Path, document: str) -> Path:
    """Write *document* to *path* as UTF-8, replacing any existing file.

    I/O errors propagate to the caller.
    """
    path = Path(path)
    path.write_text(document, encoding="utf-8")
    log.info("report.written", path=str(path), size=len(document))
    return path
