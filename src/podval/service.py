"""Validation entry points used by the CLI and by library callers."""

from __future__ import annotations

import logging
from pathlib import Path

from podval.analyzer.containers import analyze_document
from podval.diagnostics.report import ValidationReport
from podval.loader import DocumentLoader
from podval.models.feed import Document

logger = logging.getLogger("podval.service")


def validate_document(document: Document) -> ValidationReport:
    """Validate a decoded feed and summarize the resulting tree.

    Pure apart from logging: the same document always yields an equal report.
    """
    root = analyze_document(document)
    report = ValidationReport.from_tree(root)
    logger.info(
        "Validated feed: status=%s, errors=%d, namespace_tags=%s",
        report.summary.status,
        report.summary.error_count,
        report.summary.has_namespace_tags,
    )
    return report


def validate_file(path: Path, loader: DocumentLoader | None = None) -> ValidationReport:
    """Load a snapshot and validate it.

    Raises ``DocumentLoadError`` when the snapshot cannot be loaded; the
    validation itself never raises.
    """
    loader = loader or DocumentLoader()
    logger.debug("Loading snapshot %s", path)
    return validate_document(loader.load(path))
