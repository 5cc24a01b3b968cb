"""Loader for decoded-document snapshots (YAML or JSON).

A snapshot is the decoder's output written down as data: the ``Document``
model with every decoded attribute spelled as ``{value: ...}`` (recognised)
or ``{raw: ..., reason: ...}`` (rejected). JSON is accepted as the YAML
subset it is.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap, CommentedSeq
from ruamel.yaml.error import YAMLError
from ruamel.yaml.events import AliasEvent, NodeEvent

from podval.models.feed import Document

logger = logging.getLogger("podval.loader")

# ---------------------------------------------------------------------------
# Safety limits
# ---------------------------------------------------------------------------

_MAX_DOCUMENT_SIZE = 5_000_000  # 5M characters
_MAX_NODE_COUNT = 50_000
_MAX_DEPTH = 20


class DocumentLoadError(Exception):
    """The snapshot could not be read, parsed or mapped onto ``Document``."""


class DocumentSafetyError(DocumentLoadError):
    """The snapshot violates a size, nesting or anchor limit."""


class DocumentLoader:
    """Reads snapshots with ruamel.yaml and validates them into ``Document``."""

    def __init__(self, max_document_size: int = _MAX_DOCUMENT_SIZE) -> None:
        self._max_document_size = max_document_size
        self._yaml = YAML()
        self._yaml.max_depth = _MAX_DEPTH

    # -- safety checks -------------------------------------------------------

    def _check_size(self, content: str) -> None:
        if len(content) > self._max_document_size:
            raise DocumentSafetyError(
                f"Document exceeds maximum size "
                f"({len(content):,} chars > {self._max_document_size:,} limit)"
            )

    def _check_anchors(self, content: str) -> None:
        """Reject anchors and aliases before anything is composed.

        Works on parser events, so an ampersand inside a scalar is just text.
        """
        for event in self._yaml.parse(content):
            if isinstance(event, AliasEvent) or (
                isinstance(event, NodeEvent) and event.anchor is not None
            ):
                raise DocumentSafetyError("YAML anchors/aliases are not supported in snapshots")

    @staticmethod
    def _check_node_count(data: Any, limit: int = _MAX_NODE_COUNT) -> None:
        count = 0
        stack: list[Any] = [data]
        while stack:
            node = stack.pop()
            count += 1
            if count > limit:
                raise DocumentSafetyError(f"Document exceeds maximum node count ({limit:,})")
            if isinstance(node, dict):
                stack.extend(node.values())
            elif isinstance(node, list):
                stack.extend(node)

    # -- public loading API --------------------------------------------------

    def load(self, path: Path) -> Document:
        """Load a snapshot file."""
        try:
            with path.open("r", encoding="utf-8") as handle:
                content = handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise DocumentLoadError(f"Cannot read {path}: {exc}") from exc
        return self.load_string(content, filename=str(path))

    def load_string(self, content: str, filename: str = "<string>") -> Document:
        """Load a snapshot from text."""
        self._check_size(content)
        try:
            self._check_anchors(content)
            data = self._yaml.load(content)
        except YAMLError as exc:
            raise DocumentLoadError(f"Malformed snapshot {filename}: {exc}") from exc
        except RecursionError as exc:
            raise DocumentSafetyError(f"Snapshot {filename} is nested too deeply") from exc
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise DocumentLoadError(
                f"Snapshot {filename} must be a mapping, got {type(data).__name__}"
            )
        self._check_node_count(data)
        try:
            document = Document.model_validate(_to_plain(data))
        except ValidationError as exc:
            raise DocumentLoadError(
                f"Snapshot {filename} does not match the document model: "
                f"{exc.error_count()} error(s)\n{exc}"
            ) from exc
        logger.debug("Loaded %s with %d channel(s)", filename, len(document.channel))
        return document


def _to_plain(data: Any) -> Any:
    """Convert ruamel.yaml CommentedMap/Seq trees to plain dicts and lists."""
    if isinstance(data, (CommentedMap, dict)):
        return {str(k): _to_plain(v) for k, v in data.items()}
    if isinstance(data, (CommentedSeq, list)):
        return [_to_plain(item) for item in data]
    return data
