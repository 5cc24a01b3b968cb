"""JSON-friendly serialization of diagnostic trees."""

from __future__ import annotations

import json
from dataclasses import dataclass, fields
from typing import Any

from podval.diagnostics.errors import (
    AttributeExceedsMaxLength,
    Custom,
    CustomWithExtraInfo,
    Error,
    InvalidAttribute,
    InvalidAttributeWithReason,
    MissingAttribute,
    MissingChild,
    MultipleChildren,
)
from podval.diagnostics.messages import extra_info, format_error
from podval.diagnostics.nodes import NODE_VALUE, Node, Object, TagName, Text, Url, Value
from podval.diagnostics.queries import TreeSummary, summarize

_ERROR_KINDS: dict[type, str] = {
    MissingAttribute: "missing_attribute",
    InvalidAttribute: "invalid_attribute",
    InvalidAttributeWithReason: "invalid_attribute_with_reason",
    MissingChild: "missing_child",
    MultipleChildren: "multiple_children",
    AttributeExceedsMaxLength: "attribute_exceeds_max_length",
    Custom: "custom",
    CustomWithExtraInfo: "custom_with_extra_info",
}

_VALUE_KINDS: dict[type, str] = {
    Text: "text",
    Object: "object",
    Url: "url",
}


def _attribute_name(key: str) -> str | None:
    # The tag's own content has no attribute name.
    return None if key == NODE_VALUE else key


def error_to_dict(error: Error) -> dict[str, Any]:
    """Serialize one error: its kind, rendered message and raw payload."""
    d: dict[str, Any] = {
        "kind": _ERROR_KINDS[type(error)],
        "message": format_error(error),
    }
    for f in fields(error):
        raw = getattr(error, f.name)
        if isinstance(raw, TagName):
            d[f.name] = str(raw)
        elif f.name == "attribute":
            d[f.name] = _attribute_name(raw)
        else:
            d[f.name] = raw
    info = extra_info(error)
    if info is not None:
        d["extra_info"] = info
    return d


def attribute_to_dict(key: str, value: Value) -> dict[str, Any]:
    return {
        "name": _attribute_name(key),
        "kind": _VALUE_KINDS[type(value)],
        "value": value.value,
    }


def node_to_dict(node: Node) -> dict[str, Any]:
    """Serialize a node and its whole subtree, preserving order."""
    return {
        "tag": str(node.name),
        "attributes": [attribute_to_dict(key, value) for key, value in node.attributes],
        "errors": [error_to_dict(error) for error in node.errors],
        "children": [node_to_dict(child) for child in node.children],
    }


@dataclass(frozen=True)
class ValidationReport:
    """The outcome of one validation run, ready for a renderer or serializer."""

    root: Node
    summary: TreeSummary

    @classmethod
    def from_tree(cls, root: Node) -> ValidationReport:
        return cls(root=root, summary=summarize(root))

    @property
    def passed(self) -> bool:
        return self.summary.error_count == 0

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "status": self.summary.status.value,
            "error_count": self.summary.error_count,
            "has_namespace_tags": self.summary.has_namespace_tags,
            "tree": node_to_dict(self.root),
        }

    def to_json(self, indent: int | None = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)
