"""Diagnostic tree, error taxonomy, message catalog and serialization."""

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
from podval.diagnostics.messages import (
    extra_info,
    format_attribute,
    format_error,
    format_tag,
    format_value,
)
from podval.diagnostics.nodes import NODE_VALUE, Namespace, Node, Object, TagName, Text, Url, Value
from podval.diagnostics.queries import (
    TreeSummary,
    ValidationStatus,
    count_errors,
    descendants_have_errors,
    descendants_have_namespace_tags,
    iter_errors,
    summarize,
)
from podval.diagnostics.report import ValidationReport, error_to_dict, node_to_dict

__all__ = [
    "NODE_VALUE",
    "AttributeExceedsMaxLength",
    "Custom",
    "CustomWithExtraInfo",
    "Error",
    "InvalidAttribute",
    "InvalidAttributeWithReason",
    "MissingAttribute",
    "MissingChild",
    "MultipleChildren",
    "Namespace",
    "Node",
    "Object",
    "TagName",
    "Text",
    "TreeSummary",
    "Url",
    "ValidationReport",
    "ValidationStatus",
    "Value",
    "count_errors",
    "descendants_have_errors",
    "descendants_have_namespace_tags",
    "error_to_dict",
    "extra_info",
    "format_attribute",
    "format_error",
    "format_tag",
    "format_value",
    "iter_errors",
    "node_to_dict",
    "summarize",
]
