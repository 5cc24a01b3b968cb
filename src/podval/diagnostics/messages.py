"""User-facing wording for diagnostics, tags and attribute values.

The text produced here is part of the public surface: tests pin it and
downstream renderers display it verbatim. The ``NODE_VALUE`` sentinel is
never printed; it always reads as "value".
"""

from __future__ import annotations

from typing import assert_never

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
from podval.diagnostics.nodes import NODE_VALUE, Object, TagName, Text, Url, Value


def format_tag(tag: TagName) -> str:
    return f"<{tag}>"


def format_value(value: Value) -> str:
    """Render an attribute value; free text is quoted, typed values are not."""
    match value:
        case Text(value=text):
            return f'"{text}"'
        case Object(value=rendered) | Url(value=rendered):
            return rendered
        case _:
            assert_never(value)


def format_attribute(key: str, value: Value) -> str:
    """Render one attribute line; the tag's own content shows as the bare value."""
    if key == NODE_VALUE:
        return format_value(value)
    return f"{key}={format_value(value)}"


def format_error(error: Error) -> str:
    """Return the one-line message for *error*."""
    match error:
        case MissingAttribute(attribute=attr) if attr == NODE_VALUE:
            return "Missing value"
        case MissingAttribute(attribute=attr):
            return f"Missing attribute «{attr}»"
        case InvalidAttribute(attribute=attr, value=value) if attr == NODE_VALUE:
            return f"Invalid value «{value}»"
        case InvalidAttribute(attribute=attr, value=value):
            return f"Invalid value «{value}» for attribute «{attr}»"
        case InvalidAttributeWithReason(attribute=attr, value=value, reason=reason) if (
            attr == NODE_VALUE
        ):
            return f"Invalid value «{value}»: {reason}"
        case InvalidAttributeWithReason(attribute=attr, value=value, reason=reason):
            return f"Invalid value «{value}» for attribute «{attr}»: {reason}"
        case MissingChild(tag=tag):
            return f"Missing child «{tag}»"
        case MultipleChildren(tag=tag):
            return f"Only one child «{tag}» is allowed"
        case AttributeExceedsMaxLength(attribute=attr, value=value, max_length=limit) if (
            attr == NODE_VALUE
        ):
            return f"Value «{value}» exceeds maximum length of {limit} characters"
        case AttributeExceedsMaxLength(attribute=attr, value=value, max_length=limit):
            return (
                f"Attribute «{attr}» value «{value}» exceeds maximum length "
                f"of {limit} characters"
            )
        case Custom(message=message) | CustomWithExtraInfo(message=message):
            return message
        case _:
            assert_never(error)


def extra_info(error: Error) -> str | None:
    """Return the expandable explanation attached to *error*, if it has one."""
    if isinstance(error, CustomWithExtraInfo):
        return error.extra_info
    return None
