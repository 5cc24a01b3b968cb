"""Fluent builder that turns decoder outcomes into one diagnostic ``Node``."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import datetime
from enum import Enum, StrEnum
from typing import Any, Self, TypeVar, assert_never
from uuid import UUID

from podval.diagnostics.errors import (
    AttributeExceedsMaxLength,
    Error,
    InvalidAttribute,
    InvalidAttributeWithReason,
    MissingAttribute,
    MissingChild,
    MultipleChildren,
)
from podval.diagnostics.nodes import Node, Object, TagName, Text, Url, Value
from podval.models.parsed import Ok, Other, Parsed

T = TypeVar("T")

Render = Callable[[Any], Value]


class Cardinality(StrEnum):
    """How many times a child tag may occur under its parent."""

    ANY = "any"
    AT_MOST_ONE = "at_most_one"
    EXACTLY_ONE = "exactly_one"
    AT_LEAST_ONE = "at_least_one"


def format_number(value: float) -> str:
    """Render a float without a spurious ``.0`` when it is integral."""
    if value.is_integer():
        return str(int(value))
    return repr(value)


def format_scalar(value: Any) -> str:
    """Canonical text for a decoded scalar."""
    match value:
        case bool():
            return "true" if value else "false"
        case Enum():
            return str(value.value)
        case int():
            return str(value)
        case float():
            return format_number(value)
        case datetime():
            return value.isoformat()
        case UUID():
            return str(value)
        case _:
            return str(value)


def render_object(value: Any) -> Value:
    return Object(format_scalar(value))


def render_url(value: Any) -> Value:
    return Url(str(value))


class NodeBuilder:
    """Accumulates attributes, errors and children for a single tag."""

    def __init__(self, name: TagName) -> None:
        self._name = name
        self._children: list[Node] = []
        self._attributes: list[tuple[str, Value]] = []
        self._errors: list[Error] = []

    @property
    def name(self) -> TagName:
        return self._name

    def attribute(self, key: str, value: Value) -> Self:
        self._attributes.append((key, value))
        return self

    def error(self, error: Error) -> Self:
        self._errors.append(error)
        return self

    def text(
        self,
        key: str,
        value: str | None,
        *,
        required: bool = False,
        max_length: int | None = None,
    ) -> Self:
        """Attach free text, or report it missing or too long.

        An over-length value is reported instead of attached.
        """
        if value is None:
            if required:
                self.error(MissingAttribute(key))
        elif max_length is not None and len(value) > max_length:
            self.error(AttributeExceedsMaxLength(key, value, max_length))
        else:
            self.attribute(key, Text(value))
        return self

    def parsed(
        self,
        key: str,
        value: Parsed[Any] | None,
        *,
        required: bool = False,
        render: Render = render_object,
    ) -> Self:
        """Attach a decoded value, or report why it could not be decoded."""
        match value:
            case Ok(value=decoded):
                self.attribute(key, render(decoded))
            case Other(raw=raw, reason=None | ""):
                self.error(InvalidAttribute(key, raw))
            case Other(raw=raw, reason=reason):
                self.error(InvalidAttributeWithReason(key, raw, reason))
            case None:
                if required:
                    self.error(MissingAttribute(key))
            case _:
                assert_never(value)
        return self

    def url(self, key: str, value: Parsed[Any] | None, *, required: bool = False) -> Self:
        return self.parsed(key, value, required=required, render=render_url)

    def child(self, node: Node) -> Self:
        self._children.append(node)
        return self

    def children(
        self,
        tag: TagName,
        items: Sequence[T],
        analyze: Callable[[T], Node],
        cardinality: Cardinality = Cardinality.ANY,
    ) -> Self:
        """Analyze every occurrence, then check how many there were.

        All occurrences become children even when the count is wrong, so a
        repeated tag is still validated in full.
        """
        for item in items:
            self.child(analyze(item))
        count = len(items)
        if count == 0 and cardinality in (Cardinality.EXACTLY_ONE, Cardinality.AT_LEAST_ONE):
            self.error(MissingChild(tag))
        if count > 1 and cardinality in (Cardinality.EXACTLY_ONE, Cardinality.AT_MOST_ONE):
            self.error(MultipleChildren(tag))
        return self

    def build(self) -> Node:
        return Node(
            name=self._name,
            children=self._children,
            attributes=self._attributes,
            errors=self._errors,
        )
