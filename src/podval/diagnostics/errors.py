"""Diagnostic taxonomy. Pure data: wording lives in ``podval.diagnostics.messages``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from podval.diagnostics.nodes import TagName


@dataclass(frozen=True)
class MissingAttribute:
    """A required attribute is absent."""

    attribute: str


@dataclass(frozen=True)
class InvalidAttribute:
    """The decoder rejected the value without saying why."""

    attribute: str
    value: str


@dataclass(frozen=True)
class InvalidAttributeWithReason:
    """The decoder rejected the value and explained why."""

    attribute: str
    value: str
    reason: str


@dataclass(frozen=True)
class MissingChild:
    """A required child tag is absent."""

    tag: TagName


@dataclass(frozen=True)
class MultipleChildren:
    """A child tag allowed at most once occurs more than once."""

    tag: TagName


@dataclass(frozen=True)
class AttributeExceedsMaxLength:
    """A free-text attribute is longer than its declared limit."""

    attribute: str
    value: str
    max_length: int


@dataclass(frozen=True)
class Custom:
    """A one-off rule."""

    message: str


@dataclass(frozen=True)
class CustomWithExtraInfo:
    """A one-off rule with an explanation the reader can expand."""

    message: str
    extra_info: str


Error = (
    MissingAttribute
    | InvalidAttribute
    | InvalidAttributeWithReason
    | MissingChild
    | MultipleChildren
    | AttributeExceedsMaxLength
    | Custom
    | CustomWithExtraInfo
)
