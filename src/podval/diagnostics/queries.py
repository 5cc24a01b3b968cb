"""Tree-wide queries used to decide how a diagnostic tree is presented."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum

from podval.diagnostics.errors import Error
from podval.diagnostics.nodes import Node, TagName


class ValidationStatus(StrEnum):
    NO_NAMESPACE_TAGS = "no_namespace_tags"
    VALID = "valid"
    INVALID = "invalid"


def descendants_have_errors(node: Node) -> bool:
    """True if *node* or any node below it carries at least one error."""
    if node.errors:
        return True
    return any(descendants_have_errors(child) for child in node.children)


def descendants_have_namespace_tags(node: Node) -> bool:
    """True if *node* or any node below it is a namespaced tag."""
    if node.name.namespace is not None:
        return True
    return any(descendants_have_namespace_tags(child) for child in node.children)


def iter_errors(node: Node) -> Iterator[tuple[tuple[TagName, ...], Error]]:
    """Yield ``(path, error)`` pairs in document order, path from the root down."""
    stack: list[tuple[tuple[TagName, ...], Node]] = [((node.name,), node)]
    while stack:
        path, current = stack.pop()
        for error in current.errors:
            yield path, error
        for child in reversed(current.children):
            stack.append(((*path, child.name), child))


def count_errors(node: Node) -> int:
    return sum(1 for _ in iter_errors(node))


@dataclass(frozen=True)
class TreeSummary:
    """Presentation facts about a whole tree."""

    status: ValidationStatus
    error_count: int
    has_namespace_tags: bool


def summarize(node: Node) -> TreeSummary:
    """Classify a tree as clean, broken, or holding nothing to validate.

    Errors win over namespace presence: a feed without any namespace tag can
    still be structurally broken (for example a missing ``channel``).
    """
    error_count = count_errors(node)
    has_namespace_tags = descendants_have_namespace_tags(node)
    if error_count:
        status = ValidationStatus.INVALID
    elif has_namespace_tags:
        status = ValidationStatus.VALID
    else:
        status = ValidationStatus.NO_NAMESPACE_TAGS
    return TreeSummary(
        status=status,
        error_count=error_count,
        has_namespace_tags=has_namespace_tags,
    )
