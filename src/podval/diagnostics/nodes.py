"""Immutable diagnostic tree. One ``Node`` per validated tag instance."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from podval.diagnostics.errors import Error

# Attribute key standing for the tag's own text content.
NODE_VALUE = "node value"


class Namespace(StrEnum):
    PODCAST = "podcast"


@dataclass(frozen=True)
class TagName:
    """A possibly namespaced tag name, printed as ``ns:local`` or ``local``."""

    namespace: Namespace | None
    local: str

    @classmethod
    def rss(cls, local: str) -> TagName:
        return cls(namespace=None, local=local)

    @classmethod
    def podcast(cls, local: str) -> TagName:
        return cls(namespace=Namespace.PODCAST, local=local)

    def __str__(self) -> str:
        if self.namespace is None:
            return self.local
        return f"{self.namespace}:{self.local}"


@dataclass(frozen=True)
class Text:
    """Free-form user content, always displayed quoted."""

    value: str


@dataclass(frozen=True)
class Object:
    """Canonical rendering of a decoded value (bool, number, enum, record)."""

    value: str


@dataclass(frozen=True)
class Url:
    """A decoded absolute URL."""

    value: str


Value = Text | Object | Url


@dataclass(frozen=True)
class Node:
    """A validated tag: its attributes, its own errors and its validated children.

    ``errors`` only describes this tag; problems inside a child live on the child.
    """

    name: TagName
    children: list[Node] = field(default_factory=list)
    attributes: list[tuple[str, Value]] = field(default_factory=list)
    errors: list[Error] = field(default_factory=list)

    def attribute(self, key: str) -> Value | None:
        """Return the first attribute stored under *key*, if any."""
        for name, value in self.attributes:
            if name == key:
                return value
        return None

    def children_named(self, name: TagName) -> list[Node]:
        return [child for child in self.children if child.name == name]
