"""Decoder outcomes: every scalar field is either a typed value or rejected raw text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """The decoder produced a typed value."""

    value: T


@dataclass(frozen=True)
class Other:
    """The decoder rejected the raw text, optionally explaining why.

    Older decoders only hand back the raw string, so ``reason`` is optional.
    """

    raw: str
    reason: str | None = None


Parsed = Ok[T] | Other
