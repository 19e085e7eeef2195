"""Data shapes produced by the Digital Link parser."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from gs1dl.digital_link.constants import FIXED_LENGTH_AI_PREFIXES


def is_fnc1_required(ai: str) -> bool:
    """True unless the AI starts with one of the fixed-length prefixes."""
    return ai[:2] not in FIXED_LENGTH_AI_PREFIXES


@dataclass(frozen=True, slots=True)
class AIElement:
    """One extracted AI element, e.g. ``(01)12312312312333``.

    ``fnc1`` records whether an FNC1 separator is required after the
    element when it is followed by another one in an unbracketed string.
    """

    ai: str
    value: str
    fnc1: bool

    @classmethod
    def create(cls, ai: str, value: str) -> AIElement:
        return cls(ai=ai, value=value, fnc1=is_fnc1_required(ai))


@dataclass(frozen=True, slots=True)
class ParsedElements:
    """Immutable result of parsing a Digital Link URI.

    Elements are held in discovery order: path pairs left to right, then
    query pairs left to right. Repeated AIs are kept as separate elements.
    """

    uri: str
    elements: tuple[AIElement, ...]
    stem: str = ""
    query: str | None = None
    fragment: str | None = None

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator[AIElement]:
        return iter(self.elements)
