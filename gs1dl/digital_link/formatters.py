"""Writers that render extracted AI elements as element strings or JSON.

All writers are pure: they read the elements of a parse result and never
modify it, so any number of renderings can be taken from one parse.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Protocol

from gs1dl.digital_link.constants import FNC1
from gs1dl.digital_link.models import AIElement


class HasElements(Protocol):
    """Anything holding extracted elements: ``ParsedElements`` or ``ParseContext``."""

    @property
    def elements(self) -> Sequence[AIElement]: ...


def ordered_elements(elements: Iterable[AIElement], fixed_first: bool) -> Iterator[AIElement]:
    """Yield elements in extraction order, or fixed-length AIs first.

    With ``fixed_first`` the elements that need no FNC1 come first, then the
    rest; each group keeps its extraction order.
    """
    elements = tuple(elements)
    if not fixed_first:
        yield from elements
        return
    yield from (element for element in elements if not element.fnc1)
    yield from (element for element in elements if element.fnc1)


def format_unbracketed(
    parsed: HasElements,
    fixed_first: bool = False,
    extra_separator: bool = False,
) -> str:
    """Render an unbracketed element string, e.g. ``^011231231231233398ABC^99XYZ``.

    ``^`` stands for FNC1. With ``extra_separator`` an FNC1 follows every
    element, even where it is not strictly required.
    """
    parts = [FNC1]
    for element in ordered_elements(parsed.elements, fixed_first):
        parts.append(element.ai)
        parts.append(element.value)
        if extra_separator or element.fnc1:
            parts.append(FNC1)

    out = "".join(parts)
    if out.endswith(FNC1):
        out = out[:-1]
    return out


def format_bracketed(parsed: HasElements, fixed_first: bool = False) -> str:
    """Render a bracketed element string, e.g. ``(01)12312312312333(98)ABC``.

    A ``(`` in a value is escaped as ``\\(``; ``)`` is left as it is.
    """
    return "".join(
        f"({element.ai}){_escape_bracketed(element.value)}"
        for element in ordered_elements(parsed.elements, fixed_first)
    )


def _escape_bracketed(value: str) -> str:
    return value.replace("(", "\\(")


def _escape_json(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


def format_json(parsed: HasElements, fixed_first: bool = False) -> str:
    """Render a flat JSON object, e.g. ``{"01":"12312312312333","98":"ABC"}``.

    Only backslash and double quote are escaped in values. Repeated AIs
    produce repeated keys.
    """
    members = ",".join(
        f'"{element.ai}":"{_escape_json(element.value)}"'
        for element in ordered_elements(parsed.elements, fixed_first)
    )
    return "{" + members + "}"
