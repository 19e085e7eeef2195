"""Backward search for the Digital Link primary key that anchors the AI data."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from gs1dl.digital_link.constants import AI_MAX_LEN, AI_MIN_LEN, DL_PRIMARY_KEYS
from gs1dl.digital_link.errors import DigitalLinkParseError, ParseErrorKind


def is_ai_form(candidate: str) -> bool:
    """True if ``candidate`` has the form of an AI: 2 to 4 ASCII digits."""
    if not AI_MIN_LEN <= len(candidate) <= AI_MAX_LEN:
        return False
    return candidate.isascii() and candidate.isdigit()


def reverse_pair_starts(segments: Sequence[str]) -> Iterator[int]:
    """Yield the index of each ``/AI/value`` pair's AI, rightmost pair first.

    ``segments`` is the path split on ``/``; index 0 is the empty text
    before the leading slash and is never yielded.
    """
    yield from range(len(segments) - 2, 0, -2)


def locate_primary_key(segments: Sequence[str]) -> int:
    """Return the segment index of the rightmost primary key.

    The walk stops at the first candidate that does not have the form of an
    AI, so a key further left is never reached past non-AI data.

    Raises:
        DigitalLinkParseError: If no primary key is found.
    """
    for index in reverse_pair_starts(segments):
        candidate = segments[index]
        if not is_ai_form(candidate):
            break
        if candidate in DL_PRIMARY_KEYS:
            return index
    raise DigitalLinkParseError(
        ParseErrorKind.NO_PRIMARY_KEY, "No GS1 DL keys found in path info"
    )
