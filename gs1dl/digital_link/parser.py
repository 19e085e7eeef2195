"""GS1 Digital Link URI parser.

Performs a lightweight parse, sufficient for extracting the AI elements of an
uncompressed Digital Link URI. It does not validate the structure of the DL
URI beyond locating its AI data, nor the relationships between extracted AIs,
nor the content of their values. Convenience names for GS1 keys are not
supported.

Reference: https://www.gs1.org/standards/gs1-digital-link
"""

from __future__ import annotations

from dataclasses import dataclass, field

from gs1dl.core.logging import get_logger
from gs1dl.digital_link.constants import (
    ASCII_DIGITS,
    GTIN_AI,
    GTIN_LENGTH,
    GTIN_PADDABLE_LENGTHS,
    MAX_AI_LEN,
    MAX_AIS,
    QUERY_AI_ERROR_PREVIEW,
)
from gs1dl.digital_link.errors import DigitalLinkParseError, ParseErrorKind
from gs1dl.digital_link.locator import is_ai_form, locate_primary_key
from gs1dl.digital_link.models import AIElement, ParsedElements
from gs1dl.digital_link.splitter import split_uri
from gs1dl.digital_link.unescape import unescape_component

logger = get_logger(__name__)


def normalize_gtin(ai: str, value: str) -> str:
    """Zero-pad a GTIN-8, GTIN-12 or GTIN-13 in AI (01) up to a GTIN-14.

    Other lengths are returned unchanged so that bad data is preserved for
    reporting.
    """
    if ai == GTIN_AI and len(value) in GTIN_PADDABLE_LENGTHS:
        return value.rjust(GTIN_LENGTH, "0")
    return value


def _all_digits(text: str) -> bool:
    # Vacuously true for the empty string
    return all(c in ASCII_DIGITS for c in text)


def _decode_value(
    ai: str, raw: str, *, query_component: bool, max_len: int = MAX_AI_LEN
) -> str:
    value, decoded_len = unescape_component(
        raw, query_component=query_component, max_len=max_len
    )
    # Empty only when max_len is zero
    if not value:
        if query_component:
            message = f"Decoded AI ({ai}) value from DL query params too long"
        else:
            message = f"Decoded AI ({ai}) from DL path info too long"
        raise DigitalLinkParseError(ParseErrorKind.VALUE_TOO_LONG, message)
    if decoded_len > max_len:
        logger.warning(
            "dl_value_truncated",
            ai=ai,
            max_len=max_len,
            discarded=decoded_len - max_len,
        )
    return normalize_gtin(ai, value)


def _append(elements: list[AIElement], ai: str, value: str) -> None:
    if len(elements) >= MAX_AIS:
        raise DigitalLinkParseError(ParseErrorKind.TOO_MANY_AIS, "Too many AIs")
    element = AIElement.create(ai, value)
    logger.debug("dl_element_extracted", ai=ai, value=value, fnc1=element.fnc1)
    elements.append(element)


def _extract_path(segments: list[str], anchor: int, elements: list[AIElement]) -> None:
    # Every AI from the anchor onwards was checked during the backward search
    for index in range(anchor, len(segments), 2):
        ai, raw = segments[index], segments[index + 1]
        if not raw:
            raise DigitalLinkParseError(
                ParseErrorKind.EMPTY_VALUE, f"AI ({ai}) value path element is empty"
            )
        _append(elements, ai, _decode_value(ai, raw, query_component=False))


def _extract_query(query: str, elements: list[AIElement]) -> None:
    for param in query.split("&"):
        if not param:
            continue

        ai, sep, raw = param.partition("=")
        if not sep:
            logger.debug("dl_query_param_skipped", param=param, reason="singleton")
            continue

        # Numeric-only parameters that do not have the form of an AI are illegal
        if not _all_digits(ai):
            logger.debug("dl_query_param_skipped", param=param, reason="not_numeric")
            continue
        if not is_ai_form(ai):
            raise DigitalLinkParseError(
                ParseErrorKind.INVALID_QUERY_AI,
                "Stopping. Numeric query parameter that is not a valid AI is illegal: "
                f"{ai[:QUERY_AI_ERROR_PREVIEW]}...",
            )

        if not raw:
            raise DigitalLinkParseError(
                ParseErrorKind.EMPTY_VALUE, f"AI ({ai}) value query element is empty"
            )
        _append(elements, ai, _decode_value(ai, raw, query_component=True))


def parse(uri: str) -> ParsedElements:
    """Extract the AI elements from an uncompressed Digital Link URI.

    Args:
        uri: Candidate Digital Link URI, e.g.
            ``https://id.gs1.org/01/09520123456788/10/ABC1?17=180426``.

    Returns:
        The extracted elements, path pairs first, then query parameters.

    Raises:
        DigitalLinkParseError: If the URI is not a parsable Digital Link.
    """
    logger.debug("dl_parse_start", uri=uri)
    try:
        split = split_uri(uri)
        segments = split.path.split("/")
        anchor = locate_primary_key(segments)
        stem = "/".join(segments[:anchor])
        logger.debug("dl_stem", domain=split.domain, stem=stem)

        elements: list[AIElement] = []
        _extract_path(segments, anchor, elements)
        if split.query is not None:
            _extract_query(split.query, elements)
    except DigitalLinkParseError as exc:
        logger.debug("dl_parse_failed", uri=uri, kind=exc.kind.value, error=exc.message)
        raise

    logger.debug("dl_parse_succeeded", uri=uri, count=len(elements), fragment=split.fragment)
    return ParsedElements(
        uri=uri,
        elements=tuple(elements),
        stem=stem,
        query=split.query,
        fragment=split.fragment,
    )


@dataclass(slots=True)
class ParseContext:
    """Caller-owned parse state that records an error instead of raising.

    Every call to :meth:`parse` clears the previous elements. After a failed
    parse ``elements`` is empty and ``error`` holds the message; after a
    successful one ``error`` is the empty string.
    """

    elements: list[AIElement] = field(default_factory=list)
    error: str = ""

    @property
    def count(self) -> int:
        return len(self.elements)

    def parse(self, uri: str) -> bool:
        self.elements.clear()
        self.error = ""
        try:
            parsed = parse(uri)
        except DigitalLinkParseError as exc:
            self.error = exc.message
            return False
        self.elements.extend(parsed.elements)
        return True
