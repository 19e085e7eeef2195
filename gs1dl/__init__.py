"""GS1 Digital Link URI parser."""

from gs1dl.digital_link import (
    AIElement,
    DigitalLinkParseError,
    ParseContext,
    ParsedElements,
    ParseErrorKind,
    format_bracketed,
    format_json,
    format_unbracketed,
    parse,
)

__version__ = "0.1.0"

__all__ = [
    "parse",
    "format_unbracketed",
    "format_bracketed",
    "format_json",
    "AIElement",
    "ParseContext",
    "ParsedElements",
    "DigitalLinkParseError",
    "ParseErrorKind",
]
