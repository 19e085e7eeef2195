"""GS1 Digital Link module: URI parsing and element string rendering."""

from gs1dl.digital_link.errors import DigitalLinkParseError, ParseErrorKind
from gs1dl.digital_link.formatters import format_bracketed, format_json, format_unbracketed
from gs1dl.digital_link.models import AIElement, ParsedElements
from gs1dl.digital_link.parser import ParseContext, parse

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
