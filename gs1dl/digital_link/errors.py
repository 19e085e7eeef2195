"""Errors raised while parsing a GS1 Digital Link URI."""

from __future__ import annotations

from enum import Enum


class ParseErrorKind(str, Enum):
    """Categories of Digital Link parse failure."""

    ILLEGAL_CHARACTERS = "illegal_characters"
    BAD_SCHEME = "bad_scheme"
    MISSING_PATH = "missing_path"
    NO_PRIMARY_KEY = "no_primary_key"
    EMPTY_VALUE = "empty_value"
    VALUE_TOO_LONG = "value_too_long"
    TOO_MANY_AIS = "too_many_ais"
    INVALID_QUERY_AI = "invalid_query_ai"


class DigitalLinkParseError(ValueError):
    """Raised when a Digital Link URI cannot be parsed.

    The message is meant to be shown to the user as-is; ``kind`` allows
    callers to branch on the failure category.
    """

    def __init__(self, kind: ParseErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
