"""Structural split of a Digital Link URI into domain, path, query and fragment."""

from __future__ import annotations

from dataclasses import dataclass

from gs1dl.digital_link.constants import SCHEMES, URI_CHARACTERS
from gs1dl.digital_link.errors import DigitalLinkParseError, ParseErrorKind


@dataclass(frozen=True, slots=True)
class SplitURI:
    """Offsets of a URI resolved into its regions.

    ``path`` always starts with ``/`` and excludes the query and fragment.
    ``query`` and ``fragment`` are ``None`` when their delimiter is absent and
    ``""`` when the delimiter is present with nothing after it.
    """

    scheme: str
    domain: str
    path: str
    query: str | None
    fragment: str | None


def split_uri(uri: str) -> SplitURI:
    """Split ``uri`` without modifying it.

    Raises:
        DigitalLinkParseError: On illegal characters, an unsupported scheme,
            or a missing domain or path.
    """
    if not URI_CHARACTERS.issuperset(uri):
        raise DigitalLinkParseError(
            ParseErrorKind.ILLEGAL_CHARACTERS, "URI contains illegal characters"
        )

    for scheme in SCHEMES:
        if uri.startswith(scheme):
            rest = uri[len(scheme) :]
            break
    else:
        raise DigitalLinkParseError(
            ParseErrorKind.BAD_SCHEME, "Scheme must be http:// or https://"
        )

    slash = rest.find("/")
    if slash < 1:
        raise DigitalLinkParseError(
            ParseErrorKind.MISSING_PATH, "URI must contain a domain and path info"
        )

    domain, path = rest[:slash], rest[slash:]

    # The fragment delimits the end of the data, the query the end of the path
    fragment: str | None = None
    path, sep, tail = path.partition("#")
    if sep:
        fragment = tail

    query: str | None = None
    path, sep, tail = path.partition("?")
    if sep:
        query = tail

    return SplitURI(
        scheme=scheme[: -len("://")],
        domain=domain,
        path=path,
        query=query,
        fragment=fragment,
    )
