"""Percent-decoding of Digital Link path and query components."""

from __future__ import annotations

from urllib.parse import unquote_to_bytes

from gs1dl.digital_link.constants import MAX_AI_LEN


def unescape_component(
    data: str,
    *,
    query_component: bool = False,
    max_len: int = MAX_AI_LEN,
) -> tuple[str, int]:
    """Decode ``data``, keeping at most ``max_len`` characters.

    Decoded octets map one-to-one onto characters (Latin-1), so the length
    of the result is its length in bytes. Malformed escapes are copied
    through unchanged. ``+`` means space in query components only.

    Returns:
        The decoded text and the full decoded length before truncation.
    """
    if query_component:
        data = data.replace("+", " ")
    octets = unquote_to_bytes(data)
    return octets[:max_len].decode("latin-1"), len(octets)
