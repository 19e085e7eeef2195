"""Fixed tables and capacity limits for GS1 Digital Link URI parsing."""

from __future__ import annotations

# Maximum length of a decoded AI value; currently X..90
MAX_AI_LEN = 90

# Maximum number of AI elements extracted from one Digital Link URI
MAX_AIS = 64

# Capacity for the AI codes plus values of all extracted elements
MAX_AI_BUF = MAX_AIS * (4 + MAX_AI_LEN)

# Upper bounds on rendered output lengths
MAX_OUT_JSON = MAX_AIS * (4 + MAX_AI_LEN + 6) + 2
MAX_OUT_UNBRACKETED = MAX_AIS * (4 + MAX_AI_LEN + 1) + 1
MAX_OUT_BRACKETED = MAX_AIS * (4 + MAX_AI_LEN * 2 + 2) + 1  # "(" escaped as "\("

FNC1 = "^"

# Characters permissible in a URI, including percent
URI_CHARACTERS = frozenset(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-._~:/?#[]@!$&'()*+,;=%"
)

ASCII_DIGITS = frozenset("0123456789")

SCHEMES = ("https://", "http://")

# Digital Link primary keys mark the beginning of the AI data in the path
# info. The list grows as new identification keys are introduced.
DL_PRIMARY_KEYS = frozenset(
    {
        "00",  # SSCC
        "01",  # GTIN
        "253",  # GDTI
        "255",  # GCN
        "401",  # GINC
        "402",  # GSIN
        "414",  # LOC NO.
        "417",  # PARTY
        "8003",  # GRAI
        "8004",  # GIAI
        "8006",  # ITIP
        "8010",  # CPID
        "8013",  # GMN
        "8017",  # GSRN - PROVIDER
        "8018",  # GSRN - RECIPIENT
    }
)

# AI prefixes whose elements never need an FNC1 terminator. Used to place
# separators in unbracketed element strings and to order fixed-length AIs
# first.
FIXED_LENGTH_AI_PREFIXES = frozenset(
    {
        "00", "01", "02", "03", "04",
        "11", "12", "13", "14", "15", "16", "17", "18", "19",
        "20",
        "31", "32", "33", "34", "35", "36",
        "41",
    }
)  # fmt: skip

GTIN_AI = "01"
GTIN_LENGTH = 14
GTIN_PADDABLE_LENGTHS = frozenset({8, 12, 13})

AI_MIN_LEN = 2
AI_MAX_LEN = 4

# Truncation applied to an offending numeric query parameter in error messages
QUERY_AI_ERROR_PREVIEW = 10
