"""
Parser for card numbers and card number ranges.

Card numbers combine a series prefix, an optional language sub-prefix
and a collection number:
- "LOB-EN001" -> prefix "LOB", collection number 1
- "LOB-001" -> prefix "LOB", collection number 1

Ranges cover a contiguous span within one series:
- "LOB-001-010" -> "LOB-001" .. "LOB-010"
- "LOB-EN001-EN003" -> "LOB-EN001" .. "LOB-EN003"
"""

import re

# Last contiguous digit run, possibly followed by non-digits
# Groups: (digits,)
TRAILING_DIGITS_PATTERN = re.compile(r"(\d+)\D*$")

# Pattern: "PREFIX-[SUB]START-[SUB]END"
# Groups: (prefix, start_sub, start, end_sub, end)
RANGE_PATTERN = re.compile(r"^([^-]+)-([^-\d]*)(\d+)-([^-\d]*)(\d+)$")

MIN_NUMBER_WIDTH = 3


def split_card_number(value: str) -> tuple[str, int]:
    """
    Split a card number into series prefix and collection number.

    The collection number is the last digit run. The prefix is everything
    before that run, cut at the first hyphen.

    A value without digits yields collection number 0, which callers treat
    as "unknown" rather than an error.

    Returns:
        Tuple of (prefix, collection_number).
    """
    match = TRAILING_DIGITS_PATTERN.search(value)
    if match is None:
        return value.split("-", 1)[0], 0

    prefix = value[: match.start(1)]
    return prefix.split("-", 1)[0], int(match.group(1))


def normalize_card_number(value: str) -> str:
    """
    Rewrite a card number into the stored "PREFIX-###" form.

    "LOB-EN001" -> "LOB-001". The language sub-prefix is dropped.
    """
    prefix, number = split_card_number(value)
    return f"{prefix}-{number:0{MIN_NUMBER_WIDTH}d}"


def is_card_range(value: str) -> bool:
    """Check whether a value has the "PREFIX-START-END" range shape."""
    return RANGE_PATTERN.match(value.strip()) is not None


def expand_card_range(value: str) -> list[str]:
    """
    Expand a range expression into individual card numbers.

    Only the start endpoint's sub-prefix is used; the end's is ignored.
    Numbers are zero padded to at least three digits, or to the start
    endpoint's width if wider. A start greater than the end yields an
    empty list.

    Values that are not ranges are returned, stripped, as a single item.
    """
    match = RANGE_PATTERN.match(value.strip())
    if match is None:
        return [value.strip()]

    prefix, sub_prefix, start_digits, _end_sub_prefix, end_digits = match.groups()
    start = int(start_digits)
    end = int(end_digits)
    width = max(MIN_NUMBER_WIDTH, len(start_digits))

    return [f"{prefix}-{sub_prefix}{n:0{width}d}" for n in range(start, end + 1)]
