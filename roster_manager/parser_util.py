from __future__ import annotations

"""String helpers used by the command parsers."""

import re

from .errors import IndexOverflowError, InvalidIndexError

MAX_INDEX = 2147483647
MESSAGE_INVALID_INDEX = "Error: Index is not a single non-zero unsigned integer."
MESSAGE_OVERFLOW_INDEX = f"Error: Index is too large. Index must be at most {MAX_INDEX}."

_DIGITS_RE = re.compile(r"\d+")


def is_number(value: str) -> bool:
    """Return True if *value* consists of ASCII digits only."""

    return bool(_DIGITS_RE.fullmatch(value)) and value.isascii()


def is_int_overflow(value: str) -> bool:
    """Return True if the digit string *value* exceeds :data:`MAX_INDEX`."""

    max_text = str(MAX_INDEX)
    if len(value) > len(max_text):
        return True
    # equal length digit strings compare like numbers
    return len(value) == len(max_text) and value > max_text


def is_non_zero_unsigned_integer(value: str) -> bool:
    """Return True for "1", "2", ... up to MAX_INDEX; False for "0", "007", "+1", " 2 "."""

    if not is_number(value) or is_int_overflow(value):
        return False
    return not value.startswith("0")


def parse_index(one_based_index: str) -> int:
    """Parse a 1-based index after trimming surrounding whitespace.

    Raises :class:`InvalidIndexError` for non-numeric input, zero or leading
    zeros, and :class:`IndexOverflowError` for numbers beyond MAX_INDEX.
    """

    trimmed = one_based_index.strip()
    if not is_number(trimmed):
        raise InvalidIndexError(MESSAGE_INVALID_INDEX)
    if is_int_overflow(trimmed):
        raise IndexOverflowError(MESSAGE_OVERFLOW_INDEX)
    if not is_non_zero_unsigned_integer(trimmed):
        raise InvalidIndexError(MESSAGE_INVALID_INDEX)
    return int(trimmed)


def contains_word_ignore_case(sentence: str, word: str) -> bool:
    """Return True if *sentence* contains *word* as a whole word, ignoring case.

    >>> contains_word_ignore_case("ABc def", "abc")
    True
    >>> contains_word_ignore_case("ABc def", "AB")
    False
    """

    prepped = word.strip()
    if not prepped:
        raise ValueError("Word parameter cannot be empty")
    if len(prepped.split()) != 1:
        raise ValueError("Word parameter should be a single word")
    target = prepped.casefold()
    return any(token.casefold() == target for token in sentence.split())
