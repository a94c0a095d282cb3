"""
Mapping logic: turn a buffer of quantum bytes into a password string.
"""

from __future__ import annotations

from enum import IntEnum

from .errors import ShortBufferError

SPECIAL_CHARS = "!@#$%^&*"


class CharClass(IntEnum):
    LOWER = 0
    UPPER = 1
    DIGIT = 2
    SPECIAL = 3


def classify_byte(value: int) -> CharClass:
    return CharClass(value % 4)


def _lower(value: int) -> str:
    return chr(ord("a") + value % 26)


def _upper(value: int) -> str:
    return chr(ord("A") + value % 26)


def byte_to_char(
    value: int,
    *,
    include_special: bool,
    include_numbers: bool,
) -> str:
    """
    Map one byte to a character.

    The class comes from ``value % 4``; digits and specials fall back to a
    lowercase letter from the same byte when their flag is off.
    """
    char_class = classify_byte(value)
    if char_class is CharClass.UPPER:
        return _upper(value)
    if char_class is CharClass.DIGIT and include_numbers:
        return chr(ord("0") + value % 10)
    if char_class is CharClass.SPECIAL and include_special:
        return SPECIAL_CHARS[value % len(SPECIAL_CHARS)]
    return _lower(value)


def format_password(
    data: bytes,
    start_uppercase: bool,
    include_special: bool,
    include_numbers: bool,
    length: int,
) -> str:
    """
    Build a password of exactly `length` characters from `data`.

    Bytes are consumed left to right, one per character; anything past
    `length` is ignored. With `start_uppercase` the first character is
    replaced by an uppercase letter derived from the same first byte, not
    from a fresh one.
    """
    if length < 0:
        raise ValueError(f"length must be >= 0, got {length}")
    if len(data) < length:
        raise ShortBufferError(len(data), length)

    password_chars = [
        byte_to_char(
            value,
            include_special=include_special,
            include_numbers=include_numbers,
        )
        for value in data[:length]
    ]

    if start_uppercase and password_chars:
        password_chars[0] = _upper(data[0])

    return "".join(password_chars)


__all__ = [
    "CharClass",
    "SPECIAL_CHARS",
    "byte_to_char",
    "classify_byte",
    "format_password",
]
