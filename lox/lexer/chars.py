"""
Character classification for the Lox scanner.

Lox identifiers and numbers are ASCII only. str.isalpha()/str.isdigit()
accept any Unicode letter or digit and must not be used here.
"""

_DIGITS = frozenset("0123456789")
_ALPHA = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_")


def is_digit(char: str) -> bool:
    """Check if character is an ASCII decimal digit."""
    return char in _DIGITS


def is_alpha(char: str) -> bool:
    """Check if character can start an identifier."""
    return char in _ALPHA


def is_alpha_numeric(char: str) -> bool:
    """Check if character can continue an identifier."""
    return is_alpha(char) or is_digit(char)
