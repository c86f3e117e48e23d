"""
Token definitions for the Lox scanner.

This module defines all token types the scanner can produce:
- Single-character punctuation and arithmetic operators
- One- or two-character comparison operators
- Literals (identifiers, strings, numbers)
- Reserved keywords
- The EOF end-marker

Author: xwest
"""

import math
from decimal import Decimal
from enum import Enum
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Optional


class TokenType(Enum):
    """
    Enumeration of all token types in Lox.

    Each member's value is the text the type displays as when a token
    is rendered. Literal types display their payload instead.
    """

    # ========================================================================
    # Single-character tokens
    # ========================================================================
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    LEFT_BRACE = "{"
    RIGHT_BRACE = "}"
    COMMA = ","
    DOT = "."
    MINUS = "-"
    PLUS = "+"
    SEMICOLON = ";"
    SLASH = "/"
    STAR = "*"

    # ========================================================================
    # One or two character tokens
    # ========================================================================
    BANG = "!"
    BANG_EQUAL = "!="
    EQUAL = "="
    EQUAL_EQUAL = "=="
    GREATER = ">"
    GREATER_EQUAL = ">="
    LESS = "<"
    LESS_EQUAL = "<="

    # ========================================================================
    # Literals (display comes from the token's payload)
    # ========================================================================
    IDENTIFIER = "<identifier>"
    STRING = "<string>"
    NUMBER = "<number>"

    # ========================================================================
    # Keywords
    # ========================================================================
    AND = "and"
    CLASS = "class"
    ELSE = "else"
    FALSE = "false"
    FUN = "fun"
    FOR = "for"
    IF = "if"
    NIL = "nil"
    OR = "or"
    PRINT = "print"
    RETURN = "return"
    SUPER = "super"
    THIS = "this"
    TRUE = "true"
    VAR = "var"
    WHILE = "while"

    # ========================================================================
    # End of input
    # ========================================================================
    EOF = "\\d"

    @property
    def display(self) -> str:
        """Text shown for this type when a token is rendered."""
        return self.value


LITERAL_TYPES = frozenset({TokenType.IDENTIFIER, TokenType.STRING, TokenType.NUMBER})

OPERATOR_TYPES = frozenset({
    TokenType.LEFT_PAREN, TokenType.RIGHT_PAREN,
    TokenType.LEFT_BRACE, TokenType.RIGHT_BRACE,
    TokenType.COMMA, TokenType.DOT, TokenType.MINUS, TokenType.PLUS,
    TokenType.SEMICOLON, TokenType.SLASH, TokenType.STAR,
    TokenType.BANG, TokenType.BANG_EQUAL,
    TokenType.EQUAL, TokenType.EQUAL_EQUAL,
    TokenType.GREATER, TokenType.GREATER_EQUAL,
    TokenType.LESS, TokenType.LESS_EQUAL,
})


# Reserved words. Built once at import and read-only afterwards; the scanner
# receives it as a constructor argument.
KEYWORDS: Mapping[str, TokenType] = MappingProxyType({
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "fun": TokenType.FUN,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
})

KEYWORD_TYPES = frozenset(KEYWORDS.values())


def keyword_type(text: str) -> Optional[TokenType]:
    """Return the keyword type spelled by ``text``, or None for a plain identifier."""
    return KEYWORDS.get(text)


def format_number(value: float) -> str:
    """
    Render a number literal the way the REPL prints it.

    Integral values drop the fractional part (``12`` rather than ``12.0``)
    and nothing is ever shown in exponent notation.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the Lox language.

    Contains the token type, lexeme (raw text), literal payload for
    identifiers, strings and numbers, and the line the lexeme ended on.
    """
    type: TokenType
    lexeme: str                     # Raw text from source
    literal: Any                    # str for IDENTIFIER/STRING, float for NUMBER
    line: int

    def __str__(self) -> str:
        return f"{self.display} {self.lexeme}"

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.literal!r}, {self.line})")

    @property
    def display(self) -> str:
        """Display text of the token's kind, using the payload for literals."""
        if self.type == TokenType.NUMBER:
            return format_number(self.literal)
        if self.type in LITERAL_TYPES:
            return self.literal
        return self.type.display

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.type in LITERAL_TYPES

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a keyword."""
        return self.type in KEYWORD_TYPES

    @property
    def is_operator(self) -> bool:
        """Check if this token is punctuation or an operator."""
        return self.type in OPERATOR_TYPES

    @property
    def is_eof(self) -> bool:
        return self.type == TokenType.EOF
