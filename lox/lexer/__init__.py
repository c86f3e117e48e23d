"""
Lox Lexer Package

Implements a from-scratch scanner for the Lox language: source text in,
an ordered list of tokens out, ending with a single EOF token.

Key Features:
- Single pass with one or two characters of lookahead
- Line comments, multi-line string literals, decimal number literals
- Keyword recognition through an explicit read-only table
- Non-fatal diagnostics returned alongside the tokens

Author: xwest
"""

from .tokens import Token, TokenType, KEYWORDS, keyword_type
from .scanner import Scanner, scan_all, scan_file
from .errors import Diagnostic, ScanResult, LexerError

__all__ = [
    "Scanner",
    "scan_all",
    "scan_file",
    "Token",
    "TokenType",
    "KEYWORDS",
    "keyword_type",
    "Diagnostic",
    "ScanResult",
    "LexerError",
]
