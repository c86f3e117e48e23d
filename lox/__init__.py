"""
Lox Front End Package

The lexical analysis stage of the Lox language.

Architecture:
    lox/
    ├── lexer/           # Tokenization and lexical analysis
    └── cli.py           # `lox` command: run a file or an interactive prompt

Author: xwest
License: MIT
"""

from ._version import __version__
__author__ = "xwest"
__license__ = "MIT"

from .lexer import Scanner, Token, TokenType, scan_all

__all__ = [
    # Core classes
    "Scanner",
    "Token",
    "TokenType",
    "scan_all",

    # Version info
    "__version__",
    "__author__",
    "__license__",
]
