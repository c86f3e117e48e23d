"""
Error handling for the Lox scanner.

Scanning never stops on bad input: problems are collected as diagnostics
and handed back alongside the tokens, so callers decide what an error
means for exit codes or a REPL prompt.

Author: xwest
"""

from typing import Callable, Dict, List, Optional
from dataclasses import dataclass, field

from .tokens import Token


# Signature of the optional report hook: report(line, message)
Reporter = Callable[[int, str], None]


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Unexpected character.",
    "L002": "Unterminated string.",
    "L003": "Invalid numeric literal",
}


@dataclass(frozen=True)
class Diagnostic:
    """A recoverable problem found while scanning."""
    line: int
    message: str
    code: Optional[str] = None
    help_text: Optional[str] = None

    def __str__(self) -> str:
        return f"[line {self.line}] Error: {self.message}"


@dataclass
class ScanResult:
    """
    Outcome of scanning one source text.

    ``tokens`` always ends with the EOF token, even when ``diagnostics``
    is non-empty.
    """
    tokens: List[Token]
    diagnostics: List[Diagnostic] = field(default_factory=list)

    @property
    def had_error(self) -> bool:
        return len(self.diagnostics) > 0

    def errors_by_line(self) -> Dict[int, List[Diagnostic]]:
        """Group diagnostics by the line they were reported on."""
        grouped: Dict[int, List[Diagnostic]] = {}
        for diagnostic in self.diagnostics:
            grouped.setdefault(diagnostic.line, []).append(diagnostic)
        return grouped


class LexerError(Exception):
    """
    Exception raised when the scanner breaks one of its own invariants.

    Malformed source is never reported this way; it becomes a Diagnostic.
    """

    def __init__(
        self,
        message: str,
        line: int,
        code: Optional[str] = None,
        help_text: Optional[str] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            line=line,
            message=message,
            code=code,
            help_text=help_text
        )

    def __str__(self) -> str:
        return str(self.diagnostic)


# Helper functions for creating common diagnostics
def unexpected_character(char: str, line: int) -> Diagnostic:
    """Create a diagnostic for a character no token can start with."""
    if char.isprintable():
        help_text = f"The character '{char}' is not valid in Lox source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return Diagnostic(
        line=line,
        message=ERROR_CODES["L001"],
        code="L001",
        help_text=help_text
    )


def unterminated_string(line: int) -> Diagnostic:
    """Create a diagnostic for a string literal with no closing quote."""
    return Diagnostic(
        line=line,
        message=ERROR_CODES["L002"],
        code="L002",
        help_text='String literals must be closed with a matching " quote.'
    )


def create_invalid_number_error(lexeme: str, line: int) -> LexerError:
    """Create an error for a number lexeme that float() rejected."""
    return LexerError(
        message=f"{ERROR_CODES['L003']}: '{lexeme}'",
        line=line,
        code="L003",
        help_text="The scanner only accepts digits with an optional fractional part."
    )
