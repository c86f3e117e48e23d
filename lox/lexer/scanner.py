"""
Lox Scanner - turns source text into tokens

A hand-written single pass over the source with one or two characters of
lookahead. start/current are offsets into the same string for the whole
scan and every lexeme is the slice between them.

xwest
"""

from typing import Dict, List, Mapping, Optional, Tuple

from .chars import is_alpha, is_alpha_numeric, is_digit
from .errors import (
    Diagnostic, Reporter, ScanResult, create_invalid_number_error,
    unexpected_character, unterminated_string
)
from .tokens import KEYWORDS, Token, TokenType


# Punctuation that is always exactly one character
SINGLE_CHAR_TOKENS: Dict[str, TokenType] = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

# Operators that become two characters when followed by '='
# char -> (type without '=', type with '=')
EQUAL_SUFFIX_TOKENS: Dict[str, Tuple[TokenType, TokenType]] = {
    "!": (TokenType.BANG, TokenType.BANG_EQUAL),
    "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    "<": (TokenType.LESS, TokenType.LESS_EQUAL),
    ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
}

WHITESPACE = frozenset(" \r\t")


class Scanner:
    """
    Lox lexical analyzer.

    A Scanner is single-use: it scans one source once. Repeated calls to
    scan() or scan_tokens() return the result of the first scan.
    """

    def __init__(
        self,
        source: str,
        keywords: Mapping[str, TokenType] = KEYWORDS,
        reporter: Optional[Reporter] = None
    ):
        """
        Initialize the scanner with source code.

        Args:
            source: Complete source text
            keywords: Reserved word table used to tell keywords from identifiers
            reporter: Optional report(line, message) hook, called once per
                diagnostic as it is found
        """
        self.source = source
        self.keywords = keywords
        self.reporter = reporter
        self.start = 0
        self.current = 0
        self.line = 1
        self.tokens: List[Token] = []
        self.diagnostics: List[Diagnostic] = []
        self._result: Optional[ScanResult] = None

    def scan(self) -> ScanResult:
        """
        Scan the entire source.

        Returns:
            ScanResult with tokens (always ending in EOF) and diagnostics
        """
        if self._result is not None:
            return self._result

        while not self._is_at_end():
            # We are at the beginning of the next lexeme
            self.start = self.current
            self._scan_token()

        self.tokens.append(Token(TokenType.EOF, "", None, self.line))
        self._result = ScanResult(self.tokens, self.diagnostics)
        return self._result

    def scan_tokens(self) -> List[Token]:
        """Scan the entire source and return just the tokens."""
        return self.scan().tokens

    def has_errors(self) -> bool:
        """Check if the scanner reported any diagnostics."""
        return len(self.diagnostics) > 0

    def _scan_token(self):
        char = self._advance()

        if char in SINGLE_CHAR_TOKENS:
            self._add_token(SINGLE_CHAR_TOKENS[char])
        elif char in EQUAL_SUFFIX_TOKENS:
            single, double = EQUAL_SUFFIX_TOKENS[char]
            self._add_token(double if self._match("=") else single)
        elif char == "/":
            if self._match("/"):
                # A comment goes until the end of the line
                while self._peek() != "\n" and not self._is_at_end():
                    self._advance()
            else:
                self._add_token(TokenType.SLASH)
        elif char in WHITESPACE:
            pass
        elif char == "\n":
            self.line += 1
        elif char == '"':
            self._string()
        elif is_digit(char):
            self._number()
        elif is_alpha(char):
            self._identifier()
        else:
            self._report(unexpected_character(char, self.line))

    def _string(self):
        """Scan a string literal; the opening quote is already consumed."""
        while self._peek() != '"' and not self._is_at_end():
            if self._peek() == "\n":
                self.line += 1
            self._advance()

        if self._is_at_end():
            self._report(unterminated_string(self.line))
            return

        # The closing "
        self._advance()

        # Trim the surrounding quotes
        value = self.source[self.start + 1:self.current - 1]
        self._add_token(TokenType.STRING, value)

    def _number(self):
        """Scan a number literal; the first digit is already consumed."""
        while is_digit(self._peek()):
            self._advance()

        # A '.' only belongs to the number when a digit follows it
        if self._peek() == "." and is_digit(self._peek_next()):
            self._advance()
            while is_digit(self._peek()):
                self._advance()

        lexeme = self.source[self.start:self.current]
        try:
            value = float(lexeme)
        except ValueError as e:
            raise create_invalid_number_error(lexeme, self.line) from e

        self._add_token(TokenType.NUMBER, value)

    def _identifier(self):
        """Scan an identifier or keyword; the first letter is already consumed."""
        while is_alpha_numeric(self._peek()):
            self._advance()

        text = self.source[self.start:self.current]
        token_type = self.keywords.get(text)
        if token_type is None:
            self._add_token(TokenType.IDENTIFIER, text)
        else:
            self._add_token(token_type)

    def _add_token(self, token_type: TokenType, literal=None):
        text = self.source[self.start:self.current]
        self.tokens.append(Token(token_type, text, literal, self.line))

    def _report(self, diagnostic: Diagnostic):
        self.diagnostics.append(diagnostic)
        if self.reporter is not None:
            self.reporter(diagnostic.line, diagnostic.message)

    def _advance(self) -> str:
        """Consume and return the next character, or '\\0' at end of input."""
        if self._is_at_end():
            return "\0"
        char = self.source[self.current]
        self.current += 1
        return char

    def _match(self, expected: str) -> bool:
        """Consume the next character only if it is ``expected``."""
        if self._is_at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def _peek(self) -> str:
        if self._is_at_end():
            return "\0"
        return self.source[self.current]

    def _peek_next(self) -> str:
        if self.current + 1 >= len(self.source):
            return "\0"
        return self.source[self.current + 1]

    def _is_at_end(self) -> bool:
        return self.current >= len(self.source)


def scan_all(source: str, reporter: Optional[Reporter] = None) -> ScanResult:
    """
    Convenience function to scan a source string.

    Args:
        source: Source code string
        reporter: Optional report(line, message) hook

    Returns:
        ScanResult with tokens and diagnostics
    """
    return Scanner(source, reporter=reporter).scan()


def scan_file(filepath: str, reporter: Optional[Reporter] = None) -> ScanResult:
    """
    Convenience function to scan a source file.

    Args:
        filepath: Path to source file
        reporter: Optional report(line, message) hook

    Returns:
        ScanResult with tokens and diagnostics

    Raises:
        IOError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return scan_all(source, reporter)
