#!/usr/bin/env python3
"""
Lox Command Line Driver
=======================

Runs the scanner over a script file, or line by line in an interactive
prompt, and prints the resulting tokens.

Usage:
    lox                 # interactive prompt, empty line quits
    lox script.lox      # scan a file

Options:
    --diagnostics-only  Only print errors, not tokens
    --repr              Print tokens in their debugging form

Exit codes:
    64  wrong number of arguments
    65  the script contained lexical errors
    66  the script could not be read
"""

import argparse
import sys
from typing import List, Optional, TextIO

from ._version import __version__
from .lexer import ScanResult, scan_all


USAGE = "Usage: lox [script]"

EX_OK = 0
EX_USAGE = 64
EX_DATAERR = 65
EX_NOINPUT = 66

PROMPT = "> "


class Lox:
    """Console front end: scans source and reports tokens and errors."""

    def __init__(self, show_tokens: bool = True, use_repr: bool = False):
        self.show_tokens = show_tokens
        self.use_repr = use_repr
        self.had_error = False

    def report(self, line: int, message: str):
        """report(line, message) hook handed to the scanner."""
        print(f"[line {line}] Error: {message}")
        self.had_error = True

    def run(self, source: str) -> ScanResult:
        result = scan_all(source, reporter=self.report)

        if self.show_tokens:
            for token in result.tokens:
                print(repr(token) if self.use_repr else str(token))

        return result

    def run_file(self, path: str) -> int:
        """Scan a whole file. Returns the process exit code."""
        try:
            with open(path, 'r', encoding='utf-8') as f:
                source = f.read()
        except (OSError, UnicodeDecodeError) as e:
            print(f"lox: cannot read {path}: {e}", file=sys.stderr)
            return EX_NOINPUT

        self.run(source)
        return EX_DATAERR if self.had_error else EX_OK

    def run_prompt(self, stream: Optional[TextIO] = None) -> int:
        """Scan one line at a time until an empty line or end of input."""
        stream = stream if stream is not None else sys.stdin

        while True:
            print(PROMPT, end="", flush=True)
            line = stream.readline()
            if not line.strip():
                break

            self.run(line)
            # Errors on one line don't carry over to the next
            self.had_error = False

        return EX_OK


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the lox command"""

    parser = argparse.ArgumentParser(
        prog="lox",
        description="Scan Lox source code and print its tokens",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    lox                       # Interactive prompt
    lox hello.lox             # Print every token in hello.lox
    lox --diagnostics-only x  # Only report lexical errors
        """
    )

    # nargs='*' so that extra scripts get the 64 usage exit, not argparse's 2
    parser.add_argument('script', nargs='*',
                      help='Lox script to scan (omit for a prompt)')
    parser.add_argument('--diagnostics-only', action='store_true',
                      help='Only print errors, not tokens')
    parser.add_argument('--repr', action='store_true',
                      help='Print tokens in their debugging form')
    parser.add_argument('--version', action='version',
                      version=f"%(prog)s {__version__}")

    args = parser.parse_args(argv)

    if len(args.script) > 1:
        print(USAGE)
        return EX_USAGE

    lox = Lox(show_tokens=not args.diagnostics_only, use_repr=args.repr)

    if args.script:
        return lox.run_file(args.script[0])
    return lox.run_prompt()


if __name__ == "__main__":
    sys.exit(main())
