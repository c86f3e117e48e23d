#!/usr/bin/env python3
"""
Main test runner for the Lox scanner tests.

Author: xwest
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


def run_all_tests():
    """Run all Lox scanner tests."""

    print("Lox Scanner Test Suite")
    print("=" * 60)

    # Test if basic imports work
    try:
        from lox.lexer import Scanner, scan_all
        from lox.cli import main

        print("All scanner modules imported successfully")
        print()

    except ImportError as e:
        print(f"Failed to import scanner modules: {e}")
        return False

    # Smoke test on a small program
    print("Testing a small program...")
    code = """
    fun add(a, b) {
        return a + b; // sum
    }
    print add(5, 10.5);
    """
    result = scan_all(code)
    print(f"  Generated {len(result.tokens)} tokens, {len(result.diagnostics)} diagnostics")
    if result.had_error:
        for diagnostic in result.diagnostics:
            print(f"  {diagnostic}")
        return False
    print()

    # Run the unit tests
    loader = unittest.TestLoader()
    suite = loader.discover(os.path.join(project_root, "tests"), pattern="test_*.py")
    runner = unittest.TextTestRunner(verbosity=2)
    outcome = runner.run(suite)

    print()
    print("=" * 60)
    if outcome.wasSuccessful():
        print(f"All {outcome.testsRun} tests passed")
    else:
        print(f"{len(outcome.failures)} failures, {len(outcome.errors)} errors "
              f"out of {outcome.testsRun} tests")

    return outcome.wasSuccessful()


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
