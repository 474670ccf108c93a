#!/usr/bin/env python3
"""
Main test runner for the exprlex test suite.
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


def run_smoke_check():
    """Tokenize a sample expression before running the suite."""
    try:
        from exprlex import tokenize, try_tokenize
    except ImportError as e:
        print(f"❌ Failed to import exprlex: {e}")
        return False

    print("Tokenizing a sample expression...")
    for token in tokenize("sqrt(x^2 + y^2) * 3.2e-5 - pi"):
        print(f"     {token}")

    result = try_tokenize("1.2.3")
    if result.ok:
        print("❌ Malformed number was accepted")
        return False
    print(f"     1.2.3 -> {result.error.kind.name}")
    print()
    return True


def run_all_tests():
    """Run all exprlex tests."""

    print("🚀 exprlex Test Suite")
    print("=" * 60)

    if not run_smoke_check():
        return False

    loader = unittest.TestLoader()
    suite = loader.discover(os.path.join(project_root, "tests"))
    runner = unittest.TextTestRunner(verbosity=2)
    result = runner.run(suite)

    print("=" * 60)
    if result.wasSuccessful():
        print(f"✅ All {result.testsRun} tests passed")
    else:
        print(f"❌ {len(result.failures)} failures, {len(result.errors)} errors")
    return result.wasSuccessful()


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
