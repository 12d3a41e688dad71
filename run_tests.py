#!/usr/bin/env python
"""
Simple Test Runner for AcceptLib
================================

Runs the test suite with short tracebacks and verbose output.

Usage:
    python run_tests.py           # Run all tests
    python run_tests.py --cov     # Run with coverage report (needs pytest-cov)
"""

import subprocess
import sys
import argparse
from pathlib import Path


def run_tests(with_coverage=False):
    """Run the test suite."""
    cmd = [
        sys.executable, "-m", "pytest",
        "tests",
        "--tb=short",               # Short traceback format
        "-v"                        # Verbose output
    ]

    if with_coverage:
        cmd.extend(["--cov=acceptlib", "--cov-report=term-missing"])

    print("Running AcceptLib tests...")
    print("=" * 60)

    result = subprocess.run(cmd, cwd=Path(__file__).parent)
    return result.returncode


def main():
    parser = argparse.ArgumentParser(description="Run AcceptLib tests")
    parser.add_argument("--cov", action="store_true",
                        help="Report coverage for the acceptlib package")
    args = parser.parse_args()

    sys.exit(run_tests(with_coverage=args.cov))


if __name__ == "__main__":
    main()
