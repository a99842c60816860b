#!/usr/bin/env python3
"""
Test runner for the Nigeria geo data library.

Runs the tests/ suite with unittest (default) or pytest, optionally with a
coverage report for the nigeria_geo package.
"""

import sys
import subprocess
import argparse


UNITTEST_CMD = [sys.executable, "-m", "unittest", "discover", "-s", "tests", "-t", ".", "-p", "test_*.py", "-v"]
PYTEST_CMD = [sys.executable, "-m", "pytest", "tests", "-v", "--tb=short"]


def run_command(cmd, description):
    """Run a command, echoing its output, and report success."""
    print(f"\n{'=' * 60}")
    print(f"Running: {description}")
    print(f"Command: {' '.join(cmd)}")
    print(f"{'=' * 60}")

    result = subprocess.run(cmd, check=False)
    print(f"\nExit code: {result.returncode}")
    return result.returncode == 0


def check_package():
    """Make sure nigeria_geo imports and its bundled data indexes cleanly."""
    try:
        import nigeria_geo
    except ImportError as e:
        print(f"nigeria_geo could not be imported: {e}")
        print("Install it with: pip install -e .[dev]")
        return False

    metadata = nigeria_geo.METADATA
    print(f"nigeria_geo {nigeria_geo.__version__}: "
          f"{metadata.total_states} states, {metadata.total_lgas} LGAs")
    return True


def main():
    """Main test runner function."""
    parser = argparse.ArgumentParser(description="Nigeria Geo Data Test Runner")
    parser.add_argument("--type", choices=["unit", "pytest", "coverage"], default="unit",
                        help="How to run the suite")
    parser.add_argument("--file", help="Run one test module, e.g. tests.test_lgas")
    args = parser.parse_args()

    if not check_package():
        return 1

    if args.file:
        success = run_command([sys.executable, "-m", "unittest", args.file, "-v"], f"Test module {args.file}")
    elif args.type == "pytest":
        success = run_command(PYTEST_CMD, "Pytest")
    elif args.type == "coverage":
        cmd = PYTEST_CMD + ["--cov=nigeria_geo", "--cov-report=term-missing"]
        success = run_command(cmd, "Pytest with coverage")
    else:
        success = run_command(UNITTEST_CMD, "Unit tests")

    return 0 if success else 1


if __name__ == "__main__":
    sys.exit(main())
