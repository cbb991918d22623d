#!/usr/bin/env python3
"""
Test runner for Wine Selector.

Adds src/ to path and runs pytest.
"""

import sys
from pathlib import Path

# Add src to path
src_path = Path(__file__).parent / "src"
sys.path.insert(0, str(src_path))

import pytest

if __name__ == "__main__":
    # Verbose output plus coverage
    exit_code = pytest.main([
        "tests/",
        "-v",
        "--tb=short",
        "--cov=wineselector",
        "--cov-report=term-missing",
    ])
    sys.exit(exit_code)
