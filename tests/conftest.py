"""
Pytest configuration for nupy tests.
"""
import sys
import os

import pytest

# Make `import nupy` work without installing the package (src/ layout).
_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
_SRC_DIR = os.path.join(_ROOT, 'src')

if _SRC_DIR not in sys.path:
	sys.path.insert(0, _SRC_DIR)

from nupy.error_reporter import ErrorReporter, reset_error_reporter  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_default_reporter():
	reset_error_reporter()
	yield


@pytest.fixture
def reporter():
	return ErrorReporter()
