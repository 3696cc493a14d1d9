import os
import sys

# Ensure src is on sys.path for package imports during tests
ROOT = os.path.dirname(os.path.dirname(__file__))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)

import pytest

ZERO_NAMESPACE = "00000000-0000-0000-0000-000000000000"


@pytest.fixture
def zero_namespace():
    """The all-zero namespace, in its textual form."""
    return ZERO_NAMESPACE
