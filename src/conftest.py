"""
Pytest Configuration
====================

Automatically loaded by pytest. Puts src/ on sys.path so polytope_math and
animation import without installation, and provides the shared geometry
fixtures used by tests/core and tests/animation.

Usage:
    cd src
    pytest tests/ -v
"""

import sys
from pathlib import Path

import pytest

# Module level so the path is set before test modules are imported
src_root = Path(__file__).parent
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))


# Dimensions exercised by the parametrized family tests.
# 12 is above the cube cap; 1 is the smallest non-empty case.
TEST_DIMENSIONS = [1, 2, 3, 4, 5, 7, 12]


@pytest.fixture(params=TEST_DIMENSIONS, ids=lambda n: f"n{n}")
def dimension(request):
    return request.param


@pytest.fixture(params=["simplex", "cube", "orthoplex"])
def family(request):
    return request.param


@pytest.fixture
def geometry(family, dimension):
    """Freshly generated geometry dict for every (family, n) pair."""
    from polytope_math.builders import generate
    return generate(family, dimension)
