"""
Pytest configuration and fixtures for ga-primitives tests.
"""

import pytest

from ga_primitives.ga.algebra import Vector


@pytest.fixture
def unit_x():
    """Unit vector along e1."""
    return Vector(1.0, 0.0, 0.0)


@pytest.fixture
def unit_y():
    """Unit vector along e2."""
    return Vector(0.0, 1.0, 0.0)


@pytest.fixture
def unit_z():
    """Unit vector along e3."""
    return Vector(0.0, 0.0, 1.0)


@pytest.fixture
def zero_vector():
    """The zero vector (degenerate input)."""
    return Vector(0.0, 0.0, 0.0)


@pytest.fixture
def general_pair():
    """Two non-parallel vectors with integer-valued components."""
    return Vector(1.0, 2.0, 3.0), Vector(4.0, 5.0, 6.0)


@pytest.fixture
def vector_pairs():
    """Assorted non-degenerate vector pairs."""
    return [
        (Vector(0.0, 1.0, 0.0), Vector(1.0, 0.0, 0.0)),
        (Vector(1.0, 2.0, 3.0), Vector(4.0, 5.0, 6.0)),
        (Vector(-1.5, 0.25, 2.0), Vector(3.0, -7.0, 0.5)),
        (Vector(1e-3, 1e3, -2.0), Vector(0.1, 0.2, 0.3)),
    ]
