"""
Tests for the composite elements: Scalar, Bivector and Trivector.

Bivectors and trivectors compose existing vectors without copying them.
The bivector magnitude is |x| |y| sin(angle(x, y)).
"""

import logging
import math

import pytest
import torch

from ga_primitives.ga.algebra import Vector, Scalar, Bivector, Trivector


# =============================================================================
# Scalar
# =============================================================================

class TestScalar:
    """Tests for the grade-0 element."""

    def test_value(self):
        assert Scalar(2.5).value == 2.5

    def test_float_conversion(self):
        assert float(Scalar(-1.0)) == -1.0

    def test_from_tensor(self):
        s = Scalar(torch.tensor(3.0, dtype=torch.float64))
        assert s.value == 3.0
        assert s.tensor().dtype == torch.float64

    def test_equality(self):
        assert Scalar(1.0) == Scalar(1.0)
        assert Scalar(1.0) != Scalar(1.0 + 2 ** -52)

    def test_from_tensor_copies_input(self):
        """Changing the source tensor afterwards leaves the Scalar alone."""
        source = torch.tensor(3.0, dtype=torch.float64)
        s = Scalar(source)
        source.fill_(5.0)
        assert s.value == 3.0

    def test_tensor_returns_copy(self):
        s = Scalar(3.0)
        s.tensor().fill_(5.0)
        assert s.value == 3.0

    def test_dtype_applied_to_tensor_input(self):
        s = Scalar(torch.tensor(0.5, dtype=torch.float64), dtype=torch.float32)
        assert s.tensor().dtype == torch.float32
        assert s.value == 0.5

    def test_device_applied_to_tensor_input(self):
        s = Scalar(torch.tensor(0.5), device="cpu")
        assert s.tensor().device == torch.device("cpu")

    def test_nan_is_not_equal_to_itself(self):
        assert Scalar(float('nan')) != Scalar(float('nan'))

    def test_repr(self):
        assert repr(Scalar(0.0)) == "Scalar(value=0.0)"


# =============================================================================
# Bivector
# =============================================================================

class TestBivectorCreation:
    """Tests for Bivector construction."""

    def test_from_vectors_keeps_references(self, unit_x, unit_y):
        bv = Bivector.from_vectors(unit_x, unit_y)
        assert bv.x is unit_x
        assert bv.y is unit_y

    def test_constructor_matches_from_vectors(self, unit_x, unit_y):
        assert Bivector(unit_x, unit_y) == Bivector.from_vectors(unit_x, unit_y)

    def test_parallel_vectors_are_accepted(self, unit_x):
        bv = Bivector.from_vectors(unit_x, Vector(2.0, 0.0, 0.0))
        assert bv.y == Vector(2.0, 0.0, 0.0)

    def test_vectors_tuple(self, unit_x, unit_y):
        assert Bivector(unit_x, unit_y).vectors() == (unit_x, unit_y)

    def test_structural_equality(self):
        """Bivectors built from equal but distinct vectors are equal."""
        a = Bivector(Vector(1.0, 2.0, 3.0), Vector(4.0, 5.0, 6.0))
        b = Bivector(Vector(1.0, 2.0, 3.0), Vector(4.0, 5.0, 6.0))
        assert a == b
        assert hash(a) == hash(b)

    def test_order_is_significant(self, unit_x, unit_y):
        assert Bivector(unit_x, unit_y) != Bivector(unit_y, unit_x)

    def test_repr(self, unit_x, unit_y):
        assert repr(Bivector(unit_x, unit_y)) == (
            "Bivector(x=Vector(x=1.0, y=0.0, z=0.0), y=Vector(x=0.0, y=1.0, z=0.0))"
        )


class TestBivectorMagnitude:
    """Tests for the parallelogram area |x| |y| sin(θ)."""

    def test_orthogonal_unit_vectors(self, unit_x, unit_y):
        """The unit square has area exactly 1."""
        assert Bivector.from_vectors(unit_x, unit_y).mag() == 1.0

    def test_orthogonal_unit_vectors_reversed(self, unit_x, unit_y):
        """Orientation does not change the magnitude."""
        assert Bivector.from_vectors(unit_y, unit_x).mag() == 1.0

    def test_scaled_orthogonal_vectors(self):
        bv = Bivector(Vector(2.0, 0.0, 0.0), Vector(0.0, 0.0, 3.0))
        assert bv.mag() == pytest.approx(6.0)

    def test_parallel_vectors_have_zero_area(self, unit_x):
        assert Bivector(unit_x, Vector(5.0, 0.0, 0.0)).mag() == 0.0

    def test_matches_cross_product_norm(self, vector_pairs):
        """|x ∧ y| equals |x × y| for non-degenerate pairs."""
        for a, b in vector_pairs:
            assert a.wedgep(b).mag() == pytest.approx(a.outerp(b).mag())

    def test_zero_vector_gives_nan(self, zero_vector, unit_x):
        """0 · 1 · sin(NaN) propagates NaN rather than raising."""
        assert math.isnan(Bivector(zero_vector, unit_x).mag())
        assert math.isnan(Bivector(unit_x, zero_vector).mag())

    def test_nan_is_logged_at_debug(self, zero_vector, unit_x, caplog):
        with caplog.at_level(logging.DEBUG, logger="ga_primitives.ga.algebra"):
            Bivector(zero_vector, unit_x).mag()
        assert "Bivector magnitude is NaN" in caplog.text


# =============================================================================
# Trivector
# =============================================================================

class TestTrivector:
    """Trivectors are inert ordered triples of vectors."""

    def test_from_vectors_keeps_references(self, unit_x, unit_y, unit_z):
        tv = Trivector.from_vectors(unit_x, unit_y, unit_z)
        assert tv.x is unit_x
        assert tv.y is unit_y
        assert tv.z is unit_z

    def test_vectors_tuple(self, unit_x, unit_y, unit_z):
        assert Trivector(unit_x, unit_y, unit_z).vectors() == (unit_x, unit_y, unit_z)

    def test_structural_equality(self, unit_x, unit_y, unit_z):
        assert Trivector(unit_x, unit_y, unit_z) == Trivector(
            Vector(1.0, 0.0, 0.0), Vector(0.0, 1.0, 0.0), Vector(0.0, 0.0, 1.0)
        )
        assert Trivector(unit_x, unit_y, unit_z) != Trivector(unit_y, unit_x, unit_z)

    def test_has_no_magnitude(self, unit_x, unit_y, unit_z):
        assert not hasattr(Trivector(unit_x, unit_y, unit_z), "mag")
