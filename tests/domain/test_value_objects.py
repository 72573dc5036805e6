"""Unit tests for the PropertySet value object."""

import pytest

from foodpos.domain.model.value_objects import PropertySet


class TestPropertySetCreation:

    def test_missing_fields_default_to_zero(self):
        p = PropertySet()
        assert p.energy == 0
        assert p.price == 0
        assert p.id is None

    def test_partial_fields(self):
        p = PropertySet(energy=20)
        assert p.energy == 20
        assert p.price == 0


class TestPropertySetArithmetic:

    def test_add(self):
        p = PropertySet(energy=40, price=100).add(PropertySet(energy=20, price=10))
        assert p == PropertySet(energy=60, price=110)

    def test_subtract(self):
        p = PropertySet(energy=60, price=110).subtract(PropertySet(energy=20, price=10))
        assert p == PropertySet(energy=40, price=100)

    def test_scale(self):
        p = PropertySet(energy=20, price=100).scale(0.5)
        assert p == PropertySet(energy=10, price=50)

    def test_operations_mutate_and_chain(self):
        p = PropertySet(energy=1, price=1)
        result = p.add(PropertySet(energy=1, price=1)).scale(3)
        assert result is p
        assert p == PropertySet(energy=6, price=6)

    def test_results_are_rounded(self):
        p = PropertySet(energy=0.1, price=0.1).add(PropertySet(energy=0.2, price=0.2))
        assert p.energy == 0.3
        assert p.price == 0.3

    def test_rounding_keeps_eight_digits(self):
        p = PropertySet(energy=1, price=2).scale(1 / 3)
        assert p.energy == 0.33333333
        assert p.price == 0.66666667

    def test_id_is_never_touched(self):
        p = PropertySet(energy=5, price=5, id="order")
        p.add(PropertySet(energy=1, price=1, id="other"))
        p.subtract(PropertySet(energy=2, price=2, id="another"))
        p.scale(2)
        assert p.id == "order"

    def test_add_then_subtract_restores_original(self):
        a = PropertySet(energy=12.345678, price=98.7654321, id="a")
        b = PropertySet(energy=0.1, price=7.77, id="b")
        restored = a.copy().add(b).subtract(b)
        assert restored.energy == pytest.approx(a.energy, abs=1e-8)
        assert restored.price == pytest.approx(a.price, abs=1e-8)
        assert restored.id == "a"

    def test_scale_distributes_over_add(self):
        a = PropertySet(energy=1.5, price=2.25)
        b = PropertySet(energy=3.1, price=4.7)
        k = 1.7
        separate = a.copy().scale(k).add(b.copy().scale(k))
        combined = a.add(b).scale(k)
        assert combined.energy == pytest.approx(separate.energy, abs=1e-8)
        assert combined.price == pytest.approx(separate.price, abs=1e-8)


class TestPropertySetCopy:

    def test_copy_is_equal(self):
        p = PropertySet(energy=3, price=4, id="x")
        assert p.copy() == p

    def test_copy_is_independent(self):
        p = PropertySet(energy=3, price=4, id="x")
        snapshot = p.copy()
        p.add(PropertySet(energy=1, price=1))
        assert snapshot == PropertySet(energy=3, price=4, id="x")
