"""Tests for dimension construction and the reference regions."""

import math

import pytest

from nestquad import (
    DimensionSpec, Interval, make_dimension, integrate_nested,
    revolved_solid_dimensions, revolved_solid_volume, triangle_dimensions,
)


class TestMakeDimension:

    def test_constants_are_wrapped(self):
        spec = make_dimension(1.0, 4.0, "x", 6)
        assert isinstance(spec, DimensionSpec)
        assert spec.bounds({}) == (1.0, 4.0)
        assert spec.resolution({}, default=100) == 6

    def test_callables_are_kept(self):
        upper = lambda b: 2.0 * b["x"]
        spec = make_dimension(0.0, upper, "y")
        assert spec.upper is upper
        assert spec.bounds({"x": 1.5}) == (0.0, 3.0)

    def test_missing_resolution_uses_default(self):
        assert make_dimension(0.0, 1.0, "x").resolution({}, default=42) == 42

    def test_callable_resolution(self):
        spec = make_dimension(0.0, 1.0, "y", lambda b: int(b["x"]))
        assert spec.resolution({"x": 7.9}, default=100) == 7

    @pytest.mark.parametrize("name", ["", "1x", "x y", None, 3])
    def test_invalid_name(self, name):
        with pytest.raises(ValueError, match="identifier"):
            make_dimension(0.0, 1.0, name)

    def test_spec_is_frozen(self):
        spec = make_dimension(0.0, 1.0, "x")
        with pytest.raises(AttributeError):
            spec.name = "y"


class TestInterval:

    def test_width(self):
        assert Interval(0.0, 3.0, 6).width == 0.5

    def test_reversed_width(self):
        assert Interval(2.0, 0.0, 4).width == -0.5


class TestRegions:

    def test_revolved_solid_closed_form(self):
        assert revolved_solid_volume() == pytest.approx(8.0 / 3.0 * (math.pi - 4.0 / 3.0))
        assert revolved_solid_volume() == pytest.approx(4.8220, abs=1e-4)

    def test_revolved_solid_axes(self):
        dims = revolved_solid_dimensions(n=10)
        assert [d.name for d in dims] == ["t", "r", "z"]
        assert dims[1].bounds({"t": math.pi / 2}) == pytest.approx((0.0, 2.0))
        assert dims[2].bounds({"t": 0.3, "r": 0.0}) == pytest.approx((0.0, 2.0))
        assert all(d.n == 10 for d in dims)

    def test_revolved_solid_converges(self):
        coarse = integrate_nested(lambda b: b["r"], revolved_solid_dimensions(n=20))
        fine = integrate_nested(lambda b: b["r"], revolved_solid_dimensions(n=60))
        exact = revolved_solid_volume()
        assert coarse == pytest.approx(exact, rel=5e-2)
        assert fine == pytest.approx(exact, rel=1e-2)

    @pytest.mark.parametrize("a", [0.5, 1.0, 3.0])
    def test_triangle_area(self, a):
        assert integrate_nested(lambda b: 1.0, triangle_dimensions(a, n=9)) == pytest.approx(a * a / 2)
