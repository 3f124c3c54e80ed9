"""Tests for the gradient engine."""

from __future__ import annotations

import pytest

from avatarsmith.engines.gradient import GradientEngine, Stop, gradient_stops, wavy_stops
from avatarsmith.options import EngineOptions
from avatarsmith.support.name import Name


class TestStops:
    def test_offsets(self):
        stops = gradient_stops(Name("g"), 3)
        assert [s.offset for s in stops] == [0, 50, 100]

    def test_wavy_inserts_midpoints(self):
        stops = [Stop(0, "#000000"), Stop(50, "#111111"), Stop(100, "#222222")]
        assert wavy_stops(stops) == [
            Stop(0, "#000000"),
            Stop(25, "#111111"),
            Stop(50, "#111111"),
            Stop(75, "#222222"),
            Stop(100, "#222222"),
        ]


class TestLinearAndRadial:
    def test_horizontal_default(self):
        svg = GradientEngine().generate("grad", None, 120)
        assert "<linearGradient" in svg
        assert 'x1="0%" y1="0%" x2="100%" y2="0%"' in svg
        assert svg.count("<stop ") == 3
        assert "<circle" in svg
        assert 'fill="url(#gradient-' in svg

    def test_different_seeds_differ(self):
        engine = GradientEngine()
        assert engine.generate("seed1", None, 120) != engine.generate("seed2", None, 120)

    @pytest.mark.parametrize(
        "gradient_type, vector",
        [
            ("vertical", 'x2="0%" y2="100%"'),
            ("diagonal", 'x2="100%" y2="100%"'),
        ],
    )
    def test_linear_vectors(self, gradient_type, vector):
        svg = GradientEngine().generate("grad", None, 120, EngineOptions(gradient_type=gradient_type))
        assert vector in svg

    def test_radial(self):
        svg = GradientEngine().generate("grad", None, 120, EngineOptions(gradient_type="radial"))
        assert '<radialGradient id="gradient-' in svg
        assert 'cx="50%" cy="50%" r="50%"' in svg

    def test_wavy_has_extra_stops(self):
        svg = GradientEngine().generate("grad", None, 120, EngineOptions(gradient_type="wavy"))
        assert svg.count("<stop ") == 5

    def test_color_stops(self):
        svg = GradientEngine().generate("grad", None, 120, EngineOptions(color_stops=6))
        assert svg.count("<stop ") == 6

    def test_square_shape(self):
        svg = GradientEngine().generate("grad", None, 120, EngineOptions(shape="square"))
        assert '<rect x="0" y="0" width="120" height="120" fill="url(#gradient-' in svg

    def test_hexagon_shape(self):
        svg = GradientEngine().generate("grad", None, 120, EngineOptions(shape="hexagon"))
        assert "<polygon" in svg

    def test_unknown_shape_is_circle(self):
        svg = GradientEngine().generate("grad", None, 120, EngineOptions(shape="star"))
        assert "<circle" in svg

    def test_gradient_id_depends_on_type(self):
        horizontal = GradientEngine().generate("grad", None, 120)
        radial = GradientEngine().generate("grad", None, 120, EngineOptions(gradient_type="radial"))
        assert horizontal.split('id="')[1][:17] != radial.split('id="')[1][:17]


class TestMarble:
    def _marble(self, **options):
        return GradientEngine().generate("marble", None, 200, EngineOptions(gradient_type="marble", **options))

    def test_structure(self):
        svg = self._marble()
        assert 'viewBox="0 0 80 80" fill="none" role="img"' in svg
        assert "<mask " in svg
        assert svg.count("<path ") == 2
        assert 'style="mix-blend-mode: overlay;"' in svg
        assert 'stdDeviation="7"' in svg

    def test_circle_mask_by_default(self):
        assert 'rx="160"' in self._marble()

    def test_square_mask(self):
        assert 'rx="0"' in self._marble(shape="square")

    def test_blur_option(self):
        assert 'stdDeviation="3"' in self._marble(marble_blur=3)

    def test_transforms_are_bounded(self):
        svg = self._marble()
        assert svg.count("rotate(") == 2
        assert svg.count("scale(") == 2

    def test_deterministic(self):
        assert self._marble() == self._marble()

    def test_different_seeds_differ(self):
        engine = GradientEngine()
        opts = EngineOptions(gradient_type="marble")
        assert engine.generate("seed1", None, 200, opts) != engine.generate("seed2", None, 200, opts)
