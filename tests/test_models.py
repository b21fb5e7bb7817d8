"""Tests for models.py."""

import dataclasses

import pytest

from pyfuncplotqt.models import AxisRange, Domain, LineStyle, PlotConfig, Point


class TestLineStyle:
    """Tests for LineStyle enum."""

    def test_labels_in_selector_order(self):
        assert LineStyle.labels() == ["Solid", "Dash", "Dot", "DashDot", "DashDotDot"]

    def test_from_label(self):
        assert LineStyle.from_label("DashDot") is LineStyle.DASH_DOT

    def test_from_label_unknown(self):
        with pytest.raises(ValueError, match="Unknown line style"):
            LineStyle.from_label("Wavy")

    def test_index_round_trip(self):
        for i, style in enumerate(LineStyle):
            assert style.index == i
            assert LineStyle.from_index(i) is style

    def test_from_index_out_of_range(self):
        with pytest.raises(ValueError):
            LineStyle.from_index(5)
        with pytest.raises(ValueError):
            LineStyle.from_index(-1)


class TestValueTypes:
    """Tests for the frozen value types."""

    def test_point_is_immutable(self):
        p = Point(1.0, 2.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.x = 3.0
        assert p == Point(1.0, 2.0)

    def test_reference_domain(self):
        d = Domain()
        assert (d.x_min, d.x_max, d.step) == (2.5, 9.0, 0.8)
        assert d.x_range == AxisRange(2.5, 9.0)

    def test_axis_range(self):
        r = AxisRange(-1.0, 3.0)
        assert r.span == 4.0
        assert r.contains(0.0)
        assert r.contains(3.0)
        assert not r.contains(3.5)

    def test_config_defaults(self):
        config = PlotConfig()
        assert config.minimum_size == (400, 300)
        assert config.style.padding == 40
        assert config.style.point_radius == 2.5
        assert config.line_style is LineStyle.SOLID
