"""Tests for card size estimation."""

import pytest

from mind_layout.layout.config import LayoutConfig
from mind_layout.layout.dims import estimate_dims, layout_dims, node_dims
from mind_layout.parser.model import Dims, Node


def test_blank_card_label_measured_as_untitled():
    assert estimate_dims("task", "") == estimate_dims("task", "Untitled")
    assert estimate_dims("task", "   ") == Dims(180.0, 70.0)


def test_short_card_keeps_default_size():
    assert estimate_dims("feature", "Login") == Dims(180.0, 70.0)
    assert estimate_dims("goal", "Ship") == Dims(190.0, 76.0)


def test_long_card_label_wraps_and_widens():
    d = estimate_dims("task", "x" * 100)
    # 100 chars * 6.15 = 615 raw, wrapped into 300-wide column over 3 lines
    assert d.w == pytest.approx(338.0)
    assert d.h == pytest.approx(102.0)


def test_card_height_capped():
    d = estimate_dims("task", "x" * 2000)
    assert d.w == pytest.approx(338.0)
    assert d.h == 220.0


def test_non_card_label_grows_past_free_chars():
    assert estimate_dims("domain", "Operations") == Dims(170.0, 50.0)
    d = estimate_dims("domain", "x" * 24)
    assert d.w == pytest.approx(170.0 + 10 * 6.8)
    assert d.h == 50.0


def test_non_card_width_capped():
    d = estimate_dims("root", "x" * 200)
    assert d.w == 420.0
    assert d.h == 56.0


def test_unknown_type_uses_task_defaults():
    assert estimate_dims("milestone", "abc") == Dims(180.0, 70.0)


def test_measured_size_wins_per_axis():
    node = Node(id="a", type="task", label="Short", measured_w=300.0)
    assert node_dims(node) == Dims(300.0, 70.0)

    node = Node(id="b", type="domain", label="Short", measured_h=64.0)
    assert node_dims(node) == Dims(170.0, 64.0)


@pytest.mark.parametrize("bad", [float("inf"), float("nan"), -5.0, 0.0])
def test_unusable_measurement_falls_back_to_estimate(bad):
    node = Node(id="a", type="task", label="Short", measured_w=bad, measured_h=bad)
    assert node_dims(node) == Dims(180.0, 70.0)


def test_layout_width_softened_above_cap():
    assert layout_dims(Dims(100.0, 50.0)) == Dims(100.0, 50.0)
    assert layout_dims(Dims(220.0, 50.0)).w == 220.0
    assert layout_dims(Dims(400.0, 50.0)).w == pytest.approx(220.0 + 180.0 * 0.52)


def test_layout_width_hard_cap():
    assert layout_dims(Dims(600.0, 70.0)) == Dims(340.0, 70.0)


def test_dims_always_positive():
    config = LayoutConfig()
    for node_type in ("root", "domain", "goal", "feature", "task", "other"):
        for label in ("", "a", "A much longer label " * 5):
            d = estimate_dims(node_type, label, config)
            assert d.w > 0 and d.h > 0
            ld = layout_dims(d, config)
            assert 0 < ld.w <= d.w
