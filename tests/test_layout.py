from __future__ import annotations

import pytest

from lettrine.processors.layout import (
    ComputedLayout,
    LayoutConfig,
    MarginExclusionRegion,
    build_margin_region,
    compute_layout,
    finalize_layout,
    measure_layout,
    propose_font_size,
)
from lettrine.processors.metrics import ReportLabMetrics


class TestProposeFontSize:
    def test_reference_values(self):
        # ((2 * 20) - 14) * 2 = 52
        assert propose_font_size(LayoutConfig(lines_spanned=2, body_font_size=14, body_line_height=20)) == 52

    def test_scales_with_lines_spanned(self):
        # ((2 * 20) - 14) * 3 = 78
        assert propose_font_size(LayoutConfig(lines_spanned=3, body_font_size=14, body_line_height=20)) == 78

    def test_single_line(self):
        assert propose_font_size(LayoutConfig(lines_spanned=1, body_font_size=10, body_line_height=12)) == 14


class TestFinalizeLayout:
    def test_offset_is_negative_when_line_taller_than_size(self):
        layout = finalize_layout(52, measured_line_height=60, measured_width=40)
        assert layout == ComputedLayout(lettrine_font_size=52, lettrine_top_offset=-8, indent_width=40)

    def test_offset_positive_when_line_shorter_than_size(self):
        layout = finalize_layout(52, measured_line_height=48, measured_width=40)
        assert layout.lettrine_top_offset == 4

    def test_indent_is_integer(self):
        assert finalize_layout(20, 24, 33.9).indent_width == 33


class TestComputeLayout:
    def test_deterministic(self):
        config = LayoutConfig(lines_spanned=2, body_font_size=14, body_line_height=20)
        first = compute_layout(config, measured_line_height=61, measured_width=45)
        second = compute_layout(config, measured_line_height=61, measured_width=45)
        assert first == second
        assert first == ComputedLayout(52, -9, 45)

    def test_measure_layout_round_trip(self, fake_metrics):
        # 字号 = ((2*18)-14)*2 = 44；行高 round(44*1.5)=66 -> 偏移 -22；宽度 "A"=22 + 右内边距 14
        config = LayoutConfig(lines_spanned=2, body_font_size=14, body_line_height=18)
        layout = measure_layout(config, fake_metrics, "A", "Helvetica", padding_right=14)
        assert layout == ComputedLayout(lettrine_font_size=44, lettrine_top_offset=-22, indent_width=36)


class TestMarginExclusionRegion:
    def test_first_line_only(self):
        region = MarginExclusionRegion(line_count=2, margin=30)
        assert region.margin_for_line(0) == 30
        assert region.margin_for_line(1) == 0
        assert region.margin_for_line(2) == 0
        assert region.margin_for_line(10) == 0

    def test_leading_margin_hook(self):
        region = MarginExclusionRegion(line_count=3, margin=25)
        assert region.leading_margin(True) == 25
        assert region.leading_margin(False) == 0

    @pytest.mark.parametrize("index, expected", [(0, True), (1, True), (2, True), (3, False), (7, False)])
    def test_is_first_line_bounded_by_line_count(self, index, expected):
        assert MarginExclusionRegion(line_count=3, margin=25).is_first_line(index) is expected

    def test_build_from_layout(self):
        layout = ComputedLayout(lettrine_font_size=52, lettrine_top_offset=-8, indent_width=40)
        assert build_margin_region(layout, 2) == MarginExclusionRegion(line_count=2, margin=40)


def test_measure_layout_indent_uses_advance_width_plus_padding():
    layout = measure_layout(LayoutConfig(1, 14, 13), ReportLabMetrics(), "L", "Helvetica", padding_right=14)
    # 字号 (2*13-14)*1 = 12；"L" 前进宽度 12 * 0.556 = 6.672 -> 7；另加 14
    assert layout.lettrine_font_size == 12
    assert layout.indent_width == 21
