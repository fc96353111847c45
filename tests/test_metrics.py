from __future__ import annotations

import pytest

from lettrine.processors.metrics import ReportLabMetrics
from lettrine.variables import STYLE_FONT_NAME


class TestReportLabMetrics:
    def test_builtin_font_without_file(self):
        assert ReportLabMetrics().register_font(None) == STYLE_FONT_NAME

    def test_missing_font_file_raises(self, tmp_path):
        with pytest.raises(RuntimeError, match="2001"):
            ReportLabMetrics().register_font(tmp_path / "missing.ttf")

    def test_unsupported_suffix_raises(self, tmp_path):
        p = tmp_path / "font.woff"
        p.write_bytes(b"\x00")
        with pytest.raises(RuntimeError, match="2001"):
            ReportLabMetrics().register_font(p)

    def test_helvetica_line_height(self):
        # Helvetica：ascent 718 / descent -207 -> 10 * 0.925 = 9.25 -> 9
        assert ReportLabMetrics().line_height("Helvetica", 10) == 9

    def test_unknown_face_falls_back_to_estimate(self):
        metrics = ReportLabMetrics()
        # 回退：ASCII 宽度 0.6 * 字号；上升线 0.8 * 字号
        assert metrics.glyph_width("AB", "NoSuchFace", 10) == pytest.approx(12.0)
        assert metrics.ascent("NoSuchFace", 10) == pytest.approx(8.0)

    def test_line_height_has_no_line_gap(self):
        # 14 * 0.925 = 12.95 -> 13，小于字号
        assert ReportLabMetrics().line_height("Helvetica", 14) == 13

    def test_glyph_width_is_advance_width(self):
        # Helvetica "L" 前进宽度 556/1000 em，包含右侧空白
        assert ReportLabMetrics().glyph_width("L", "Helvetica", 100) == pytest.approx(55.6)
