from __future__ import annotations

import math

from lettrine.components import estimate_text_width


class TestTextWidthEstimation:
    def test_empty_text_width_is_zero(self):
        assert estimate_text_width("", 12) == 0.0

    def test_mixed_cjk_ascii_width(self):
        # "测试ABC" -> 2*CJK*12 + 3*ASCII*12*0.6 = 24 + 21.6 = 45.6
        w = estimate_text_width("测试ABC", font_size=12, char_width_ratio=0.6)
        assert math.isclose(w, 45.6, rel_tol=1e-6, abs_tol=1e-6)
