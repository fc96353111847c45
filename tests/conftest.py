from __future__ import annotations

"""
pytest 全局配置：将项目根目录加入 sys.path，确保 `from lettrine...` 可被导入；
并提供确定性的字体度量替身，便于精确断言布局数值。
"""

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
ROOT_STR = str(ROOT)
if ROOT_STR not in sys.path:
    sys.path.insert(0, ROOT_STR)


class FakeMetrics:
    """固定比例的字体度量：行高 = round(1.5 * 字号)，上升线 = 0.8 * 字号，字宽 = 0.5 * 字号。"""

    def line_height(self, font_name: str, font_size: float) -> int:
        return int(round(font_size * 1.5))

    def ascent(self, font_name: str, font_size: float) -> float:
        return font_size * 0.8

    def glyph_width(self, text: str, font_name: str, font_size: float) -> float:
        return len(text) * font_size * 0.5


@pytest.fixture
def fake_metrics() -> FakeMetrics:
    return FakeMetrics()
