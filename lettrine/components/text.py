"""
文件路径：lettrine/components/text.py

说明：文本宽度估算工具函数，供字体度量失败时回退使用。
"""

from __future__ import annotations

from ..variables import CONST_CHAR_WIDTH_RATIO


def estimate_text_width(
    text: str,
    font_size: float,
    char_width_ratio: float = CONST_CHAR_WIDTH_RATIO,
) -> float:
    """估算文本宽度（简化版）。

    - 中文按 font_size 计算；ASCII 按 font_size * char_width_ratio。
    """
    if not text:
        return 0.0
    width = 0.0
    for char in text:
        if ord(char) > 127:
            width += font_size
        else:
            width += font_size * char_width_ratio
    return width


__all__ = ["estimate_text_width"]
