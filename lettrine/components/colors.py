"""
文件路径：lettrine/components/colors.py

说明：颜色字符串解析与首字/正文颜色回退链。
"""

from __future__ import annotations

from typing import Optional, Tuple

from ..variables import ERR_DATA_INVALID, STYLE_TEXT_COLOR_HEX


RGB = Tuple[int, int, int]


def parse_color(value: Optional[str], default: str = STYLE_TEXT_COLOR_HEX) -> RGB:
    """将 "#RRGGBB" 或 "#RGB" 解析为 (r, g, b) 整数元组。

    参数：
        value: 颜色字符串；None 或空白时使用 default。
        default: 缺省颜色字符串。
    异常：
        ValueError: 格式非法。
    """
    raw = (value if value is not None and str(value).strip() else default).strip()
    hex_part = raw[1:] if raw.startswith("#") else raw
    if len(hex_part) == 3:
        hex_part = "".join(ch * 2 for ch in hex_part)
    if len(hex_part) != 6:
        raise ValueError(f"[{ERR_DATA_INVALID}] 颜色格式非法: {value!r}")
    try:
        return (int(hex_part[0:2], 16), int(hex_part[2:4], 16), int(hex_part[4:6], 16))
    except ValueError as exc:
        raise ValueError(f"[{ERR_DATA_INVALID}] 颜色格式非法: {value!r}") from exc


def resolve_colors(
    text_color: Optional[str],
    body_text_color: Optional[str] = None,
    lettrine_text_color: Optional[str] = None,
) -> Tuple[RGB, RGB]:
    """按回退链解析 (lettrine_rgb, body_rgb)。

    规则：显式的首字/正文颜色优先，缺省时回退到共享的 text_color，再回退到黑色。
    """
    shared = parse_color(text_color)
    lettrine_rgb = parse_color(lettrine_text_color) if lettrine_text_color else shared
    body_rgb = parse_color(body_text_color) if body_text_color else shared
    return lettrine_rgb, body_rgb


__all__ = ["RGB", "parse_color", "resolve_colors"]
