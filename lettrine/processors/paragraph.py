"""
文件路径：lettrine/processors/paragraph.py

说明：段落断行与绘制计划。

- 断行时每开启新的一行才向 MarginExclusionRegion 查询该行留白，
  行首位置由断行结果决定，而不是预先按字符偏移计算；
- 坐标系：左上角为原点，y 向下，基线 y 从页面顶部量起。
  ReportLab 路径在引擎内做 Y 轴翻转。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from .layout import ComputedLayout, MarginExclusionRegion
from .markup import StyledText
from .metrics import FontMetrics
from ..variables import STYLE_PAGE_PADDING


@dataclass(frozen=True)
class WrappedLine:
    index: int
    text: str
    indent: int


@dataclass(frozen=True)
class PlacedText:
    """绘制文本项。

    属性：
        text: 文本内容。
        x: 行首 X（px）。
        baseline: 基线 Y（px，自页面顶部量起）。
        font_size: 字号（px）。
        color: RGB 颜色。
    """

    text: str
    x: float
    baseline: float
    font_size: float
    color: Tuple[int, int, int]


@dataclass
class RenderPlan:
    width: float
    height: float
    font_name: str
    font_file: Optional[Path] = None
    lettrine: Optional[PlacedText] = None
    lines: List[PlacedText] = field(default_factory=list)


def wrap_paragraph(
    text: str,
    max_width: Optional[float],
    font_name: str,
    font_size: float,
    metrics: FontMetrics,
    region: Optional[MarginExclusionRegion] = None,
) -> List[WrappedLine]:
    """按行宽贪心断行，逐行扣除区域留白。

    - 原始换行符强制断行；
    - 单词超出可用宽度时按字符切分（无空格的中文同样适用）；
    - 若 max_width 为空或 <=0，则不换行，仅按原始换行符拆分。
    """

    def _indent(line_index: int) -> int:
        if region is None:
            return 0
        return region.leading_margin(region.is_first_line(line_index))

    def _fits(candidate: str, indent: int) -> bool:
        if max_width is None or max_width <= 0:
            return True
        return metrics.glyph_width(candidate, font_name, font_size) <= max_width - indent

    lines: List[WrappedLine] = []
    if not text:
        return lines

    for raw in text.split("\n"):
        current = ""
        indent = _indent(len(lines))
        for word in raw.split(" "):
            if not word:
                continue
            trial = f"{current} {word}" if current else word
            if _fits(trial, indent):
                current = trial
                continue
            if current:
                lines.append(WrappedLine(len(lines), current, indent))
                indent = _indent(len(lines))
                current = ""
            if _fits(word, indent):
                current = word
                continue
            for ch in word:
                trial = current + ch
                if current == "" or _fits(trial, indent):
                    current = trial
                else:
                    lines.append(WrappedLine(len(lines), current, indent))
                    indent = _indent(len(lines))
                    current = ch
        lines.append(WrappedLine(len(lines), current, indent))
    return lines


def build_render_plan(
    styled: StyledText,
    *,
    width: float,
    font_name: str,
    body_font_size: float,
    body_line_height: float,
    body_color: Tuple[int, int, int],
    metrics: FontMetrics,
    lettrine_char: Optional[str] = None,
    layout: Optional[ComputedLayout] = None,
    lettrine_color: Tuple[int, int, int] = (0, 0, 0),
    font_file: Optional[Path] = None,
    padding: float = STYLE_PAGE_PADDING,
) -> RenderPlan:
    """将正文与首字定位为可直接绘制的计划。

    正文第 i 行基线 = padding + i * 行高 + 正文上升线；
    首字顶部 = padding + lettrine_top_offset，基线再加首字上升线。
    """
    region = styled.get_span(MarginExclusionRegion)
    wrapped = wrap_paragraph(
        styled.text,
        max_width=width - 2 * padding,
        font_name=font_name,
        font_size=body_font_size,
        metrics=metrics,
        region=region,
    )
    body_ascent = metrics.ascent(font_name, body_font_size)
    lines = [
        PlacedText(
            text=ln.text,
            x=padding + ln.indent,
            baseline=padding + ln.index * body_line_height + body_ascent,
            font_size=body_font_size,
            color=body_color,
        )
        for ln in wrapped
    ]
    content_height = len(wrapped) * body_line_height

    placed_lettrine: Optional[PlacedText] = None
    if lettrine_char and layout is not None:
        size = layout.lettrine_font_size
        top = padding + layout.lettrine_top_offset
        placed_lettrine = PlacedText(
            text=lettrine_char,
            x=padding,
            baseline=top + metrics.ascent(font_name, size),
            font_size=size,
            color=lettrine_color,
        )
        content_height = max(content_height, layout.lettrine_top_offset + metrics.line_height(font_name, size))

    return RenderPlan(
        width=width,
        height=content_height + 2 * padding,
        font_name=font_name,
        font_file=font_file,
        lettrine=placed_lettrine,
        lines=lines,
    )


__all__ = ["WrappedLine", "PlacedText", "RenderPlan", "wrap_paragraph", "build_render_plan"]
