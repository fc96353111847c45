"""
文件路径：lettrine/processors/layout.py

说明：首字下沉的段落布局计算。

两阶段协议（字号不依赖外部，偏移与缩进依赖一次度量往返）：
    1) size = propose_font_size(config)
    2) 调用方用字体度量获取该字号下首字的行高与字形宽度
    3) layout = finalize_layout(size, measured_line_height, measured_width)
    4) region = build_margin_region(layout, config.lines_spanned)

`measure_layout` 把上述往返封装为一次调用。

前置条件（调用方负责校验，本模块不做防御）：
- body_line_height > 0，lines_spanned >= 1；
- 违反时输出未定义。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .metrics import FontMetrics


Number = Union[int, float]


@dataclass(frozen=True)
class LayoutConfig:
    """布局输入：跨越行数、正文字号与正文行高（px）。"""

    lines_spanned: int
    body_font_size: Number
    body_line_height: Number


@dataclass(frozen=True)
class ComputedLayout:
    """布局结果。

    属性：
        lettrine_font_size: 首字字号（px）。
        lettrine_top_offset: 首字顶部偏移（px），可能为负（上移）。
        indent_width: 前 N 行的左侧缩进宽度（px）。
    """

    lettrine_font_size: Number
    lettrine_top_offset: Number
    indent_width: int


@dataclass(frozen=True)
class MarginExclusionRegion:
    """按行号生效的左侧留白区域，仅作用于段落开头的 line_count 行。

    渲染器在断行时逐行查询：
    - margin_for_line(i)：第 0 行返回 margin，其余行与 i >= line_count 均返回 0；
    - leading_margin(first)：留白钩子，first 为 True 时返回 margin；
      渲染器仅对前 line_count 行传入 first=True。
    """

    line_count: int
    margin: int

    def leading_margin(self, first: bool) -> int:
        return self.margin if first else 0

    def margin_for_line(self, line_index: int) -> int:
        if line_index >= self.line_count:
            return 0
        return self.leading_margin(line_index == 0)

    def is_first_line(self, line_index: int) -> bool:
        """该行是否处于区域内（渲染器据此传入 first）。"""
        return 0 <= line_index < self.line_count


def propose_font_size(config: LayoutConfig) -> Number:
    """第一阶段：首字字号 = ((2 * 正文行高) - 正文字号) * 跨越行数。

    `2 * 行高 - 字号` 为经验修正，使首字大写高度对齐正文基线网格。
    """
    return ((2 * config.body_line_height) - config.body_font_size) * config.lines_spanned


def finalize_layout(
    lettrine_font_size: Number,
    measured_line_height: Number,
    measured_width: Number,
) -> ComputedLayout:
    """第二阶段：根据渲染器回传的度量值完成布局。

    参数：
        lettrine_font_size: 第一阶段得到的首字字号。
        measured_line_height: 渲染器在该字号下报告的首字行高。
        measured_width: 渲染后首字宽度（含其自身内边距）。
    """
    return ComputedLayout(
        lettrine_font_size=lettrine_font_size,
        lettrine_top_offset=-(measured_line_height - lettrine_font_size),
        indent_width=max(0, int(measured_width)),
    )


def compute_layout(
    config: LayoutConfig,
    measured_line_height: Number,
    measured_width: Number,
) -> ComputedLayout:
    """对已完成度量的输入一次性执行两个阶段；相同输入恒得相同结果。"""
    return finalize_layout(propose_font_size(config), measured_line_height, measured_width)


def build_margin_region(layout: ComputedLayout, lines_spanned: int) -> MarginExclusionRegion:
    return MarginExclusionRegion(line_count=lines_spanned, margin=layout.indent_width)


def measure_layout(
    config: LayoutConfig,
    metrics: FontMetrics,
    lettrine_char: str,
    font_name: str,
    padding_right: Number = 0,
) -> ComputedLayout:
    """通过字体度量完成完整的两阶段往返。

    padding_right 为首字右侧内边距，计入缩进宽度（通常取正文字号）。
    字形宽度取前进宽度（advance width，ReportLab stringWidth），而非字形墨迹边界；
    对 "L"、"A" 等字形，缩进会比墨迹边界略宽。
    """
    size = propose_font_size(config)
    line_height = metrics.line_height(font_name, size)
    glyph_width = metrics.glyph_width(lettrine_char, font_name, size)
    return finalize_layout(size, line_height, int(round(glyph_width)) + int(padding_right))


__all__ = [
    "LayoutConfig",
    "ComputedLayout",
    "MarginExclusionRegion",
    "propose_font_size",
    "finalize_layout",
    "compute_layout",
    "build_margin_region",
    "measure_layout",
]
