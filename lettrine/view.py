"""
文件路径：lettrine/view.py

模块职责：
- LettrineTextView：首字下沉段落的绑定层。持有属性（正文、字号、字体、颜色、跨越行数），
  任一属性变化时同步、整体地重新计算首字解析、布局与留白区域；
- 对外暴露可见性约定与渲染入口。

可见性：
- 正文为空 → 首字与正文均隐藏；
- 正文非空但无首字标记 → 仅正文可见；
- 正文含首字标记 → 两者均可见。

组件调用说明：
- extractor.extract、processors.layout（两阶段计算）、processors.markup.to_styled_text、
  processors.paragraph.build_render_plan、processors.engines.*
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple

from .components import ErrorHandler, FileHandler, get_logger, parse_color, resolve_colors
from .data_handler import LettrineAttributes
from .extractor import extract
from .processors.engines import render_pymupdf, render_raster, render_reportlab
from .processors.layout import (
    ComputedLayout,
    LayoutConfig,
    build_margin_region,
    measure_layout,
    propose_font_size,
)
from .processors.markup import StyledText, to_styled_text
from .processors.metrics import FontMetrics, ReportLabMetrics
from .processors.paragraph import RenderPlan, build_render_plan
from .variables import (
    CONST_ENGINE_PYMUPDF,
    CONST_ENGINE_RASTER,
    CONST_ENGINE_REPORTLAB,
    CONST_RASTER_SCALE,
    ERR_NOTHING_TO_RENDER,
    ERR_UNKNOWN_ENGINE,
    STYLE_FONT_NAME,
)


logger = get_logger(__name__)


class LettrineTextView:
    """首字下沉段落。

    用法示例：
        view = LettrineTextView(LettrineAttributes(lines_spanned=3))
        view.set_body_text("<l>O</l>nce upon a time...")
        view.render(Path("output/once.pdf"))
    """

    def __init__(
        self,
        attributes: Optional[LettrineAttributes] = None,
        metrics: Optional[FontMetrics] = None,
    ) -> None:
        attrs = attributes or LettrineAttributes()
        self.metrics = metrics or ReportLabMetrics()
        self.lines_spanned: int = attrs.lines_spanned
        self.body_text_size: int = attrs.text_size
        self.width: float = attrs.width
        self.body_text: str = attrs.text
        self.font_file: Optional[Path] = None
        self.font_name: str = STYLE_FONT_NAME
        self.lettrine_color, self.body_color = resolve_colors(
            attrs.text_color,
            body_text_color=attrs.body_text_color,
            lettrine_text_color=attrs.lettrine_text_color,
        )

        # 计算结果：每次属性变化后整体重算
        self.config: Optional[LayoutConfig] = None
        self.lettrine_font_size: Optional[float] = None
        self.layout: Optional[ComputedLayout] = None
        self.lettrine_text: str = ""
        self.styled_text: Optional[StyledText] = None
        self.lettrine_visible: bool = False
        self.body_visible: bool = False

        if attrs.font is not None:
            self._load_font(attrs.font)
        self._update()

    # -----------------------------
    # 属性设置
    # -----------------------------
    def set_body_text(self, new_body_text: Optional[str]) -> None:
        self.body_text = new_body_text or ""
        self._update()

    def set_text_color(self, new_text_color: str) -> None:
        """同时设置首字与正文颜色。"""
        rgb = parse_color(new_text_color)
        self.lettrine_color = rgb
        self.body_color = rgb

    def set_lettrine_text_color(self, new_text_color: str) -> None:
        self.lettrine_color = parse_color(new_text_color)

    def set_body_text_color(self, new_text_color: str) -> None:
        self.body_color = parse_color(new_text_color)

    def set_body_text_size(self, new_body_text_size: int) -> None:
        self.body_text_size = new_body_text_size
        self._update()

    def set_lines_spanned(self, lines_spanned: int) -> None:
        self.lines_spanned = lines_spanned
        self._update()

    def set_font(self, font_path: Optional[Path]) -> None:
        """切换字体文件；None 恢复内置字体。"""
        if font_path is None:
            self.font_file = None
            self.font_name = STYLE_FONT_NAME
        else:
            self._load_font(font_path)
        self._update()

    # -----------------------------
    # 计算
    # -----------------------------
    def _load_font(self, font_path: Path) -> None:
        register = getattr(self.metrics, "register_font", None)
        if register is None:
            raise RuntimeError("当前字体度量不支持注册字体文件")
        self.font_name = register(Path(font_path))
        self.font_file = Path(font_path)

    def _update(self) -> None:
        """按当前属性整体重算首字、布局、留白区域与可见性。"""
        body_line_height = self.metrics.line_height(self.font_name, self.body_text_size)
        self.config = LayoutConfig(
            lines_spanned=self.lines_spanned,
            body_font_size=self.body_text_size,
            body_line_height=body_line_height,
        )
        self.lettrine_font_size = propose_font_size(self.config)

        if not self.body_text:
            self.lettrine_text = ""
            self.layout = None
            self.styled_text = None
            self.lettrine_visible = False
            self.body_visible = False
            return

        info = extract(self.body_text)
        styled = to_styled_text(info.remaining_text)
        if info.lettrine_char is not None:
            self.layout = measure_layout(
                self.config,
                self.metrics,
                info.lettrine_char,
                self.font_name,
                padding_right=self.body_text_size,
            )
            styled.set_span(build_margin_region(self.layout, self.lines_spanned), 0, len(styled))
            self.lettrine_text = info.lettrine_char
            self.lettrine_visible = True
        else:
            self.layout = None
            self.lettrine_text = ""
            self.lettrine_visible = False

        self.styled_text = styled
        self.body_visible = True
        logger.debug(
            "布局已更新：lettrine=%r, config=%s, layout=%s",
            self.lettrine_text,
            self.config,
            self.layout,
        )

    @property
    def visibility(self) -> Tuple[bool, bool]:
        """(首字可见, 正文可见)。"""
        return self.lettrine_visible, self.body_visible

    # -----------------------------
    # 渲染
    # -----------------------------
    def build_plan(self) -> RenderPlan:
        if not self.body_visible or self.styled_text is None or self.config is None:
            raise RuntimeError(ErrorHandler.format_error(ERR_NOTHING_TO_RENDER, "正文为空，无可渲染内容"))
        return build_render_plan(
            self.styled_text,
            width=self.width,
            font_name=self.font_name,
            body_font_size=self.body_text_size,
            body_line_height=self.config.body_line_height,
            body_color=self.body_color,
            metrics=self.metrics,
            lettrine_char=self.lettrine_text if self.lettrine_visible else None,
            layout=self.layout,
            lettrine_color=self.lettrine_color,
            font_file=self.font_file,
        )

    def render(
        self,
        output_path: Optional[Path] = None,
        engine: str = CONST_ENGINE_REPORTLAB,
        raster_scale: Optional[float] = CONST_RASTER_SCALE,
    ) -> Path:
        """按引擎输出：reportlab/pymupdf → PDF，raster → PNG。

        返回：
            输出文件路径；未提供 output_path 时自动生成到 output 目录。
        """
        if engine not in (CONST_ENGINE_REPORTLAB, CONST_ENGINE_PYMUPDF, CONST_ENGINE_RASTER):
            raise ValueError(ErrorHandler.format_error(ERR_UNKNOWN_ENGINE, f"未知渲染引擎: {engine}"))
        plan = self.build_plan()
        suffix = ".png" if engine == CONST_ENGINE_RASTER else ".pdf"
        target = output_path or FileHandler.timestamped_output_path(suffix)

        if engine == CONST_ENGINE_RASTER:
            return render_raster(plan, target, scale=raster_scale)
        if engine == CONST_ENGINE_PYMUPDF:
            return render_pymupdf(plan, target)
        return render_reportlab(plan, target)


__all__ = ["LettrineTextView"]
