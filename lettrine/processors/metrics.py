"""
文件路径：lettrine/processors/metrics.py

说明：字体度量提供者。

- 使用 ReportLab 字体度量（pdfmetrics.getAscentDescent / stringWidth）；
  即使在 PyMuPDF / Raster 路径中也沿用该度量以保持一致性。
- 字体未注册或度量失败时，回退到按字符类别的宽度估算。
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Protocol, Tuple

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

from ..components import estimate_text_width, get_logger
from ..variables import (
    CONST_ASCENT_RATIO,
    CONST_DESCENT_RATIO,
    CONST_FONT_SUFFIXES,
    ERR_FONT_REGISTER_FAILED,
    STYLE_FONT_NAME,
)


logger = get_logger(__name__)


class FontMetrics(Protocol):
    """布局所需的字体度量接口（只读，可重复查询）。"""

    def line_height(self, font_name: str, font_size: float) -> int: ...

    def ascent(self, font_name: str, font_size: float) -> float: ...

    def glyph_width(self, text: str, font_name: str, font_size: float) -> float: ...


class ReportLabMetrics:
    """基于 ReportLab 的字体度量。

    用法示例：
        metrics = ReportLabMetrics()
        face = metrics.register_font(Path("config/fonts/Lora.ttf"))
        metrics.line_height(face, 14)
    """

    def __init__(self) -> None:
        # 字体文件 -> 已注册字体名
        self._registered: Dict[str, str] = {}

    def register_font(self, font_path: Optional[Path]) -> str:
        """注册 TTF/OTF 字体并返回字体名；未提供时返回内置字体名。

        异常：
            RuntimeError: 字体文件不存在、类型不支持或注册失败。
        """
        if font_path is None:
            return STYLE_FONT_NAME
        p = Path(font_path)
        key = str(p.resolve())
        if key in self._registered:
            return self._registered[key]
        if not p.exists() or p.suffix.lower() not in CONST_FONT_SUFFIXES:
            raise RuntimeError(f"[{ERR_FONT_REGISTER_FAILED}] 字体文件不存在或不是 TTF/OTF: {p}")
        face_name = p.stem
        try:
            pdfmetrics.registerFont(TTFont(face_name, str(p)))
        except Exception as exc:  # noqa: BLE001
            raise RuntimeError(f"[{ERR_FONT_REGISTER_FAILED}] 注册字体失败: {p}，原因：{exc}") from exc
        self._registered[key] = face_name
        logger.info("已注册字体：%s -> %s", face_name, p)
        return face_name

    def _ascent_descent(self, font_name: str, font_size: float) -> Tuple[float, float]:
        try:
            ascent, descent = pdfmetrics.getAscentDescent(font_name, font_size)
        except Exception:
            # 度量失败时回退：按字号比例估算
            ascent, descent = float(font_size) * CONST_ASCENT_RATIO, -float(font_size) * CONST_DESCENT_RATIO
        return float(ascent), float(descent)

    def line_height(self, font_name: str, font_size: float) -> int:
        """行高（px，取整），即上升线与下降线之间的距离。

        不含行间距（line gap）：内置 Type1 字体的行高小于字号，
        如 Helvetica 14px 行高为 13px，正文行间无额外留白。
        """
        ascent, descent = self._ascent_descent(font_name, font_size)
        return int(round(ascent - descent))

    def ascent(self, font_name: str, font_size: float) -> float:
        return self._ascent_descent(font_name, font_size)[0]

    def glyph_width(self, text: str, font_name: str, font_size: float) -> float:
        """文本前进宽度（px）。"""
        try:
            return float(pdfmetrics.stringWidth(text, font_name, font_size))
        except Exception:
            return estimate_text_width(text, font_size)


__all__ = ["FontMetrics", "ReportLabMetrics"]
