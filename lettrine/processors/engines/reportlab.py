"""
文件路径：lettrine/processors/engines/reportlab.py

说明：ReportLab 路径，直接在画布上绘制首字与正文并输出 PDF。
"""

from __future__ import annotations

from pathlib import Path

from reportlab.pdfgen import canvas

from ...components import FileHandler, get_logger
from ...variables import ERR_RENDER_FAILED
from ..paragraph import PlacedText, RenderPlan


logger = get_logger(__name__)


def _draw(c: canvas.Canvas, item: PlacedText, font_name: str, page_height: float) -> None:
    if not item.text:
        return
    c.setFillColorRGB(*(v / 255.0 for v in item.color))
    c.setFont(font_name, item.font_size)
    # ReportLab 原点在左下，需做 Y 轴翻转
    c.drawString(item.x, page_height - item.baseline, item.text)


def render_reportlab(plan: RenderPlan, output_pdf: Path) -> Path:
    """使用 ReportLab 生成单页 PDF，页面尺寸等于段落尺寸。

    字体需已通过 ReportLabMetrics.register_font 注册（内置字体无需注册）。
    """
    FileHandler.ensure_parent_writable(output_pdf)
    try:
        c = canvas.Canvas(str(output_pdf), pagesize=(plan.width, plan.height))
        if plan.lettrine is not None:
            _draw(c, plan.lettrine, plan.font_name, plan.height)
        for line in plan.lines:
            _draw(c, line, plan.font_name, plan.height)
        c.showPage()
        c.save()
    except Exception as exc:  # noqa: BLE001
        raise RuntimeError(f"[{ERR_RENDER_FAILED}] 使用 ReportLab 写入失败: {exc}") from exc

    size_kb = Path(output_pdf).stat().st_size / 1024.0
    logger.info("ReportLab 输出完成：%s (%.1f KB)", output_pdf, size_kb)
    return output_pdf


__all__ = ["render_reportlab"]
