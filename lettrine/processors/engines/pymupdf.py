"""
文件路径：lettrine/processors/engines/pymupdf.py

说明：PyMuPDF 直接绘制文本的实现；指定字体文件时内嵌该字体，否则使用内置 Helvetica。
"""

from __future__ import annotations

from pathlib import Path

import fitz  # PyMuPDF

from ...components import FileHandler, get_logger
from ...variables import ERR_RENDER_FAILED, STYLE_PYMUPDF_FONT_NAME
from ..paragraph import RenderPlan


logger = get_logger(__name__)

_EMBEDDED_FONT_NAME = "lettrine"


def render_pymupdf(plan: RenderPlan, output_pdf: Path) -> Path:
    """在新建 PDF 页面上绘制首字与正文。

    PyMuPDF 坐标系与绘制计划一致（左上原点），基线 y 可直接使用。
    """
    FileHandler.ensure_parent_writable(output_pdf)
    try:
        doc = fitz.open()
        page = doc.new_page(width=plan.width, height=plan.height)

        fontname = STYLE_PYMUPDF_FONT_NAME
        if plan.font_file is not None:
            page.insert_font(fontname=_EMBEDDED_FONT_NAME, fontfile=str(plan.font_file))
            fontname = _EMBEDDED_FONT_NAME
            logger.info("PyMuPDF 已内嵌字体：%s -> %s", fontname, plan.font_file)

        items = ([plan.lettrine] if plan.lettrine is not None else []) + list(plan.lines)
        for item in items:
            if not item.text:
                continue
            page.insert_text(
                (item.x, item.baseline),
                item.text,
                fontsize=item.font_size,
                fontname=fontname,
                color=tuple(v / 255.0 for v in item.color),
            )

        doc.save(str(output_pdf), deflate=True, garbage=4)
        doc.close()
    except Exception as exc:  # noqa: BLE001
        raise RuntimeError(f"[{ERR_RENDER_FAILED}] 使用 PyMuPDF 写入失败: {exc}") from exc

    size_kb = Path(output_pdf).stat().st_size / 1024.0
    logger.info("PyMuPDF 输出完成：%s (%.1f KB)", output_pdf, size_kb)
    return output_pdf


__all__ = ["render_pymupdf"]
