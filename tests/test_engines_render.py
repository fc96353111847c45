"""
文件路径：tests/test_engines_render.py

用例目的：使用真实 ReportLab 度量验证三种引擎均可输出文件：
- reportlab / pymupdf 输出的 PDF 可被 pdfplumber 读回正文；
- raster 输出 PNG 尺寸与绘制计划一致。
"""

from __future__ import annotations

import math
from pathlib import Path

import fitz  # PyMuPDF
import pdfplumber
import pytest

from lettrine.data_handler import LettrineAttributes
from lettrine.processors.layout import ComputedLayout
from lettrine.view import LettrineTextView


TEXT = "<l>L</l>orem ipsum dolor sit amet, consectetur adipiscing elit, sed do eiusmod tempor."


@pytest.fixture
def view() -> LettrineTextView:
    return LettrineTextView(LettrineAttributes(text=TEXT, width=240, lettrine_text_color="#8b0000"))


def test_helvetica_layout_values(view: LettrineTextView):
    # Helvetica 14px：行高 round(14*0.925)=13；字号 (26-14)*2=24
    # 首字行高 round(24*0.925)=22 -> 偏移 2；"L" 宽 0.556*24≈13 + 右内边距 14 = 27
    assert view.config.body_line_height == 13
    assert view.layout == ComputedLayout(lettrine_font_size=24, lettrine_top_offset=-(22 - 24), indent_width=27)


def test_leading_lines_indented(view: LettrineTextView):
    plan = view.build_plan()
    assert len(plan.lines) > 2
    assert [ln.x for ln in plan.lines[:2]] == [27, 27]
    assert all(ln.x == 0 for ln in plan.lines[2:])


def test_render_reportlab(view: LettrineTextView, tmp_path: Path):
    out = view.render(tmp_path / "lettrine_rl.pdf", engine="reportlab")
    assert out.exists()
    with pdfplumber.open(str(out)) as pdf:
        assert len(pdf.pages) == 1
        text = pdf.pages[0].extract_text() or ""
    assert "ipsum" in text


def test_render_pymupdf(view: LettrineTextView, tmp_path: Path):
    out = view.render(tmp_path / "lettrine_mu.pdf", engine="pymupdf")
    assert out.exists()
    with fitz.open(str(out)) as doc:
        assert doc.page_count == 1
        assert "ipsum" in doc[0].get_text()


def test_render_raster(view: LettrineTextView, tmp_path: Path):
    from PIL import Image

    plan = view.build_plan()
    out = view.render(tmp_path / "lettrine.png", engine="raster", raster_scale=2.0)
    with Image.open(out) as img:
        assert img.size == (math.ceil(plan.width * 2), math.ceil(plan.height * 2))
        assert img.mode == "RGBA"


def test_unknown_engine(view: LettrineTextView, tmp_path: Path):
    with pytest.raises(ValueError, match="2004"):
        view.render(tmp_path / "x.pdf", engine="svg")
