"""
文件路径：lettrine/processors/engines/__init__.py

说明：三种绘制引擎：`reportlab.py`（PDF）、`pymupdf.py`（PDF）、`raster.py`（PNG）。
"""

from .pymupdf import render_pymupdf
from .raster import render_raster
from .reportlab import render_reportlab

__all__ = ["render_reportlab", "render_pymupdf", "render_raster"]
