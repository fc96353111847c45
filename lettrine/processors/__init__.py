"""
文件路径：lettrine/processors/__init__.py

说明：
- layout.py：首字字号/偏移/缩进计算与留白区域
- metrics.py：字体度量
- markup.py：正文标记转换
- paragraph.py：断行与绘制计划
- engines/{reportlab.py, pymupdf.py, raster.py}：三引擎绘制
"""

from typing import List

__all__: List[str] = []
