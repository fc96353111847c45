"""
文件路径：lettrine/__init__.py

说明：首字下沉（lettrine）段落排版。

- extractor：首字标记解析
- processors.layout：首字字号/偏移/缩进两阶段计算与留白区域
- view.LettrineTextView：属性绑定、可见性与渲染入口
"""

from .extractor import LettrineInfo, extract
from .processors.layout import (
    ComputedLayout,
    LayoutConfig,
    MarginExclusionRegion,
    compute_layout,
    finalize_layout,
    propose_font_size,
)
from .view import LettrineTextView

__all__ = [
    "LettrineInfo",
    "extract",
    "LayoutConfig",
    "ComputedLayout",
    "MarginExclusionRegion",
    "propose_font_size",
    "finalize_layout",
    "compute_layout",
    "LettrineTextView",
]
