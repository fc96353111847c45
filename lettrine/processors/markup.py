"""
文件路径：lettrine/processors/markup.py

说明：将剩余正文标记转换为纯文本 + 区间标注（StyledText）。

仅处理段落排版所需的最小子集：
- `<br>`、`</p>` 转为换行，其余标签直接去除；
- HTML 实体解码；
- 源文本中的换行视同空格，连续空白折叠为单个空格。
不是通用 HTML 渲染器。
"""

from __future__ import annotations

import html
import re
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple, Type, TypeVar


T = TypeVar("T")

_BREAK_RE = re.compile(r"<\s*br\s*/?\s*>|<\s*/\s*p\s*>", re.IGNORECASE)
_TAG_RE = re.compile(r"<[^<>]*>")
_SPACES_RE = re.compile(r"\s+")


@dataclass
class StyledText:
    """纯文本及附加在其区间上的标注，如 MarginExclusionRegion。"""

    text: str
    spans: List[Tuple[Any, int, int]] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.text)

    def set_span(self, annotation: Any, start: int, end: int) -> None:
        """在 [start, end) 上附加标注。"""
        if start < 0 or end > len(self.text) or start > end:
            raise ValueError(f"标注区间越界：[{start}, {end}) / len={len(self.text)}")
        self.spans.append((annotation, start, end))

    def get_span(self, kind: Type[T]) -> Optional[T]:
        """返回第一个指定类型的标注。"""
        for annotation, _, _ in self.spans:
            if isinstance(annotation, kind):
                return annotation
        return None


def to_styled_text(markup: Optional[str]) -> StyledText:
    if not markup:
        return StyledText(text="")
    # 源文本中的换行与其他空白等价，只有 <br> 与 </p> 产生断行
    text = _SPACES_RE.sub(" ", markup)
    text = _BREAK_RE.sub("\n", text)
    text = _TAG_RE.sub("", text)
    text = html.unescape(text)
    lines = [_SPACES_RE.sub(" ", ln).strip() for ln in text.split("\n")]
    # 去掉首尾空行，保留段内换行
    while lines and not lines[0]:
        lines.pop(0)
    while lines and not lines[-1]:
        lines.pop()
    return StyledText(text="\n".join(lines))


__all__ = ["StyledText", "to_styled_text"]
