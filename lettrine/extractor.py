"""
文件路径：lettrine/extractor.py

模块职责：
- 从原始标记文本中识别并剥离首字标记（如 `<l>A</l>其余正文`），
  返回首字字符与剩余标记文本；其余标记保持原样，交由富文本转换处理。

约定：
- 标记必须位于文本最开头（严格前缀），且只包裹一个可见字符（空白字符不计）；
  HTML 实体先解码再计数，因此 `<l>&amp;</l>` 识别为 "&"。
- 包裹 0 个或多个字符、未闭合、或不在开头的标记一律视为"无首字"，
  文本原样返回，不做截断。
"""

from __future__ import annotations

import html
import re
from dataclasses import dataclass
from typing import Optional

from .components import get_logger
from .variables import CONST_LETTRINE_TAG


logger = get_logger(__name__)


_MARKER_RE = re.compile(
    r"^<{tag}>(?P<inner>.*?)</{tag}>".format(tag=re.escape(CONST_LETTRINE_TAG)),
    re.DOTALL,
)


@dataclass(frozen=True)
class LettrineInfo:
    """首字解析结果。

    属性：
        lettrine_char: 首字字符；未识别到标记时为 None。
        remaining_text: 去掉首字标记后的标记文本。
    """

    lettrine_char: Optional[str]
    remaining_text: str


def extract(markup: Optional[str]) -> LettrineInfo:
    """解析首字标记，纯函数、无副作用。"""
    text = markup or ""
    match = _MARKER_RE.match(text)
    if match is None:
        return LettrineInfo(lettrine_char=None, remaining_text=text)

    inner = html.unescape(match.group("inner"))
    if len(inner) != 1 or not inner.strip():
        logger.warning("首字标记需恰好包裹一个可见字符，已忽略：%r", match.group(0))
        return LettrineInfo(lettrine_char=None, remaining_text=text)

    return LettrineInfo(lettrine_char=inner, remaining_text=text[match.end():])


# 与组件命名保持一致的别名
parse_lettrine_information = extract


__all__ = ["LettrineInfo", "extract", "parse_lettrine_information"]
