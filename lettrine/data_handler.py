"""
文件路径：lettrine/data_handler.py

模块职责：
- 加载样式属性配置（JSON），解析为 LettrineAttributes，并应用默认值与颜色回退链。
- 读取正文文本文件。

配置示例（config/style.json）：
    {
        "lines_spanned": 3,
        "text_size": 16,
        "font": "config/fonts/Lora-Regular.ttf",
        "text_color": "#333333",
        "lettrine_text_color": "#8B0000",
        "text": "<l>O</l>nce upon a time...",
        "width": 420
    }

变量引用说明（来自 lettrine/variables.py）：
- PATH_STYLE_JSON, CONST_ENCODING, ERR_CONFIG_LOAD_FAILED, ERR_DATA_INVALID
- STYLE_LINES_SPANNED_DEFAULT, STYLE_BODY_FONT_SIZE_DEFAULT, STYLE_TEXT_COLOR_HEX,
  STYLE_PARAGRAPH_WIDTH_DEFAULT
"""

from __future__ import annotations

import json
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .components import FileHandler, get_logger, parse_color
from .variables import (
    PATH_ROOT,
    PATH_STYLE_JSON,
    CONST_ENCODING,
    ERR_CONFIG_LOAD_FAILED,
    ERR_DATA_INVALID,
    STYLE_LINES_SPANNED_DEFAULT,
    STYLE_BODY_FONT_SIZE_DEFAULT,
    STYLE_TEXT_COLOR_HEX,
    STYLE_PARAGRAPH_WIDTH_DEFAULT,
)


logger = get_logger(__name__)


@dataclass(frozen=True)
class LettrineAttributes:
    """样式属性。

    body_text_color / lettrine_text_color 为 None 时回退到 text_color。
    """

    lines_spanned: int = STYLE_LINES_SPANNED_DEFAULT
    text_size: int = STYLE_BODY_FONT_SIZE_DEFAULT
    font: Optional[Path] = None
    text_color: str = STYLE_TEXT_COLOR_HEX
    body_text_color: Optional[str] = None
    lettrine_text_color: Optional[str] = None
    text: str = ""
    width: float = STYLE_PARAGRAPH_WIDTH_DEFAULT


def _json_loads_strip_bom(content: str):
    """解析 JSON 字符串，自动去除 UTF-8 BOM。"""
    if content.startswith("\ufeff"):
        content = content.lstrip("\ufeff")
    return json.loads(content)


def _positive_int(raw: Any, key: str, minimum: int) -> int:
    try:
        value = int(raw)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"[{ERR_DATA_INVALID}] {key} 需为整数: {raw!r}") from exc
    if value < minimum:
        raise ValueError(f"[{ERR_DATA_INVALID}] {key} 需 >= {minimum}: {value}")
    return value


def parse_attributes(raw: Mapping[str, Any], base: Optional[LettrineAttributes] = None) -> LettrineAttributes:
    """将属性映射解析为 LettrineAttributes；未出现或为 None 的键沿用 base。

    数值在此处校验（lines_spanned >= 1，text_size >= 1，width > 0），
    布局引擎不再做防御性校验。

    异常：
        ValueError: 数值或颜色非法。
    """
    attrs = base or LettrineAttributes()
    changes: Dict[str, Any] = {}
    present = {k: v for k, v in raw.items() if v is not None}

    if "lines_spanned" in present:
        changes["lines_spanned"] = _positive_int(present["lines_spanned"], "lines_spanned", 1)
    if "text_size" in present:
        changes["text_size"] = _positive_int(present["text_size"], "text_size", 1)
    if "width" in present:
        try:
            width = float(present["width"])
        except (TypeError, ValueError) as exc:
            raise ValueError(f"[{ERR_DATA_INVALID}] width 需为数值: {present['width']!r}") from exc
        if width <= 0:
            raise ValueError(f"[{ERR_DATA_INVALID}] width 需 > 0: {width}")
        changes["width"] = width
    if "font" in present and str(present["font"]).strip():
        font = Path(str(present["font"]))
        # 相对路径按项目根目录解析
        changes["font"] = font if font.is_absolute() else PATH_ROOT / font
    for key in ("text_color", "body_text_color", "lettrine_text_color"):
        if key in present:
            parse_color(str(present[key]))  # 提前校验
            changes[key] = str(present[key])
    if "text" in present:
        changes["text"] = str(present["text"])

    return replace(attrs, **changes)


def load_style_config(config_path: Optional[Path] = None) -> LettrineAttributes:
    """加载样式配置 JSON。

    参数：
        config_path: 配置路径；默认读取 `config/style.json`，不存在时使用默认属性。

    返回：
        LettrineAttributes。
    """
    path = config_path or PATH_STYLE_JSON
    if not path.exists():
        logger.warning("找不到样式配置文件，将使用默认属性：%s", path)
        return LettrineAttributes()
    try:
        data = _json_loads_strip_bom(path.read_text(encoding=CONST_ENCODING))
        if not isinstance(data, dict):
            raise ValueError("样式配置需为 JSON 对象")
        return parse_attributes(data)
    except Exception as exc:  # noqa: BLE001
        raise RuntimeError(f"[{ERR_CONFIG_LOAD_FAILED}] 配置加载失败: {exc}") from exc


def load_body_text(path: Path) -> str:
    """读取正文标记文本文件（去除 BOM 与末尾换行）。"""
    FileHandler.validate_readable_file(path)
    content = path.read_text(encoding=CONST_ENCODING)
    return content.lstrip("\ufeff").rstrip("\r\n")


__all__ = [
    "LettrineAttributes",
    "parse_attributes",
    "load_style_config",
    "load_body_text",
]
