"""
文件路径：lettrine/processors/engines/raster.py

说明：Pillow 渲染透明 PNG。
"""

from __future__ import annotations

import math
from pathlib import Path
from typing import Dict, Optional

from ...components import FileHandler, get_logger, pick_preferred_font
from ...variables import CONST_RASTER_SCALE, ERR_RENDER_FAILED, STYLE_BACKGROUND_RGBA
from ..paragraph import RenderPlan


logger = get_logger(__name__)


def render_raster(
    plan: RenderPlan,
    output_png: Path,
    scale: Optional[float] = CONST_RASTER_SCALE,
) -> Path:
    """按 scale 倍率渲染 PNG。

    字体优先使用计划中的字体文件，其次自动探测本机字体，最后回退 Pillow 内置字体。
    """
    # 延迟导入 Pillow
    try:
        from PIL import Image, ImageDraw, ImageFont  # type: ignore
    except ImportError as exc:
        raise RuntimeError(f"缺少 Pillow 依赖，请安装 pillow：{exc}") from exc

    FileHandler.ensure_parent_writable(output_png)
    factor = float(scale) if scale and scale > 0 else 1.0
    font_file = plan.font_file or pick_preferred_font()
    if font_file is None:
        logger.warning("未找到可用字体文件，光栅输出将使用 Pillow 内置字体")

    fonts: Dict[int, object] = {}

    def _font(size: float):
        px = max(1, int(round(size * factor)))
        if px not in fonts:
            if font_file is not None:
                fonts[px] = ImageFont.truetype(str(font_file), px)
            else:
                fonts[px] = ImageFont.load_default(size=px)
        return fonts[px]

    try:
        img = Image.new(
            "RGBA",
            (max(1, math.ceil(plan.width * factor)), max(1, math.ceil(plan.height * factor))),
            STYLE_BACKGROUND_RGBA,
        )
        draw = ImageDraw.Draw(img)
        items = ([plan.lettrine] if plan.lettrine is not None else []) + list(plan.lines)
        for item in items:
            if not item.text:
                continue
            # anchor="ls"：以左侧基线定位，与绘制计划的基线坐标一致
            draw.text(
                (item.x * factor, item.baseline * factor),
                item.text,
                font=_font(item.font_size),
                fill=(item.color[0], item.color[1], item.color[2], 255),
                anchor="ls",
            )
        img.save(str(output_png), format="PNG")
    except OSError as exc:
        raise RuntimeError(f"[{ERR_RENDER_FAILED}] 光栅输出失败: {exc}") from exc

    size_kb = Path(output_png).stat().st_size / 1024.0
    logger.info("Raster 输出完成：%s (%.1f KB)", output_png, size_kb)
    return output_png


__all__ = ["render_raster"]
