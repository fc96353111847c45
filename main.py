"""
文件路径：main.py

命令行入口：
- 功能：读取正文标记文本（可含首字标记 <l>X</l>），按样式属性排版并输出 PDF 或 PNG。
- 依赖：`lettrine/view.py`、`lettrine/data_handler.py`、`lettrine/components`、`lettrine/variables.py`。

快速使用示例：
    # 1) 直接传入正文
    python main.py --text "<l>L</l>orem ipsum dolor sit amet, consectetur adipiscing elit."

    # 2) 使用样式配置 + 正文文件，首字跨 3 行，输出 PNG
    python main.py --style-json config/style.json --text-file examples/story.txt --lines 3 --engine raster

    # 3) 指定字体与颜色
    python main.py --text "<l>O</l>nce upon a time" --font config/fonts/Lora.ttf --lettrine-color "#8B0000"

运行说明：
- 命令行参数覆盖样式配置中的同名属性；未提供的属性使用默认值（跨 2 行、字号 14、黑色）。
- 颜色回退链：--body-color / --lettrine-color 覆盖 --text-color。

变量引用说明（来自 lettrine/variables.py）：
- CONST_ENGINES, CONST_ENGINE_REPORTLAB, CONST_RASTER_SCALE

组件调用说明：
- get_logger
- load_style_config, parse_attributes, load_body_text
- LettrineTextView.render
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Dict

from lettrine.components import get_logger
from lettrine.data_handler import load_body_text, load_style_config, parse_attributes
from lettrine.variables import CONST_ENGINES, CONST_ENGINE_REPORTLAB, CONST_RASTER_SCALE
from lettrine.view import LettrineTextView


logger = get_logger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="首字下沉段落排版工具（首字解析 + 两阶段布局 + PDF/PNG 输出）")
    parser.add_argument("--text", type=str, default=None, help="正文标记文本，可以 <l>X</l> 开头指定首字")
    parser.add_argument("--text-file", dest="text_file", type=Path, default=None, help="正文标记文本文件（UTF-8）")
    parser.add_argument("--style-json", dest="style_json", type=Path, default=None, help="样式配置 JSON（默认 config/style.json）")
    parser.add_argument("--lines", dest="lines_spanned", type=int, default=None, help="首字跨越的正文行数")
    parser.add_argument("--text-size", dest="text_size", type=int, default=None, help="正文字号（px）")
    parser.add_argument("--font", type=Path, default=None, help="字体文件（TTF/OTF）")
    parser.add_argument("--text-color", dest="text_color", type=str, default=None, help="共享文字颜色，如 #333333")
    parser.add_argument("--body-color", dest="body_text_color", type=str, default=None, help="正文颜色（覆盖 --text-color）")
    parser.add_argument("--lettrine-color", dest="lettrine_text_color", type=str, default=None, help="首字颜色（覆盖 --text-color）")
    parser.add_argument("--width", type=float, default=None, help="段落宽度（px）")
    parser.add_argument("--engine", type=str, choices=list(CONST_ENGINES), default=CONST_ENGINE_REPORTLAB, help="渲染引擎：reportlab/pymupdf/raster")
    parser.add_argument("--scale", type=float, default=CONST_RASTER_SCALE, help="光栅渲染比例（仅 raster 引擎）")
    parser.add_argument("--output", type=Path, default=None, help="输出路径（可省略，自动生成到 output/）")
    return parser.parse_args(argv)


def build_overrides_from_args(args: argparse.Namespace) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {
        "lines_spanned": args.lines_spanned,
        "text_size": args.text_size,
        # 命令行中的相对字体路径按当前工作目录解析
        "font": str(args.font.resolve()) if args.font else None,
        "text_color": args.text_color,
        "body_text_color": args.body_text_color,
        "lettrine_text_color": args.lettrine_text_color,
        "width": args.width,
    }
    if args.text_file is not None:
        overrides["text"] = load_body_text(args.text_file)
    if args.text is not None:
        overrides["text"] = args.text
    return overrides


def main(argv=None) -> None:
    args = parse_args(argv)
    try:
        attrs = parse_attributes(build_overrides_from_args(args), base=load_style_config(args.style_json))
        view = LettrineTextView(attrs)
    except (ValueError, FileNotFoundError, RuntimeError) as exc:
        raise SystemExit(str(exc)) from exc

    lettrine_visible, body_visible = view.visibility
    if not body_visible:
        raise SystemExit("正文为空：请通过 --text / --text-file 或样式配置中的 text 提供正文")
    if not lettrine_visible:
        logger.info("正文未以首字标记开头，将按普通段落输出")

    try:
        out = view.render(args.output, engine=args.engine, raster_scale=args.scale)
    except RuntimeError as exc:
        raise SystemExit(str(exc)) from exc
    print(f"排版完成，保存至：{out}")


if __name__ == "__main__":
    main()
