"""
文件路径：lettrine/variables.py

模块职责：
- 统一管理全局跨模块变量，确保模块化、无冲突、可追溯，可复用。
- 变量命名规范：{分类前缀}_{描述性名称}（全大写+下划线）。
  - PATH_：路径相关
  - STYLE_：样式相关
  - CONST_：通用常量
  - ERR_：错误码

使用说明：
- 业务模块严禁定义新的全局变量，必须从本模块导入所需常量。
- 目录路径均使用 pathlib.Path 对象表示，使用时如需字符串请显式 str() 转换。
"""

from pathlib import Path
from typing import Tuple


# =============================
# 路径（PATH_）
# =============================
# 项目根目录：定位到当前文件（variables.py）的上两级目录
PATH_ROOT: Path = Path(__file__).resolve().parents[1]

# 各功能目录
PATH_CONFIG_DIR: Path = PATH_ROOT / "config"
PATH_OUTPUT_DIR: Path = PATH_ROOT / "output"
PATH_LOGS_DIR: Path = PATH_ROOT / "logs"

# 关键文件路径
PATH_STYLE_JSON: Path = PATH_CONFIG_DIR / "style.json"  # 样式属性配置（可选）
PATH_LOG_FILE: Path = PATH_LOGS_DIR / "app.log"  # 应用运行日志


# =============================
# 样式（STYLE_）
# =============================
STYLE_FONT_NAME: str = "Helvetica"  # 未指定字体文件时使用的 ReportLab 内置字体
STYLE_PYMUPDF_FONT_NAME: str = "helv"  # PyMuPDF 内置 Helvetica 的简称
STYLE_LINES_SPANNED_DEFAULT: int = 2  # 首字下沉默认跨越的正文行数
STYLE_BODY_FONT_SIZE_DEFAULT: int = 14  # 正文默认字号（px）
STYLE_TEXT_COLOR_HEX: str = "#000000"  # 默认文字颜色
STYLE_PARAGRAPH_WIDTH_DEFAULT: float = 400.0  # 段落默认宽度（px）
STYLE_PAGE_PADDING: float = 0.0  # 输出页面四周留白（px）
STYLE_BACKGROUND_RGBA: Tuple[int, int, int, int] = (255, 255, 255, 0)  # 光栅背景，透明


# =============================
# 常量（CONST_）
# =============================
CONST_ENCODING: str = "utf-8"  # 文件读写默认编码
CONST_LETTRINE_TAG: str = "l"  # 首字标记标签名，如 <l>A</l>
CONST_CHAR_WIDTH_RATIO: float = 0.6  # 字体度量失败时 ASCII 字符宽度估算系数
CONST_ASCENT_RATIO: float = 0.8  # 字体度量失败时的上升线估算系数
CONST_DESCENT_RATIO: float = 0.2  # 字体度量失败时的下降线估算系数
CONST_RASTER_SCALE: float = 2.0  # 光栅渲染比例，2.0 提升清晰度（2x）
CONST_ENGINE_REPORTLAB: str = "reportlab"
CONST_ENGINE_PYMUPDF: str = "pymupdf"
CONST_ENGINE_RASTER: str = "raster"
CONST_ENGINES: Tuple[str, ...] = (CONST_ENGINE_REPORTLAB, CONST_ENGINE_PYMUPDF, CONST_ENGINE_RASTER)
CONST_FONT_SUFFIXES: Tuple[str, ...] = (".ttf", ".otf")

# 常见字体候选路径（光栅引擎未指定字体时自动探测，按顺序优先）
CONST_CANDIDATE_FONT_PATHS: Tuple[str, ...] = (
    # Linux 常见字体
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf",
    # macOS 常见字体
    "/Library/Fonts/Arial.ttf",
    "/System/Library/Fonts/Supplemental/Arial.ttf",
    # Windows 常见字体
    "C:/Windows/Fonts/arial.ttf",
)

# 日志格式（供 logging.basicConfig 使用）
CONST_LOG_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
CONST_LOG_DATEFMT: str = "%Y-%m-%d %H:%M:%S"


# =============================
# 错误码（ERR_）
# =============================
# 1xxx：文件/路径相关
ERR_FILE_NOT_FOUND: int = 1001  # 输入文件不存在
ERR_PATH_NOT_WRITABLE: int = 1003  # 目标路径不可写

# 2xxx：排版/渲染相关
ERR_FONT_REGISTER_FAILED: int = 2001  # 字体注册失败
ERR_RENDER_FAILED: int = 2002  # 渲染输出失败
ERR_NOTHING_TO_RENDER: int = 2003  # 正文为空，无可渲染内容
ERR_UNKNOWN_ENGINE: int = 2004  # 未知渲染引擎

# 4xxx：配置/数据相关
ERR_CONFIG_LOAD_FAILED: int = 4001  # 配置加载失败
ERR_DATA_INVALID: int = 4002  # 输入数据非法


# =============================
# 导出声明
# =============================
__all__ = [
    # PATH_
    "PATH_ROOT",
    "PATH_CONFIG_DIR",
    "PATH_OUTPUT_DIR",
    "PATH_LOGS_DIR",
    "PATH_STYLE_JSON",
    "PATH_LOG_FILE",
    # STYLE_
    "STYLE_FONT_NAME",
    "STYLE_PYMUPDF_FONT_NAME",
    "STYLE_LINES_SPANNED_DEFAULT",
    "STYLE_BODY_FONT_SIZE_DEFAULT",
    "STYLE_TEXT_COLOR_HEX",
    "STYLE_PARAGRAPH_WIDTH_DEFAULT",
    "STYLE_PAGE_PADDING",
    "STYLE_BACKGROUND_RGBA",
    # CONST_
    "CONST_ENCODING",
    "CONST_LETTRINE_TAG",
    "CONST_CHAR_WIDTH_RATIO",
    "CONST_ASCENT_RATIO",
    "CONST_DESCENT_RATIO",
    "CONST_RASTER_SCALE",
    "CONST_ENGINE_REPORTLAB",
    "CONST_ENGINE_PYMUPDF",
    "CONST_ENGINE_RASTER",
    "CONST_ENGINES",
    "CONST_FONT_SUFFIXES",
    "CONST_CANDIDATE_FONT_PATHS",
    "CONST_LOG_FORMAT",
    "CONST_LOG_DATEFMT",
    # ERR_
    "ERR_FILE_NOT_FOUND",
    "ERR_PATH_NOT_WRITABLE",
    "ERR_FONT_REGISTER_FAILED",
    "ERR_RENDER_FAILED",
    "ERR_NOTHING_TO_RENDER",
    "ERR_UNKNOWN_ENGINE",
    "ERR_CONFIG_LOAD_FAILED",
    "ERR_DATA_INVALID",
]
