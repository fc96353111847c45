"""
文件路径：lettrine/components/__init__.py

说明：
- 通用组件包入口：日志、文件路径处理、错误信息格式化与字体探测；
- 文本宽度估算与颜色解析已按职责拆分至 `components/{text.py, colors.py}`；
- 业务模块与测试统一使用 `from lettrine.components import ...` 导入。
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import List, Optional

from ..variables import (
    PATH_LOGS_DIR,
    PATH_OUTPUT_DIR,
    PATH_CONFIG_DIR,
    PATH_LOG_FILE,
    CONST_LOG_FORMAT,
    CONST_LOG_DATEFMT,
    CONST_CANDIDATE_FONT_PATHS,
    CONST_FONT_SUFFIXES,
    ERR_PATH_NOT_WRITABLE,
    ERR_FILE_NOT_FOUND,
)

# 聚合导出：拆分后的子模块
from .colors import parse_color, resolve_colors
from .text import estimate_text_width


# =============================
# 日志工具
# =============================
_LOGGER_CONFIGURED: bool = False


def get_logger(name: str) -> logging.Logger:
    """获取 logger，首次调用时配置文件与控制台双输出。

    参数：
        name: 日志记录器名称（一般使用 __name__）。

    返回：
        logging.Logger 对象。
    """
    global _LOGGER_CONFIGURED
    if not _LOGGER_CONFIGURED:
        # 确保日志目录存在
        PATH_LOGS_DIR.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(PATH_LOG_FILE, encoding="utf-8")
        console_handler = logging.StreamHandler()
        logging.basicConfig(
            level=logging.INFO,
            format=CONST_LOG_FORMAT,
            datefmt=CONST_LOG_DATEFMT,
            handlers=[file_handler, console_handler],
        )
        _LOGGER_CONFIGURED = True
    return logging.getLogger(name)


# =============================
# 文件操作
# =============================
class FileHandler:
    """文件与路径相关的通用处理器。"""

    @staticmethod
    def validate_readable_file(path: Path) -> None:
        """校验文件可读。

        参数：
            path: 文件路径。
        异常：
            FileNotFoundError: 文件不存在或不可读。
        """
        if not path.exists() or not path.is_file():
            raise FileNotFoundError(f"[{ERR_FILE_NOT_FOUND}] 文件不存在或不可读: {path}")

    @staticmethod
    def ensure_parent_writable(target: Path) -> None:
        """确保目标文件的父目录可写，不存在则创建。

        参数：
            target: 目标文件路径。
        异常：
            PermissionError: 目录不可写。
        """
        parent = target.parent
        parent.mkdir(parents=True, exist_ok=True)
        # Windows 上 os.access 可能不可靠，尝试创建临时文件验证
        probe = parent / f".__writable_probe_{int(time.time()*1000)}"
        try:
            with open(probe, "w", encoding="utf-8") as f:  # noqa: P103
                f.write("probe")
        except OSError as exc:
            raise PermissionError(f"[{ERR_PATH_NOT_WRITABLE}] 目录不可写: {parent}") from exc
        else:
            probe.unlink(missing_ok=True)

    @staticmethod
    def timestamped_output_path(suffix: str, stem: str = "lettrine") -> Path:
        """生成带时间戳的输出路径，位于 output 目录。

        参数：
            suffix: 输出文件扩展名（含点），如 ".pdf" / ".png"。
            stem: 文件名前缀。

        返回：
            输出路径，例如 output/lettrine_20240101_120000.pdf
        """
        PATH_OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
        ts = time.strftime("%Y%m%d_%H%M%S")
        return PATH_OUTPUT_DIR / f"{stem.strip() or 'lettrine'}_{ts}{suffix}"


class ErrorHandler:
    """错误处理相关工具。"""

    @staticmethod
    def format_error(err_code: int, message: str) -> str:
        """生成统一错误信息字符串。"""
        return f"[{err_code}] {message}"


# =============================
# 字体探测（光栅引擎未指定字体文件时使用）
# =============================
def probe_available_fonts(preferred: Optional[Path] = None) -> List[Path]:
    """探测可用的字体文件（TTF/OTF），按优先级返回去重列表。

    优先级：
    1) 显式指定的 `preferred`（若是 .ttf/.otf 且存在）
    2) `config/fonts/` 目录下的 .ttf/.otf 文件（按文件名排序）
    3) `CONST_CANDIDATE_FONT_PATHS` 列表中存在的文件
    """
    seen: set[str] = set()
    results: List[Path] = []

    def _add(p: Path) -> None:
        if not p.exists() or p.suffix.lower() not in CONST_FONT_SUFFIXES:
            return
        key = str(p.resolve())
        if key not in seen:
            seen.add(key)
            results.append(p)

    # 1) 显式指定
    if preferred:
        _add(Path(preferred))

    # 2) config/fonts 目录
    fonts_dir = PATH_CONFIG_DIR / "fonts"
    if fonts_dir.exists():
        for p in sorted(list(fonts_dir.glob("*.ttf")) + list(fonts_dir.glob("*.otf"))):
            _add(p)

    # 3) 预置候选
    for s in CONST_CANDIDATE_FONT_PATHS:
        _add(Path(s))

    return results


def pick_preferred_font(preferred: Optional[Path] = None) -> Optional[Path]:
    """选择首个可用的字体文件，若无可用则返回 None。"""
    fonts = probe_available_fonts(preferred)
    return fonts[0] if fonts else None


# =============================
# 导出声明
# =============================
__all__ = [
    # 日志工具
    "get_logger",
    # 文件操作
    "FileHandler",
    # 错误处理
    "ErrorHandler",
    # 颜色解析
    "parse_color",
    "resolve_colors",
    # 文本宽度估算
    "estimate_text_width",
    # 字体探测
    "probe_available_fonts",
    "pick_preferred_font",
]
