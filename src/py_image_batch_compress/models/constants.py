"""图像处理相关常量定义。

集中管理输出命名、PNG 压缩等级映射以及调用方选择器的别名表。
"""

from typing import Final


# 输出文件名后缀：<stem>_compressed.<ext>
OUTPUT_SUFFIX: Final[str] = "_compressed"

# 质量预设对应的数值
QUALITY_PERCENTAGES: Final[dict[str, int]] = {
    "high": 90,
    "medium": 75,
    "low": 60,
}

# PNG 压缩等级（zlib 0-9），质量越高越快
PNG_COMPRESS_LEVELS: Final[dict[int, int]] = {
    90: 1,  # 快速
    75: 6,  # 默认
}
PNG_BEST_COMPRESS_LEVEL: Final[int] = 9

# PNG 可以直接保存的色彩模式
PNG_MODES: Final[frozenset[str]] = frozenset(
    {"1", "L", "LA", "I", "I;16", "P", "RGB", "RGBA"}
)

# JPEG 合成透明通道时使用的背景色
JPEG_BACKGROUND: Final[tuple[int, int, int]] = (255, 255, 255)


class SelectorAliases:
    """调用方选择器字符串的别名表（小写）"""

    QUALITY: Final[dict[str, str]] = {
        "high": "high",
        "alta": "high",
        "medium": "medium",
        "media": "medium",
        "low": "low",
        "baja": "low",
    }

    FORMAT: Final[dict[str, str]] = {
        "jpeg": "jpeg",
        "jpg": "jpeg",
        "png": "png",
        "webp": "webp",
    }

    PRIVACY: Final[dict[str, str]] = {
        "keep_all": "keep_all",
        "todo": "keep_all",
        "remove_sensitive": "remove_sensitive",
        "sensible": "remove_sensitive",
        "remove_all": "remove_all",
        "nada": "remove_all",
    }


def get_png_compress_level(percentage: int) -> int:
    """根据质量百分比获取 PNG 压缩等级"""
    return PNG_COMPRESS_LEVELS.get(percentage, PNG_BEST_COMPRESS_LEVEL)
