"""数据模型包。

定义批量压缩相关的配置、方向和进度数据结构。
"""

from .constants import (
    OUTPUT_SUFFIX,
    PNG_COMPRESS_LEVELS,
    SelectorAliases,
    get_png_compress_level,
)
from .orientation import Orientation
from .process_options import (
    OutputFormat,
    PrivacyLevel,
    ProcessOptions,
    QualityPreset,
)
from .progress import ProgressInfo, ProgressInfoResponse


__all__ = [
    "OUTPUT_SUFFIX",
    "PNG_COMPRESS_LEVELS",
    "Orientation",
    "OutputFormat",
    "PrivacyLevel",
    "ProcessOptions",
    "ProgressInfo",
    "ProgressInfoResponse",
    "QualityPreset",
    "SelectorAliases",
    "get_png_compress_level",
]
