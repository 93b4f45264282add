"""批量图像压缩库。

基于 Pillow 的批量压缩流水线：EXIF 方向校正、等比缩小、JPEG/PNG 编码，
多线程并发处理并汇总成功与失败数量。
"""

__version__ = "0.1.0"
__author__ = "crper"
__description__ = "基于 Pillow 的批量图像压缩库"

# 核心功能导出
from .compressor import ImageBatchCompressor, process_images_command
from .core.exif_reader import query_orientation, read_orientation
from .core.transform_engine import process_single_image
from .engine.batch import BatchProcessor, process_images
from .exceptions import (
    ExifReadError,
    ImageError,
    InternalError,
    InvalidDimensionsError,
    InvalidFormatError,
    PathNotFoundError,
    SaveFailedError,
    ValidationError,
)
from .models import (
    Orientation,
    OutputFormat,
    PrivacyLevel,
    ProcessOptions,
    ProgressInfo,
    QualityPreset,
)


__all__ = [
    "BatchProcessor",
    "ExifReadError",
    "ImageBatchCompressor",
    "ImageError",
    "InternalError",
    "InvalidDimensionsError",
    "InvalidFormatError",
    "Orientation",
    "OutputFormat",
    "PathNotFoundError",
    "PrivacyLevel",
    "ProcessOptions",
    "ProgressInfo",
    "QualityPreset",
    "SaveFailedError",
    "ValidationError",
    "get_version",
    "process_images",
    "process_images_command",
    "process_single_image",
    "query_orientation",
    "read_orientation",
]


def get_version() -> str:
    """获取版本号。"""
    return __version__
