"""核心模块包。

单张图片的方向读取、格式编码与变换流水线。
"""

from .exif_reader import query_orientation, read_orientation
from .formats import FormatProcessor
from .transform_engine import (
    apply_orientation,
    load_image,
    process_single_image,
    resize_if_needed,
    save_image,
)


__all__ = [
    "FormatProcessor",
    "apply_orientation",
    "load_image",
    "process_single_image",
    "query_orientation",
    "read_orientation",
    "resize_if_needed",
    "save_image",
]
