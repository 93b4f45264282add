"""EXIF 方向读取模块。

只关心 Orientation 标签，其余元数据解析交给 Pillow。
"""

from pathlib import Path

from PIL import ExifTags, Image

from ..exceptions import ExifReadError
from ..models.orientation import Orientation
from ..utils.logging_helpers import get_logger


logger = get_logger()


def query_orientation(file_path: str | Path) -> Orientation:
    """读取图片的 EXIF 方向。

    标签缺失或取值无效时返回 NORMAL。

    Args:
        file_path: 图片文件路径

    Returns:
        Orientation: 方向描述

    Raises:
        ExifReadError: 文件无法打开或元数据容器无法解析
    """
    file_path = Path(file_path)

    try:
        with Image.open(file_path) as img:
            exif = img.getexif()
            value = exif.get(ExifTags.Base.Orientation)
    except Exception as e:
        raise ExifReadError(file_path, str(e) or type(e).__name__) from e

    return Orientation.from_tag(value)


def read_orientation(file_path: str | Path) -> Orientation:
    """读取图片的 EXIF 方向，任何读取失败都视为无需校正。

    方向标签缺失或损坏不应阻止本可成功的压缩。
    """
    try:
        return query_orientation(file_path)
    except ExifReadError as e:
        logger.debug(f"忽略 EXIF 方向读取失败: {e}")
        return Orientation.NORMAL
