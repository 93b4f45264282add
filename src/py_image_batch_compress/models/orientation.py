"""EXIF 方向模型。

相机写入的 Orientation 标签 (0x0112) 取值 1-8，对应八种几何变换。
"""

from enum import IntEnum
from typing import Any

from PIL import Image


class Orientation(IntEnum):
    """EXIF 方向描述"""

    NORMAL = 1
    FLIP_HORIZONTAL = 2
    ROTATE_180 = 3
    FLIP_VERTICAL = 4
    TRANSPOSE = 5  # 顺时针 90° 后水平翻转
    ROTATE_90 = 6  # 顺时针 90°
    TRANSVERSE = 7  # 顺时针 270° 后水平翻转
    ROTATE_270 = 8  # 顺时针 270°

    @classmethod
    def from_tag(cls, value: Any) -> "Orientation":
        """从标签值解析方向，无法识别的值视为 NORMAL"""
        if isinstance(value, bool) or not isinstance(value, int):
            return cls.NORMAL
        try:
            return cls(value)
        except ValueError:
            return cls.NORMAL

    @property
    def transpose_method(self) -> Image.Transpose | None:
        """实现该方向校正的 Pillow 变换，NORMAL 返回 None"""
        return _TRANSPOSE_METHODS.get(self)

    @property
    def swaps_dimensions(self) -> bool:
        """校正后宽高是否互换"""
        return self in (
            Orientation.TRANSPOSE,
            Orientation.ROTATE_90,
            Orientation.TRANSVERSE,
            Orientation.ROTATE_270,
        )


# Pillow 的 ROTATE_* 为逆时针方向
_TRANSPOSE_METHODS: dict[Orientation, Image.Transpose] = {
    Orientation.FLIP_HORIZONTAL: Image.Transpose.FLIP_LEFT_RIGHT,
    Orientation.ROTATE_180: Image.Transpose.ROTATE_180,
    Orientation.FLIP_VERTICAL: Image.Transpose.FLIP_TOP_BOTTOM,
    Orientation.TRANSPOSE: Image.Transpose.TRANSPOSE,
    Orientation.ROTATE_90: Image.Transpose.ROTATE_270,
    Orientation.TRANSVERSE: Image.Transpose.TRANSVERSE,
    Orientation.ROTATE_270: Image.Transpose.ROTATE_90,
}
