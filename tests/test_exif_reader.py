"""EXIF 方向读取测试。"""

from pathlib import Path

import pytest

from py_image_batch_compress.core.exif_reader import (
    query_orientation,
    read_orientation,
)
from py_image_batch_compress.exceptions import ExifReadError
from py_image_batch_compress.models import Orientation


class TestQueryOrientation:
    """独立查询路径测试"""

    @pytest.mark.parametrize("value", range(1, 9))
    def test_reads_jpeg_tag(self, make_image, value: int):
        """测试读取JPEG中的方向标签"""
        path = make_image(f"tag_{value}.jpg", orientation=value)
        assert query_orientation(path) == Orientation(value)

    def test_reads_png_tag(self, make_image):
        """测试读取PNG eXIf块中的方向标签"""
        path = make_image("tagged.png", orientation=8)
        assert query_orientation(path) is Orientation.ROTATE_270

    def test_missing_tag_is_normal(self, make_image):
        path = make_image("plain.jpg")
        assert query_orientation(path) is Orientation.NORMAL

    @pytest.mark.parametrize("value", [0, 9, 42])
    def test_out_of_range_tag_is_normal(self, make_image, value: int):
        path = make_image(f"bad_{value}.jpg", orientation=value)
        assert query_orientation(path) is Orientation.NORMAL

    def test_missing_file_raises(self, tmp_path: Path):
        """测试文件不存在时抛出类型化错误"""
        missing = tmp_path / "missing.jpg"
        with pytest.raises(ExifReadError) as exc_info:
            query_orientation(missing)

        assert exc_info.value.path == str(missing)
        assert exc_info.value.kind == "exif_read_error"

    def test_unreadable_container_raises(self, corrupt_image: Path):
        with pytest.raises(ExifReadError):
            query_orientation(corrupt_image)


class TestReadOrientation:
    """批量路径读取测试：永不抛出"""

    def test_reads_tag(self, make_image):
        path = make_image("rotated.jpg", orientation=6)
        assert read_orientation(path) is Orientation.ROTATE_90

    def test_missing_file_is_normal(self, tmp_path: Path):
        assert read_orientation(tmp_path / "missing.jpg") is Orientation.NORMAL

    def test_unreadable_container_is_normal(self, corrupt_image: Path):
        assert read_orientation(corrupt_image) is Orientation.NORMAL

    def test_accepts_string_path(self, make_image):
        path = make_image("string.jpg", orientation=3)
        assert read_orientation(str(path)) is Orientation.ROTATE_180
