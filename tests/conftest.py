"""测试配置文件。

提供测试所需的fixtures和配置，测试图片全部在临时目录中生成。
"""

from collections.abc import Callable
from pathlib import Path

import pytest
from PIL import ExifTags, Image, ImageDraw


def create_options(**kwargs):
    """创建完整的ProcessOptions，提供默认值"""
    from py_image_batch_compress.models import (
        OutputFormat,
        PrivacyLevel,
        ProcessOptions,
        QualityPreset,
    )

    defaults = {
        "quality": QualityPreset.MEDIUM,
        "format": OutputFormat.JPEG,
        "privacy": PrivacyLevel.KEEP_ALL,
        "width": None,
    }
    defaults.update(kwargs)
    return ProcessOptions(**defaults)


def draw_test_image(size: tuple[int, int], mode: str = "RGB") -> Image.Image:
    """生成左红右蓝、带少量图形的测试图片"""
    width, height = size
    img = Image.new(mode, size, color="white")
    draw = ImageDraw.Draw(img)
    draw.rectangle([0, 0, width // 2 - 1, height - 1], fill="red")
    draw.rectangle([width // 2, 0, width - 1, height - 1], fill="blue")
    return img


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """输出目录fixture"""
    out = tmp_path / "output"
    out.mkdir()
    return out


@pytest.fixture
def input_dir(tmp_path: Path) -> Path:
    """输入目录fixture"""
    src = tmp_path / "input"
    src.mkdir()
    return src


@pytest.fixture
def make_image(input_dir: Path) -> Callable[..., Path]:
    """生成测试图片的工厂

    Args:
        name: 文件名
        size: 尺寸
        orientation: 写入的 EXIF Orientation 标签，None 表示不写
        mode: 色彩模式
        format: Pillow 保存格式，默认由扩展名推断
    """

    def _make(
        name: str = "photo.jpg",
        size: tuple[int, int] = (120, 80),
        orientation: int | None = None,
        mode: str = "RGB",
        format: str | None = None,
    ) -> Path:
        path = input_dir / name
        img = draw_test_image(size, mode)
        save_kwargs = {}
        if orientation is not None:
            exif = Image.Exif()
            exif[ExifTags.Base.Orientation] = orientation
            save_kwargs["exif"] = exif
        img.save(path, format=format, **save_kwargs)
        return path

    return _make


@pytest.fixture
def sample_jpegs(make_image) -> list[Path]:
    """三张有效的JPEG图片"""
    return [
        make_image("first.jpg", (200, 150)),
        make_image("second.jpg", (150, 200)),
        make_image("third.jpg", (64, 64)),
    ]


@pytest.fixture
def corrupt_image(input_dir: Path) -> Path:
    """扩展名为jpg但内容不是图片的文件"""
    path = input_dir / "broken.jpg"
    path.write_bytes(b"this is not an image at all")
    return path


@pytest.fixture(autouse=True)
def _reset_app_config():
    """每个测试后恢复全局配置"""
    yield
    from py_image_batch_compress.config import reset_config

    reset_config()
