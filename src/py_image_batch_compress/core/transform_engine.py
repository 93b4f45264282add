"""图像变换引擎模块。

单张图片的处理流水线：解码 → 方向校正 → 尺寸调整 → 编码写出。
方向校正必须在缩放之前，否则非正方形图片的宽高比会出错。
"""

from pathlib import Path

from humanize import naturalsize
from PIL import Image

from ..exceptions import (
    InvalidFormatError,
    PathNotFoundError,
    SaveFailedError,
    handle_image_errors,
)
from ..models.process_options import ProcessOptions
from ..utils.file_helpers import atomic_output
from ..utils.logging_helpers import get_logger
from ..utils.message_formatter import MessageFormatter
from .exif_reader import read_orientation
from .formats import FormatProcessor


logger = get_logger()

_format_processor = FormatProcessor()


def process_single_image(input_path: str | Path, options: ProcessOptions) -> Path:
    """处理单张图片。

    只有四个阶段全部成功才会出现输出文件。

    Args:
        input_path: 输入文件路径
        options: 批量处理选项

    Returns:
        Path: 写出的输出文件路径

    Raises:
        PathNotFoundError: 输入文件不存在
        InvalidFormatError: 无法解码
        SaveFailedError: 输出文件创建或编码失败
        InternalError: 输出格式尚未支持
    """
    input_path = Path(input_path)

    img = load_image(input_path)
    img = apply_orientation(input_path, img)
    img = resize_if_needed(img, options.width)

    output_path = options.output_path_for(input_path)
    compressed_size = save_image(output_path, img, options)

    logger.debug(
        MessageFormatter.file_written(
            output_path, naturalsize(compressed_size, binary=True)
        )
    )
    return output_path


@handle_image_errors("图像解码", lambda path, e: InvalidFormatError(path, str(e)))
def load_image(path: Path) -> Image.Image:
    """解码图片到内存，动画图片只取第一帧"""
    if not path.exists():
        raise PathNotFoundError(path)

    with Image.open(path) as img:
        # 强制解码，让截断等延迟错误在此阶段暴露
        img.load()
        return img.copy()


def apply_orientation(path: Path, img: Image.Image) -> Image.Image:
    """按 EXIF 方向校正图片，读取失败时原样返回"""
    orientation = read_orientation(path)
    method = orientation.transpose_method
    if method is None:
        return img

    logger.debug(f"方向校正 {path.name}: {orientation.name}")
    return img.transpose(method)


def resize_if_needed(img: Image.Image, target_width: int | None) -> Image.Image:
    """目标宽度小于当前宽度时按比例缩小，从不放大"""
    if target_width is None or target_width >= img.width:
        return img

    target_height = max(1, round(target_width * img.height / img.width))
    return img.resize((target_width, target_height), Image.Resampling.LANCZOS)


@handle_image_errors("图像编码", lambda path, e: SaveFailedError(path, str(e)))
def save_image(output_path: Path, img: Image.Image, options: ProcessOptions) -> int:
    """编码并原子写出图片，返回输出文件大小"""
    # 不支持的格式在创建任何文件之前失败
    save_params = _format_processor.get_save_parameters(
        options.format, options.quality
    )
    prepared = _format_processor.prepare_for_format(img, options.format)

    with atomic_output(output_path) as tmp_path:
        prepared.save(tmp_path, **save_params)

    return output_path.stat().st_size
