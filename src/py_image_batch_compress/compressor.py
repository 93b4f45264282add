"""批量图像压缩器接口。

面向调用方的入口：解析选择器字符串、准备输出目录、执行批量处理，
返回扁平的汇总结果。
"""

from collections.abc import Sequence
from pathlib import Path

from .engine.batch import BatchProcessor
from .engine.config import ConfigBuilder
from .exceptions import SaveFailedError, ValidationError
from .models import ProgressInfoResponse
from .utils.file_helpers import prepare_output_dir
from .utils.logging_helpers import get_logger


logger = get_logger()


class ImageBatchCompressor:
    """批量图像压缩器。

    选择器全部验证通过后才会创建输出目录并开始处理。
    """

    def __init__(self, max_workers: int | None = None):
        """初始化压缩器。

        Args:
            max_workers: 批量处理时的最大并发数，默认取应用配置
        """
        if max_workers is not None and max_workers <= 0:
            raise ValidationError("max_workers 必须大于 0", "max_workers", max_workers)

        self.config_builder = ConfigBuilder()
        self.batch_processor = BatchProcessor(max_workers=max_workers)

        logger.debug("初始化批量图像压缩器")

    def process_images_command(
        self,
        paths: Sequence[str | Path],
        quality: str,
        format: str,
        privacy: str,
        width: int | None,
        output_dir: str | Path,
    ) -> ProgressInfoResponse:
        """批量压缩图片。

        Args:
            paths: 输入文件路径列表
            quality: 质量选择器（high/alta, medium/media, low/baja）
            format: 格式选择器（jpeg/jpg, png, webp）
            privacy: 隐私选择器（keep_all/todo, remove_sensitive/sensible, remove_all/nada）
            width: 目标宽度（像素），None 表示不缩放
            output_dir: 输出目录

        Returns:
            ProgressInfoResponse: 总数、成功数、失败数及最近完成的文件

        Raises:
            ValidationError: 选择器或宽度无效
            SaveFailedError: 输出目录无法创建
            InternalError: 输入列表为空

        Examples:
            >>> compressor = ImageBatchCompressor()
            >>> summary = compressor.process_images_command(
            ...     ["a.jpg", "b.jpg"], "medium", "png", "keep_all", None, "out"
            ... )
            >>> print(summary["successful"], summary["failed"])
        """
        options = self.config_builder.build(
            quality=quality,
            format=format,
            privacy=privacy,
            width=width,
            output_dir=output_dir,
        )

        if paths:
            try:
                prepare_output_dir(options.output_dir)
            except OSError as e:
                raise SaveFailedError(options.output_dir, str(e)) from e

        progress = self.batch_processor.process_images(list(paths), options)
        return progress.to_response()


def process_images_command(
    paths: Sequence[str | Path],
    quality: str,
    format: str,
    privacy: str,
    width: int | None,
    output_dir: str | Path,
) -> ProgressInfoResponse:
    """便捷的批量压缩函数，使用默认并发配置

    Examples:
        >>> summary = process_images_command(
        ...     ["photo.jpg"], "ALTA", "jpg", "todo", 1024, "compressed/"
        ... )
        >>> print(summary["total_images"])
    """
    return ImageBatchCompressor().process_images_command(
        paths, quality, format, privacy, width, output_dir
    )
