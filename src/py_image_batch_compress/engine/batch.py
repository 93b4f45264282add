"""批量处理器模块。

将文件列表分发到线程池，并在单一互斥锁下累计进度。
"""

import threading
from collections.abc import Sequence
from pathlib import Path

from ..config import get_config
from ..core.transform_engine import process_single_image
from ..exceptions import ErrorHandler, InternalError, SaveFailedError
from ..models.process_options import ProcessOptions
from ..models.progress import ProgressInfo
from ..utils.logging_helpers import get_logger
from .concurrent_executor import ConcurrentExecutor


logger = get_logger()


class ProgressTracker:
    """线程安全的进度记录

    每次更新只在锁内写两个计数器之一和 current_file，
    解码与编码期间从不持有锁。
    """

    def __init__(self, total_images: int):
        self._progress = ProgressInfo(total_images=total_images)
        self._lock = threading.Lock()

    def record(self, path: Path, success: bool) -> None:
        """记录一个文件的最终结果，current_file 以最后写入为准"""
        with self._lock:
            if success:
                self._progress.successful += 1
            else:
                self._progress.failed += 1
            self._progress.current_file = str(path)

    def snapshot(self) -> ProgressInfo:
        """获取当前进度的副本"""
        with self._lock:
            return self._progress.model_copy()


class BatchProcessor:
    """批量图像处理器

    每个文件是独立的工作单元，单个文件的失败只计入失败数。
    """

    def __init__(self, max_workers: int | None = None):
        """初始化批量处理器

        Args:
            max_workers: 最大并发数，默认取应用配置
        """
        self.max_workers = max_workers or get_config().processing.MAX_WORKERS
        self.concurrent_executor: ConcurrentExecutor[Path, Path] = ConcurrentExecutor(
            self.max_workers
        )

    def process_images(
        self, paths: Sequence[str | Path], options: ProcessOptions
    ) -> ProgressInfo:
        """并发处理图片列表

        Args:
            paths: 输入文件路径列表
            options: 批量处理选项

        Returns:
            ProgressInfo: 全部文件处理完成后的进度快照

        Raises:
            InternalError: 输入列表为空
        """
        if not paths:
            raise InternalError("未提供任何图像")

        image_paths = [Path(p) for p in paths]
        tracker = ProgressTracker(len(image_paths))
        unique_paths = self._claim_outputs(image_paths, options, tracker)

        logger.info(
            f"开始批量处理 {len(image_paths)} 张图片: "
            f"格式={options.format.value}, 质量={options.quality.value}"
            f"({options.quality.to_percentage()}), 宽度={options.width}, "
            f"隐私={options.privacy.value}"
        )

        def on_complete(
            path: Path, output_path: Path | None, error: Exception | None
        ) -> None:
            tracker.record(path, success=error is None)

        self.concurrent_executor.execute_tasks(
            items=unique_paths,
            task_function=lambda path: process_single_image(path, options),
            on_complete=on_complete,
        )

        progress = tracker.snapshot()
        logger.info(progress.get_summary())
        return progress

    def _claim_outputs(
        self, paths: list[Path], options: ProcessOptions, tracker: ProgressTracker
    ) -> list[Path]:
        """为每个输出路径保留第一个输入，其余同名输入直接记为失败

        不同目录下同名的输入会映射到同一个输出文件，
        每个输出文件只允许一个工作线程写入。
        """
        claimed: dict[Path, Path] = {}
        unique_paths = []
        for path in paths:
            output_path = options.output_path_for(path)
            if output_path in claimed:
                error = SaveFailedError(
                    output_path, f"与 {claimed[output_path]} 的输出路径冲突"
                )
                ErrorHandler.handle_file_failure(error, path, "分配输出路径")
                tracker.record(path, success=False)
                continue
            claimed[output_path] = path
            unique_paths.append(path)
        return unique_paths


def process_images(
    paths: Sequence[str | Path],
    options: ProcessOptions,
    max_workers: int | None = None,
) -> ProgressInfo:
    """便捷的批量处理函数"""
    return BatchProcessor(max_workers=max_workers).process_images(paths, options)
