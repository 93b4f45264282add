"""图像批量处理引擎模块。

包含批量并发处理和选项构建等核心处理逻辑。
"""

from .batch import BatchProcessor, ProgressTracker, process_images
from .concurrent_executor import ConcurrentExecutor
from .config import ConfigBuilder


__all__ = [
    "BatchProcessor",
    "ConcurrentExecutor",
    "ConfigBuilder",
    "ProgressTracker",
    "process_images",
]
