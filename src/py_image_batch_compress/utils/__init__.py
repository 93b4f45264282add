"""工具模块包。

提供纯工具函数，不包含业务逻辑。
"""

from .file_helpers import atomic_output, prepare_output_dir
from .logging_helpers import configure_logging, get_logger
from .message_formatter import MessageFormatter


__all__ = [
    "MessageFormatter",
    "atomic_output",
    "configure_logging",
    "get_logger",
    "prepare_output_dir",
]
