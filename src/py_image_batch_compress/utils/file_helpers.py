"""文件工具模块。

提供输出目录准备和原子写入等文件操作。
"""

import os
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from .logging_helpers import get_logger
from .message_formatter import MessageFormatter


logger = get_logger()


def prepare_output_dir(output_dir: str | Path) -> Path:
    """确保输出目录存在"""
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    return output_dir


@contextmanager
def atomic_output(target: Path) -> Iterator[Path]:
    """先写临时文件，成功后再重命名为目标路径。

    临时文件与目标位于同一目录，保证 os.replace 是原子操作；
    with 块内抛出异常时临时文件被删除，目标路径保持原样。

    Args:
        target: 最终输出路径

    Yields:
        Path: 供写入的临时文件路径
    """
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{target.stem}.", suffix=f"{target.suffix}.tmp", dir=target.parent
    )
    os.close(fd)
    tmp_path = Path(tmp_name)

    try:
        yield tmp_path
        os.replace(tmp_path, target)
    except BaseException:
        _discard(tmp_path)
        raise


def _discard(tmp_path: Path) -> None:
    """删除残留的临时文件"""
    try:
        tmp_path.unlink(missing_ok=True)
    except OSError as e:
        logger.warning(MessageFormatter.operation_failed("清理临时文件", tmp_path, e))
