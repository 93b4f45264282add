"""图像处理异常模块。

定义封闭的单文件错误类型族、选择器验证错误以及统一的异常转换装饰器。
"""

from collections.abc import Callable
from functools import wraps
from pathlib import Path
from typing import Any, TypeVar

from .utils.logging_helpers import get_logger
from .utils.message_formatter import MessageFormatter


logger = get_logger()
T = TypeVar("T")


class ImageError(Exception):
    """图像处理错误基类，每个文件的结果要么成功要么是一种错误"""

    kind: str = "image_error"

    def __init__(self, message: str, path: str | Path | None = None):
        super().__init__(message)
        self.message = message
        self.path = str(path) if path is not None else None


class PathNotFoundError(ImageError):
    """解码前输入文件不存在"""

    kind = "path_not_found"

    def __init__(self, path: str | Path):
        super().__init__(f"路径不存在: {path}", path)


class InvalidFormatError(ImageError):
    """字节流无法解码为支持的图像"""

    kind = "invalid_format"

    def __init__(self, path: str | Path, details: str | None = None):
        message = f"无效的图像格式: {path}"
        if details:
            message += f" ({details})"
        super().__init__(message, path)
        self.details = details


class ExifReadError(ImageError):
    """元数据容器打开或解析失败（仅独立查询路径抛出）"""

    kind = "exif_read_error"

    def __init__(self, path: str | Path, details: str):
        super().__init__(f"EXIF 读取失败 {path}: {details}", path)
        self.details = details


class SaveFailedError(ImageError):
    """输出文件创建或编码失败"""

    kind = "save_failed"

    def __init__(self, path: str | Path, reason: str):
        super().__init__(f"保存失败 {path}: {reason}", path)
        self.reason = reason


class InvalidDimensionsError(ImageError):
    """尺寸非法，批量路径中暂未使用"""

    kind = "invalid_dimensions"

    def __init__(self, width: int, height: int, reason: str):
        super().__init__(f"无效的尺寸 {width}x{height}: {reason}")
        self.width = width
        self.height = height
        self.reason = reason


class InternalError(ImageError):
    """空输入列表或使用了不支持的输出格式"""

    kind = "internal_error"

    def __init__(self, message: str, path: str | Path | None = None):
        super().__init__(f"内部错误: {message}", path)
        self.detail = message


class ValidationError(Exception):
    """调用方参数验证错误，在任何处理开始前抛出"""

    def __init__(self, message: str, field: str | None = None, value: Any = None):
        super().__init__(message)
        self.message = message
        self.field = field
        self.value = value


def handle_image_errors(
    operation_name: str,
    wrap: Callable[[Path, Exception], ImageError],
):
    """统一的阶段异常转换装饰器

    被装饰函数的第一个参数必须是文件路径。ImageError 原样抛出，
    其他异常经 wrap 转换为该阶段对应的 ImageError。

    Args:
        operation_name: 操作名称，用于日志记录
        wrap: 将 (路径, 原始异常) 转换为 ImageError 的工厂
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(path: Path, *args, **kwargs) -> T:
            try:
                return func(path, *args, **kwargs)
            except ImageError:
                raise
            except Exception as e:
                ErrorHandler.log_error(operation_name, path, e, "debug")
                raise wrap(path, e) from e

        return wrapper

    return decorator


class ErrorHandler:
    """统一错误处理器

    提供标准化的错误日志记录。
    """

    @staticmethod
    def log_error(
        operation: str, path: str | Path, error: Exception, level: str = "error"
    ) -> None:
        """标准化的错误日志记录

        Args:
            operation: 操作名称（如"图像解码"、"图像编码"等）
            path: 相关文件路径
            error: 异常对象
            level: 日志级别 ("error", "warning", "debug")
        """
        log_msg = MessageFormatter.format_error(operation, path, error)
        getattr(logger, level, logger.error)(log_msg)

    @staticmethod
    def handle_file_failure(error: Exception, path: str | Path, operation: str) -> None:
        """记录单个文件的失败，按错误类型选择日志级别"""
        match error:
            case ImageError():
                ErrorHandler.log_error(operation, path, error, "warning")
            case _:
                logger.exception(
                    MessageFormatter.format_error(f"{operation} - 未知错误", path, error)
                )
