"""批量图像压缩 MCP 服务器。

作为调用方外壳，向 MCP 客户端暴露批量压缩与方向查询两个工具。
"""

from pathlib import Path
from typing import Any

from fastmcp import FastMCP

from .compressor import ImageBatchCompressor
from .core.exif_reader import query_orientation
from .exceptions import ExifReadError, ImageError, ValidationError
from .utils.logging_helpers import configure_logging, get_logger
from .utils.message_formatter import MessageFormatter


# MCP 服务器响应类型定义
MCPProcessResponse = dict[str, Any]
MCPOrientationResponse = dict[str, Any]


class MCPResponseBuilder:
    """MCP 服务器响应构建器，专门用于构建符合 MCP 协议的响应格式。"""

    @staticmethod
    def error(
        message: str,
        error_type: str = "general",
        details: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """构建错误结果。

        Args:
            message: 错误消息
            error_type: 错误类型
            details: 额外的错误详情

        Returns:
            dict: 标准化的错误响应
        """
        result: dict[str, Any] = {
            "success": False,
            "error": message,
            "error_type": error_type,
        }

        if details:
            result["details"] = details

        return result

    @staticmethod
    def validation_error(message: str, field: str | None = None) -> dict[str, Any]:
        """构建验证错误结果。"""
        details = {"field": field} if field else None
        return MCPResponseBuilder.error(
            message=message,
            error_type="validation",
            details=details,
        )

    @staticmethod
    def file_error(message: str, file_path: str | None = None) -> dict[str, Any]:
        """构建文件相关错误结果。"""
        details = {"file_path": file_path} if file_path else None
        return MCPResponseBuilder.error(
            message=message,
            error_type="file",
            details=details,
        )

    @staticmethod
    def image_error(error: ImageError) -> dict[str, Any]:
        """按 ImageError 类型构建错误结果。"""
        details = {"kind": error.kind}
        if error.path:
            details["file_path"] = error.path
        return MCPResponseBuilder.error(
            message=str(error),
            error_type="processing",
            details=details,
        )


logger = get_logger(__name__)

# 创建MCP应用
mcp: FastMCP[Any] = FastMCP("批量图像压缩服务")

# 全局压缩器实例
compressor = ImageBatchCompressor()


@mcp.tool()
def process_images(
    paths: list[str],
    output_dir: str,
    quality: str = "medium",
    format: str = "jpeg",
    privacy: str = "keep_all",
    width: int | None = None,
) -> MCPProcessResponse:
    """批量压缩图片，并按 EXIF 方向校正、按宽度等比缩小。

    Args:
        paths: 输入图片路径列表
        output_dir: 输出目录，文件命名为 <文件名>_compressed.<扩展名>
        quality: 质量 high/alta(90), medium/media(75), low/baja(60)
        format: 输出格式 jpeg/jpg 或 png（webp 尚未支持）
        privacy: 隐私级别 keep_all/todo, remove_sensitive/sensible, remove_all/nada
        width: 目标宽度（像素），仅在小于原图宽度时缩小

    Returns:
        dict: 汇总结果（总数、成功数、失败数、最近完成的文件）
    """
    try:
        result = compressor.process_images_command(
            paths=paths,
            quality=quality,
            format=format,
            privacy=privacy,
            width=width,
            output_dir=output_dir,
        )
    except ValidationError as e:
        return MCPResponseBuilder.validation_error(e.message, e.field)
    except ImageError as e:
        logger.error(MessageFormatter.operation_failed("批量压缩", output_dir, e))
        return MCPResponseBuilder.image_error(e)

    successful, total = result["successful"], result["total_images"]
    return {
        "success": True,
        "result": result,
        "summary": f"处理 {successful}/{total} 个文件，失败 {result['failed']}",
    }


@mcp.tool()
def get_orientation(input_path: str) -> MCPOrientationResponse:
    """读取图片的 EXIF 方向标签。

    Args:
        input_path: 输入图像文件路径

    Returns:
        dict: 方向值(1-8)与名称，标签缺失时为 1 (NORMAL)
    """
    input_path_obj = Path(input_path)
    if not input_path_obj.exists():
        return MCPResponseBuilder.file_error(
            MessageFormatter.file_not_found(input_path), input_path
        )

    try:
        orientation = query_orientation(input_path_obj)
    except ExifReadError as e:
        logger.warning(MessageFormatter.operation_failed("读取方向", input_path, e))
        return MCPResponseBuilder.image_error(e)

    return {
        "success": True,
        "file_path": str(input_path_obj),
        "orientation": int(orientation),
        "name": orientation.name,
        "swaps_dimensions": orientation.swaps_dimensions,
    }


def main() -> None:
    """启动 MCP 服务器"""
    configure_logging()
    logger.info("启动批量图像压缩 MCP 服务器")
    mcp.run()


if __name__ == "__main__":
    main()
