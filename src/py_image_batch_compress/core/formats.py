"""格式处理器模块。

为每种输出格式准备像素数据并生成 Pillow 保存参数。
"""

import logging
from typing import Any

from PIL import Image

from ..exceptions import InternalError
from ..models.constants import JPEG_BACKGROUND, PNG_MODES, get_png_compress_level
from ..models.process_options import OutputFormat, QualityPreset


logger = logging.getLogger(__name__)


class FormatProcessor:
    """格式处理器

    只处理 JPEG 与 PNG，WEBP 为占位格式，编码时直接拒绝。
    """

    def prepare_for_format(
        self, img: Image.Image, target_format: OutputFormat
    ) -> Image.Image:
        """为目标格式准备图片

        Args:
            img: PIL图片对象
            target_format: 目标格式

        Returns:
            Image.Image: 处理后的图片对象

        Raises:
            InternalError: 目标格式尚未支持
        """
        self._ensure_supported(target_format)

        if target_format is OutputFormat.JPEG:
            return self._prepare_for_jpeg(img)
        return self._prepare_for_png(img)

    def get_save_parameters(
        self, target_format: OutputFormat, quality: QualityPreset
    ) -> dict[str, Any]:
        """获取保存参数，不包含 exif/icc_profile，输出不携带源元数据"""
        self._ensure_supported(target_format)
        percentage = quality.to_percentage()

        if target_format is OutputFormat.JPEG:
            return {"format": "JPEG", "quality": percentage}

        # optimize 会强制等级 9，因此关闭；zlib 编码器逐行自适应选择滤波器
        return {
            "format": "PNG",
            "compress_level": get_png_compress_level(percentage),
            "optimize": False,
        }

    def _ensure_supported(self, target_format: OutputFormat) -> None:
        if not target_format.is_supported:
            raise InternalError(f"{target_format.pillow_format} 格式暂不支持")

    def _prepare_for_jpeg(self, img: Image.Image) -> Image.Image:
        """JPEG不支持透明度，转换为 8 位 RGB"""
        if img.mode == "P" and "transparency" in img.info:
            img = img.convert("RGBA")

        if img.mode in ("RGBA", "LA", "PA"):
            # 使用alpha通道合成到白色背景
            rgba = img.convert("RGBA")
            background = Image.new("RGB", rgba.size, JPEG_BACKGROUND)
            background.paste(rgba, mask=rgba.getchannel("A"))
            return background

        if img.mode != "RGB":
            # CMYK、灰度、16 位等其他模式
            return img.convert("RGB")

        return img

    def _prepare_for_png(self, img: Image.Image) -> Image.Image:
        """PNG支持多种色彩模式，只转换无法直接保存的模式"""
        if img.mode in PNG_MODES:
            return img

        has_alpha = "A" in img.getbands() or "transparency" in img.info
        target_mode = "RGBA" if has_alpha else "RGB"
        logger.debug(f"PNG 不支持色彩模式 {img.mode}，转换为 {target_mode}")
        return img.convert(target_mode)
