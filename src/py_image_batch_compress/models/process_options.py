"""处理配置模型。

定义一次批量调用所需的质量预设、输出格式、隐私级别和处理选项。
"""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from .constants import OUTPUT_SUFFIX, QUALITY_PERCENTAGES


class QualityPreset(str, Enum):
    """质量预设"""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    def to_percentage(self) -> int:
        """获取预设对应的压缩质量（JPEG 质量与 PNG 等级共用）"""
        return QUALITY_PERCENTAGES[self.value]


class OutputFormat(str, Enum):
    """输出格式，WEBP 仅作占位"""

    JPEG = "jpeg"
    PNG = "png"
    WEBP = "webp"

    @property
    def extension(self) -> str:
        match self:
            case OutputFormat.JPEG:
                return "jpg"
            case OutputFormat.PNG:
                return "png"
            case OutputFormat.WEBP:
                return "webp"

    @property
    def pillow_format(self) -> str:
        """Pillow 编码器名称"""
        return self.value.upper()

    @property
    def is_supported(self) -> bool:
        return self is not OutputFormat.WEBP


class PrivacyLevel(str, Enum):
    """元数据隐私级别

    重新编码只写入像素数据，任何级别的输出都不携带源文件元数据。
    REMOVE_SENSITIVE 与 REMOVE_ALL 行为相同。
    """

    KEEP_ALL = "keep_all"
    REMOVE_SENSITIVE = "remove_sensitive"
    REMOVE_ALL = "remove_all"


class ProcessOptions(BaseModel):
    """批量处理选项，创建后不可变，所有工作线程只读共享"""

    model_config = ConfigDict(frozen=True)

    quality: QualityPreset = Field(description="质量预设")
    format: OutputFormat = Field(description="输出格式")
    privacy: PrivacyLevel = Field(PrivacyLevel.KEEP_ALL, description="隐私级别")
    width: int | None = Field(None, gt=0, description="目标宽度（像素）")
    output_dir: Path = Field(description="输出目录")

    def output_path_for(self, input_path: Path) -> Path:
        """生成输出路径：<output_dir>/<stem>_compressed.<ext>"""
        return self.output_dir / (
            f"{input_path.stem}{OUTPUT_SUFFIX}.{self.format.extension}"
        )
