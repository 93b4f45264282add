"""配置构建器模块。

将调用方传入的选择器字符串解析为经过验证的处理选项。
任何选择器无法识别时立即失败，不会开始处理。
"""

import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ValidationError
from ..models.constants import SelectorAliases
from ..models.process_options import (
    OutputFormat,
    PrivacyLevel,
    ProcessOptions,
    QualityPreset,
)
from ..utils.message_formatter import MessageFormatter


logger = logging.getLogger(__name__)


class ConfigBuilder:
    """处理选项构建器

    选择器不区分大小写，同时接受英文与西班牙文别名。
    """

    def parse_quality(self, quality: str) -> QualityPreset:
        """解析质量选择器：high/alta, medium/media, low/baja"""
        return QualityPreset(
            self._lookup("质量等级", quality, SelectorAliases.QUALITY)
        )

    def parse_format(self, format: str) -> OutputFormat:
        """解析格式选择器：jpeg/jpg, png, webp"""
        return OutputFormat(self._lookup("输出格式", format, SelectorAliases.FORMAT))

    def parse_privacy(self, privacy: str) -> PrivacyLevel:
        """解析隐私选择器：keep_all/todo, remove_sensitive/sensible, remove_all/nada"""
        return PrivacyLevel(
            self._lookup("隐私级别", privacy, SelectorAliases.PRIVACY)
        )

    def build(
        self,
        quality: str,
        format: str,
        privacy: str,
        width: int | None,
        output_dir: str | Path,
    ) -> ProcessOptions:
        """解析全部选择器并构建处理选项

        Args:
            quality: 质量选择器
            format: 格式选择器
            privacy: 隐私选择器
            width: 目标宽度（像素），None 表示不缩放
            output_dir: 输出目录

        Returns:
            ProcessOptions: 不可变的处理选项

        Raises:
            ValidationError: 任一参数无效
        """
        quality_preset = self.parse_quality(quality)
        output_format = self.parse_format(format)
        privacy_level = self.parse_privacy(privacy)
        self._validate_width(width)

        try:
            return ProcessOptions(
                quality=quality_preset,
                format=output_format,
                privacy=privacy_level,
                width=width,
                output_dir=Path(output_dir),
            )
        except PydanticValidationError as e:
            raise ValidationError(self._format_validation_error(e)) from e

    def _lookup(self, field: str, value: Any, aliases: dict[str, str]) -> str:
        """按别名表查找标准值"""
        key = value.strip().lower() if isinstance(value, str) else None
        if key is None or key not in aliases:
            message = MessageFormatter.invalid_selector(field, value, list(aliases))
            logger.warning(message)
            raise ValidationError(message, field=field, value=value)
        return aliases[key]

    def _validate_width(self, width: Any) -> None:
        """宽度必须是正整数或 None"""
        if width is None:
            return
        if isinstance(width, bool) or not isinstance(width, int) or width <= 0:
            raise ValidationError(
                MessageFormatter.validation_error("宽度", width, "必须是正整数"),
                field="width",
                value=width,
            )

    def _format_validation_error(self, error: PydanticValidationError) -> str:
        """格式化验证错误"""
        messages = []
        for err in error.errors():
            field = ".".join(str(loc) for loc in err["loc"])
            msg = err["msg"]
            if field:
                messages.append(f"{field}: {msg}")
            else:
                messages.append(msg)
        return "; ".join(messages)
