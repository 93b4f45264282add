"""批量进度模型。

定义批量处理的汇总结果及返回给调用方的扁平响应结构。
"""

from typing import TypedDict

from pydantic import BaseModel, Field


class ProgressInfo(BaseModel):
    """批量处理进度

    在一次批量调用内由协调器独占，工作线程在锁内修改；
    返回给调用方的是副本。
    """

    total_images: int = Field(ge=0, description="图像总数")
    successful: int = Field(0, ge=0, description="成功数量")
    failed: int = Field(0, ge=0, description="失败数量")
    current_file: str | None = Field(None, description="最近完成的文件")

    @property
    def processed(self) -> int:
        """已处理数量"""
        return self.successful + self.failed

    @property
    def is_complete(self) -> bool:
        return self.processed == self.total_images

    def get_success_rate(self) -> float:
        """获取成功率（百分比）"""
        if self.total_images == 0:
            return 0.0
        return (self.successful / self.total_images) * 100

    def get_summary(self) -> str:
        """批量处理摘要"""
        return (
            f"处理 {self.successful}/{self.total_images} 个文件 "
            f"(成功率 {self.get_success_rate():.1f}%, 失败 {self.failed})"
        )

    def to_response(self) -> "ProgressInfoResponse":
        return {
            "total_images": self.total_images,
            "successful": self.successful,
            "failed": self.failed,
            "current_file": self.current_file,
        }


class ProgressInfoResponse(TypedDict):
    """返回给调用方的扁平汇总"""

    total_images: int
    successful: int
    failed: int
    current_file: str | None
