#!/usr/bin/env python3
"""批量压缩演示脚本。

生成几张带 EXIF 方向标签的测试图片，然后批量压缩为 PNG 并缩小宽度。
"""

import shutil
from pathlib import Path

from PIL import ExifTags, Image, ImageDraw

from py_image_batch_compress import (
    ImageBatchCompressor,
    ValidationError,
    query_orientation,
)


def get_output_dir(subdir: str = "") -> Path:
    """获取输出目录 - 使用项目的 tmp 目录"""
    project_root = Path(__file__).parent.parent
    output_dir = project_root / "tmp" / "examples"
    if subdir:
        output_dir = output_dir / subdir
    output_dir.mkdir(parents=True, exist_ok=True)
    return output_dir


def create_sample_images(target: Path) -> list[Path]:
    """创建不同方向的测试图片"""
    images = []
    for name, size, orientation in [
        ("landscape.jpg", (1600, 1200), None),
        ("rotated.jpg", (1600, 1200), 6),
        ("mirrored.jpg", (800, 600), 2),
    ]:
        img = Image.new("RGB", size, "white")
        draw = ImageDraw.Draw(img)
        draw.rectangle([0, 0, size[0] // 2, size[1]], fill="red")

        exif = Image.Exif()
        if orientation is not None:
            exif[ExifTags.Base.Orientation] = orientation

        path = target / name
        img.save(path, exif=exif)
        images.append(path)

    return images


def demo_batch_compress() -> None:
    """演示批量压缩"""
    print("🔄 批量压缩演示")

    source_dir = get_output_dir("source")
    output_dir = get_output_dir("compressed")
    images = create_sample_images(source_dir)

    for path in images:
        orientation = query_orientation(path)
        print(f"  - {path.name}: 方向 {int(orientation)} ({orientation.name})")

    compressor = ImageBatchCompressor(max_workers=2)
    summary = compressor.process_images_command(
        paths=images,
        quality="alta",
        format="png",
        privacy="nada",
        width=800,
        output_dir=output_dir,
    )

    print(
        f"✅ 完成 {summary['successful']}/{summary['total_images']}，"
        f"失败 {summary['failed']}"
    )
    for output in sorted(output_dir.glob("*_compressed.png")):
        with Image.open(output) as img:
            print(f"  - {output.name}: {img.width}x{img.height}")


def demo_invalid_selector() -> None:
    """演示无效选择器在处理前失败"""
    print("\n🚫 无效选择器演示")

    try:
        ImageBatchCompressor().process_images_command(
            [], "medium", "gif", "keep_all", None, get_output_dir("never")
        )
    except ValidationError as e:
        print(f"  验证失败: {e.message}")


if __name__ == "__main__":
    try:
        demo_batch_compress()
        demo_invalid_selector()
    finally:
        shutil.rmtree(get_output_dir("source"), ignore_errors=True)
