"""集成测试。

测试调用方入口与 MCP 工具的端到端行为。
"""

from pathlib import Path

import pytest
from PIL import Image

from py_image_batch_compress import __version__
from py_image_batch_compress.compressor import (
    ImageBatchCompressor,
    process_images_command,
)
from py_image_batch_compress.exceptions import (
    InternalError,
    SaveFailedError,
    ValidationError,
)


def _tool_fn(tool):
    """取出被 FastMCP 注册的原始函数"""
    return getattr(tool, "fn", tool)


class TestImageBatchCompressor:
    """批量压缩器入口测试"""

    @pytest.fixture
    def compressor(self):
        return ImageBatchCompressor(max_workers=2)

    def test_process_images_command(
        self, compressor, sample_jpegs: list[Path], output_dir: Path
    ):
        """测试三张JPEG转PNG的完整流程"""
        result = compressor.process_images_command(
            paths=[str(p) for p in sample_jpegs],
            quality="medium",
            format="png",
            privacy="keep_all",
            width=None,
            output_dir=str(output_dir),
        )

        assert result["total_images"] == 3
        assert result["successful"] == 3
        assert result["failed"] == 0
        assert result["current_file"] in {str(p) for p in sample_jpegs}
        assert len(list(output_dir.glob("*_compressed.png"))) == 3

    def test_creates_output_dir(self, compressor, make_image, tmp_path: Path):
        target = tmp_path / "new" / "nested"
        result = compressor.process_images_command(
            [make_image("one.jpg")], "baja", "jpg", "nada", 50, target
        )

        assert result["successful"] == 1
        with Image.open(target / "one_compressed.jpg") as img:
            assert img.width == 50

    def test_missing_input_counts_as_failure(
        self, compressor, make_image, input_dir: Path, output_dir: Path
    ):
        result = compressor.process_images_command(
            [make_image("here.jpg"), input_dir / "gone.jpg"],
            "high",
            "jpeg",
            "remove_sensitive",
            None,
            output_dir,
        )

        assert (result["total_images"], result["successful"], result["failed"]) == (
            2,
            1,
            1,
        )

    def test_unknown_format_fails_fast(
        self, compressor, sample_jpegs: list[Path], tmp_path: Path
    ):
        """测试不支持的格式在处理前失败且不写任何文件"""
        target = tmp_path / "never"
        with pytest.raises(ValidationError, match="gif"):
            compressor.process_images_command(
                sample_jpegs, "medium", "gif", "keep_all", None, target
            )

        assert not target.exists()

    def test_unknown_privacy_fails_fast(
        self, compressor, sample_jpegs: list[Path], output_dir: Path
    ):
        with pytest.raises(ValidationError):
            compressor.process_images_command(
                sample_jpegs, "medium", "png", "partial", None, output_dir
            )
        assert list(output_dir.iterdir()) == []

    def test_empty_paths(self, compressor, tmp_path: Path):
        with pytest.raises(InternalError):
            compressor.process_images_command(
                [], "medium", "png", "keep_all", None, tmp_path / "out"
            )
        assert not (tmp_path / "out").exists()

    def test_output_dir_is_a_file(self, compressor, make_image, tmp_path: Path):
        """测试输出目录位置已被普通文件占用时报告保存失败"""
        blocker = tmp_path / "occupied"
        blocker.write_text("not a directory")

        with pytest.raises(SaveFailedError) as exc_info:
            compressor.process_images_command(
                [make_image("a.jpg")], "medium", "jpeg", "keep_all", None, blocker
            )

        assert exc_info.value.path == str(blocker)
        assert blocker.read_text() == "not a directory"

    def test_invalid_max_workers(self):
        with pytest.raises(ValidationError):
            ImageBatchCompressor(max_workers=0)

    def test_module_level_command(self, make_image, output_dir: Path):
        result = process_images_command(
            [make_image("module.png", (80, 60), format="PNG")],
            "Media",
            "PNG",
            "TODO",
            None,
            output_dir,
        )
        assert result["successful"] == 1


class TestMCPServer:
    """MCP服务器功能测试"""

    def test_mcp_server_imports(self):
        """测试MCP服务器模块导入"""
        from py_image_batch_compress.mcp_server import mcp

        assert mcp is not None

    def test_process_images_tool(self, sample_jpegs: list[Path], output_dir: Path):
        from py_image_batch_compress.mcp_server import process_images

        response = _tool_fn(process_images)(
            paths=[str(p) for p in sample_jpegs],
            output_dir=str(output_dir),
            quality="alta",
            format="jpg",
        )

        assert response["success"] is True
        assert response["result"]["successful"] == 3
        assert "3/3" in response["summary"]

    def test_process_images_tool_validation_error(self, output_dir: Path):
        from py_image_batch_compress.mcp_server import process_images

        response = _tool_fn(process_images)(
            paths=["a.jpg"], output_dir=str(output_dir), quality="ultra"
        )

        assert response["success"] is False
        assert response["error_type"] == "validation"

    def test_process_images_tool_empty_list(self, output_dir: Path):
        from py_image_batch_compress.mcp_server import process_images

        response = _tool_fn(process_images)(paths=[], output_dir=str(output_dir))

        assert response["success"] is False
        assert response["details"]["kind"] == "internal_error"

    def test_process_images_tool_output_dir_is_a_file(self, make_image, tmp_path):
        from py_image_batch_compress.mcp_server import process_images

        blocker = tmp_path / "occupied"
        blocker.write_text("not a directory")

        response = _tool_fn(process_images)(
            paths=[str(make_image("a.jpg"))], output_dir=str(blocker)
        )

        assert response["success"] is False
        assert response["error_type"] == "processing"
        assert response["details"]["kind"] == "save_failed"

    def test_get_orientation_tool(self, make_image):
        from py_image_batch_compress.mcp_server import get_orientation

        response = _tool_fn(get_orientation)(str(make_image("o.jpg", orientation=6)))

        assert response["success"] is True
        assert response["orientation"] == 6
        assert response["name"] == "ROTATE_90"
        assert response["swaps_dimensions"] is True

    def test_get_orientation_missing_file(self, tmp_path: Path):
        from py_image_batch_compress.mcp_server import get_orientation

        response = _tool_fn(get_orientation)(str(tmp_path / "none.jpg"))

        assert response["success"] is False
        assert response["error_type"] == "file"

    def test_get_orientation_unreadable(self, corrupt_image: Path):
        from py_image_batch_compress.mcp_server import get_orientation

        response = _tool_fn(get_orientation)(str(corrupt_image))

        assert response["success"] is False
        assert response["details"]["kind"] == "exif_read_error"


class TestEntryPoint:
    """命令行入口测试"""

    def test_version_flag(self, monkeypatch, capsys):
        from py_image_batch_compress.__main__ import main

        monkeypatch.setattr("sys.argv", ["py-image-batch-compress", "--version"])
        main()

        assert __version__ in capsys.readouterr().out
