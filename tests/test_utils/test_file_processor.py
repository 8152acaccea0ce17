"""
Tests for filepress.utils.file_processor module.
"""

from pathlib import Path

import pytest

from filepress.core.dispatcher import FileFormat
from filepress.utils.file_processor import FileProcessor


@pytest.mark.unit
class TestFileProcessor:
    """Tests for FileProcessor class."""

    @pytest.mark.parametrize(
        "name,file_format,expected",
        [
            ("photo.png", FileFormat.PNG, "photo_compressed.png"),
            ("photo.PNG", FileFormat.PNG, "photo_compressed.png"),
            ("scan.jpg", FileFormat.JPEG, "scan_compressed.jpg"),
            ("scan.jpeg", FileFormat.JPEG, "scan_compressed.jpg"),
            ("sticker.webp", FileFormat.WEBP, "sticker_compressed.webp"),
            ("report.pdf", FileFormat.PDF, "report_compressed.pdf"),
            ("notes.txt", FileFormat.TEXT, "notes.txt.gz"),
            ("archive.v2.txt", FileFormat.TEXT, "archive.v2.txt.gz"),
            ("my.holiday.png", FileFormat.PNG, "my.holiday_compressed.png"),
        ],
    )
    def test_determine_output_path_naming(self, temp_dir, name, file_format, expected):
        """Test the naming rule for every format."""
        out_path = FileProcessor.determine_output_path(temp_dir / name, file_format)

        assert out_path == temp_dir / expected

    @pytest.mark.parametrize("file_format", list(FileFormat))
    def test_output_is_sibling_and_never_the_input(self, temp_dir, file_format):
        """Test every format writes next to the input without replacing it."""
        source = temp_dir / "sub" / f"input.{file_format.value}"

        out_path = FileProcessor.determine_output_path(source, file_format)

        assert out_path.parent == source.parent
        assert out_path != source

    def test_already_compressed_name_still_differs(self, temp_dir):
        """Test re-compressing an output never targets itself."""
        source = temp_dir / "photo_compressed.png"

        out_path = FileProcessor.determine_output_path(source, FileFormat.PNG)

        assert out_path.name == "photo_compressed_compressed.png"

    def test_ensure_sibling_rejects_same_path(self):
        """Test ensure_sibling() refuses to overwrite the input."""
        with pytest.raises(ValueError, match="overwrite the input"):
            FileProcessor.ensure_sibling(Path("a/b.png"), Path("a/b.png"))

    def test_ensure_sibling_rejects_other_directory(self):
        """Test ensure_sibling() refuses a different directory."""
        with pytest.raises(ValueError, match="not in the directory"):
            FileProcessor.ensure_sibling(Path("a/b.png"), Path("c/b_compressed.png"))

    def test_remove_partial_output(self, temp_dir):
        """Test remove_partial_output() deletes an existing file."""
        partial = temp_dir / "x_compressed.pdf"
        partial.write_bytes(b"%PDF")

        assert FileProcessor.remove_partial_output(partial) is True
        assert not partial.exists()

    def test_remove_partial_output_missing(self, temp_dir):
        """Test remove_partial_output() is a no-op for a missing file."""
        assert FileProcessor.remove_partial_output(temp_dir / "none.pdf") is False

    @pytest.mark.parametrize(
        "name,out_name,expected",
        [
            ("photo.png", "photo_compressed.png", "photo_compressed_tmp.png"),
            ("notes.txt", "notes.txt.gz", "notes.txt_tmp.gz"),
            ("report.pdf", "report_compressed.pdf", "report_compressed_tmp.pdf"),
        ],
    )
    def test_temp_output_path(self, temp_dir, name, out_name, expected):
        """Test the temp path is a sibling distinct from both input and output."""
        temp_path = FileProcessor.temp_output_path(temp_dir / name, temp_dir / out_name)

        assert temp_path == temp_dir / expected
        assert temp_path not in (temp_dir / name, temp_dir / out_name)

    def test_handle_overwrite_replaces_existing(self, temp_dir):
        """Test handle_overwrite() moves the temp file over an existing output."""
        out_path = temp_dir / "photo_compressed.png"
        temp_path = temp_dir / "photo_compressed_tmp.png"
        out_path.write_bytes(b"old")
        temp_path.write_bytes(b"new")

        FileProcessor.handle_overwrite(out_path, temp_path)

        assert out_path.read_bytes() == b"new"
        assert not temp_path.exists()
