from pathlib import Path

from filepress.core.dispatcher import FileFormat


# ============================================================================
# File Processor
# ============================================================================

COMPRESSED_SUFFIXES = {
    FileFormat.PNG: ".png",
    FileFormat.JPEG: ".jpg",
    FileFormat.WEBP: ".webp",
    FileFormat.PDF: ".pdf",
}


class FileProcessor:
    """Handles output path management for compressed files."""

    @staticmethod
    def determine_output_path(source_file: Path, file_format: FileFormat) -> Path:
        """
        Determine the output path for a file.

        Text output keeps the full original name and appends ".gz"; every
        other format gets "<stem>_compressed" plus the format's extension.

        Args:
            source_file: Path to the source file
            file_format: Format the source file is compressed as

        Returns:
            Path to the output file, in the same directory as the source
        """
        if file_format is FileFormat.TEXT:
            out_path = source_file.with_name(source_file.name + ".gz")
        else:
            suffix = COMPRESSED_SUFFIXES[file_format]
            out_path = source_file.with_name(f"{source_file.stem}_compressed{suffix}")

        FileProcessor.ensure_sibling(source_file, out_path)
        return out_path

    @staticmethod
    def ensure_sibling(source_file: Path, out_path: Path) -> None:
        """Raise ValueError unless out_path is a different file in source_file's directory."""
        if out_path.parent != source_file.parent:
            raise ValueError(f"Output path {out_path} is not in the directory of {source_file}")
        if out_path == source_file:
            raise ValueError(f"Output path would overwrite the input file: {source_file}")

    @staticmethod
    def remove_partial_output(out_path: Path) -> bool:
        """Delete a leftover output file. Returns True if something was removed."""
        if out_path.exists():
            out_path.unlink()
            return True
        return False

    @staticmethod
    def temp_output_path(source_file: Path, out_path: Path) -> Path:
        """Sibling path a strategy writes to before the result replaces out_path."""
        temp_path = out_path.with_name(f"{out_path.stem}_tmp{out_path.suffix}")
        FileProcessor.ensure_sibling(source_file, temp_path)
        return temp_path

    @staticmethod
    def handle_overwrite(out_path: Path, temp_path: Path) -> None:
        """Move a finished temp file onto out_path, replacing any existing file."""
        temp_path.replace(out_path)
