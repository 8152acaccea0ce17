from enum import Enum
from typing import Dict, Optional

from filepress.core.exceptions import UnsupportedFormatError


# ============================================================================
# File Formats
# ============================================================================


class FileFormat(Enum):
    """Formats with a compression strategy."""

    PNG = "png"
    JPEG = "jpeg"
    WEBP = "webp"
    TEXT = "text"
    PDF = "pdf"


# ============================================================================
# Format Dispatcher
# ============================================================================


class FormatDispatcher:
    """Maps a file extension to the format whose strategy handles it."""

    EXTENSION_MAP: Dict[str, FileFormat] = {
        "png": FileFormat.PNG,
        "jpg": FileFormat.JPEG,
        "jpeg": FileFormat.JPEG,
        "pdf": FileFormat.PDF,
        "txt": FileFormat.TEXT,
        "webp": FileFormat.WEBP,
    }

    @classmethod
    def resolve(cls, extension: str) -> Optional[FileFormat]:
        """
        Look up the format for an extension.

        Args:
            extension: File extension, with or without a leading dot

        Returns:
            Matching FileFormat, or None if the extension is not supported
        """
        return cls.EXTENSION_MAP.get(extension.lower().lstrip("."))

    @classmethod
    def dispatch(cls, extension: str) -> FileFormat:
        """Like resolve(), but raises UnsupportedFormatError for unknown extensions."""
        file_format = cls.resolve(extension)
        if file_format is None:
            shown = f".{extension}" if extension else "(no extension)"
            raise UnsupportedFormatError(f"Unsupported file type: {shown}")
        return file_format
