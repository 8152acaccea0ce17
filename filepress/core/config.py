from dataclasses import dataclass


# ============================================================================
# Configuration Classes
# ============================================================================

TEXT_COMPRESSION_LEVELS = {
    "fast": 1,
    "default": 6,
    "best": 9,
}

PDF_PRESETS = ["screen", "ebook", "printer"]


@dataclass
class CompressionConfig:
    """Configuration for single-file compression."""

    jpeg_quality: int = 70
    webp_quality: float = 75.0
    text_compression_level: str = "default"
    pdf_preset: str = "ebook"
    overwrite: bool = True
    cleanup_on_error: bool = True
    ghostscript_command: str = "gs"

    @property
    def gzip_level(self) -> int:
        """Numeric gzip level for the configured text compression level."""
        return TEXT_COMPRESSION_LEVELS[self.text_compression_level]


# ============================================================================
# Parameter Validator
# ============================================================================


class ParameterValidator:
    """Validates compression parameters."""

    @staticmethod
    def validate(config: CompressionConfig) -> None:
        """Validate all parameters in the configuration."""
        ParameterValidator.validate_jpeg_quality(config.jpeg_quality)
        ParameterValidator.validate_webp_quality(config.webp_quality)
        ParameterValidator.validate_text_compression_level(config.text_compression_level)
        ParameterValidator.validate_pdf_preset(config.pdf_preset)
        ParameterValidator.validate_ghostscript_command(config.ghostscript_command)

    @staticmethod
    def validate_jpeg_quality(jpeg_quality: int) -> None:
        """Validate JPEG quality value."""
        if isinstance(jpeg_quality, bool) or not isinstance(jpeg_quality, int):
            raise ValueError(f"jpeg_quality must be an integer, got {jpeg_quality!r}")
        if not (0 <= jpeg_quality <= 100):
            raise ValueError(f"jpeg_quality must be between 0 and 100, got {jpeg_quality}")

    @staticmethod
    def validate_webp_quality(webp_quality: float) -> None:
        """Validate WebP quality value."""
        if isinstance(webp_quality, bool) or not isinstance(webp_quality, (int, float)):
            raise ValueError(f"webp_quality must be a number, got {webp_quality!r}")
        if not (0 <= webp_quality <= 100):
            raise ValueError(f"webp_quality must be between 0 and 100, got {webp_quality}")

    @staticmethod
    def validate_text_compression_level(level: str) -> None:
        """Validate text compression level name."""
        valid_levels = list(TEXT_COMPRESSION_LEVELS)
        if level not in valid_levels:
            raise ValueError(f"text_compression_level must be one of {valid_levels}, got {level}")

    @staticmethod
    def validate_pdf_preset(pdf_preset: str) -> None:
        """Validate PDF preset."""
        if pdf_preset not in PDF_PRESETS:
            raise ValueError(f"pdf_preset must be one of {PDF_PRESETS}, got {pdf_preset}")

    @staticmethod
    def validate_ghostscript_command(command: str) -> None:
        if not command or not command.strip():
            raise ValueError("ghostscript_command must not be empty")
