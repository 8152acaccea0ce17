from pathlib import Path

from PIL import Image, UnidentifiedImageError

from filepress.core.config import CompressionConfig
from filepress.core.exceptions import DecodeError, EncodeError
from filepress.utils.logger import get_logger


# Modes the JPEG encoder accepts without conversion
JPEG_MODES = {"RGB", "L", "CMYK"}

# Single-channel modes holding 16-bit samples (16-bit PNGs open as one of these)
WIDE_GRAY_MODES = {"I", "I;16", "I;16B", "I;16L", "I;16N"}


def reduce_to_8bit(img: Image.Image) -> Image.Image:
    """Scale 16-bit grayscale samples down to 8-bit "L"; other modes pass through."""
    if img.mode not in WIDE_GRAY_MODES:
        return img
    return img.convert("I").point(lambda v: v * (1 / 256)).convert("L")


# ============================================================================
# Image Compressor
# ============================================================================


class ImageCompressor:
    """Base class for Pillow-backed image strategies.

    Subclasses convert the decoded image to the pixel layout they encode and
    supply the Pillow save parameters.
    """

    format_name = ""

    def __init__(self, config: CompressionConfig):
        """
        Initialize image compressor.

        Args:
            config: Compression configuration
        """
        self.config = config
        self.logger = get_logger()

    def compress(self, in_path: Path, out_path: Path) -> None:
        """
        Decode an image file and re-encode it to out_path.

        Args:
            in_path: Path to input image file
            out_path: Path to output image file

        Raises:
            DecodeError: If the input is not an image Pillow can read
            EncodeError: If the output cannot be encoded or written
        """
        self.logger.debug(f"Compressing {self.format_name}: {in_path.name} -> {out_path.name}")
        try:
            with Image.open(in_path) as img:
                img.load()
                converted = self._convert(reduce_to_8bit(img))
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as error:
            raise DecodeError(f"Failed to open {self.format_name} image {in_path.name}: {error}") from error

        save_args = self._save_args()
        self.logger.debug(f"{self.format_name} save args for {in_path.name}: {save_args}")
        try:
            converted.save(out_path, **save_args)
        except (OSError, ValueError, KeyError) as error:
            raise EncodeError(f"Failed to encode {self.format_name} image {out_path.name}: {error}") from error

    def _convert(self, img: Image.Image) -> Image.Image:
        raise NotImplementedError

    def _save_args(self) -> dict:
        raise NotImplementedError


class PngCompressor(ImageCompressor):
    """Lossless PNG re-encode at maximum zlib effort."""

    format_name = "PNG"

    def _convert(self, img: Image.Image) -> Image.Image:
        return img.convert("RGBA")

    def _save_args(self) -> dict:
        # Pillow picks a filter per scanline (adaptive) for RGBA images
        return {"format": "PNG", "optimize": True, "compress_level": 9}


class JpegCompressor(ImageCompressor):
    """Lossy JPEG re-encode at the configured quality."""

    format_name = "JPEG"

    def _convert(self, img: Image.Image) -> Image.Image:
        if img.mode in JPEG_MODES:
            return img.copy()
        return img.convert("RGB")

    def _save_args(self) -> dict:
        return {"format": "JPEG", "quality": self.config.jpeg_quality}


class WebpCompressor(ImageCompressor):
    """Lossy WebP encode from 8-bit RGB. Alpha is always dropped."""

    format_name = "WebP"

    def _convert(self, img: Image.Image) -> Image.Image:
        return img.convert("RGB")

    def _save_args(self) -> dict:
        return {"format": "WEBP", "quality": float(self.config.webp_quality), "lossless": False}
