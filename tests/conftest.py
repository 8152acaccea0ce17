"""
Shared pytest fixtures and configuration.
"""

import shutil
import tempfile
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from PIL import Image

from filepress.core.config import CompressionConfig
from filepress.core.pdf_backend import PdfBackend
from filepress.utils.logger import get_logger


@pytest.fixture(autouse=True)
def reset_logger():
    """Detach logger handlers so no test writes to another test's captured stream."""
    yield
    get_logger().configure(enable_console=False)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    # Cleanup
    if temp_path.exists():
        shutil.rmtree(temp_path)


@pytest.fixture
def config():
    """Create a default CompressionConfig."""
    return CompressionConfig()


@pytest.fixture
def sample_png(temp_dir):
    """Create a real 64x48 RGBA PNG with a gradient and partial transparency."""
    image_path = temp_dir / "photo.png"
    img = Image.new("RGBA", (64, 48))
    for x in range(64):
        for y in range(48):
            img.putpixel((x, y), (x * 4, y * 5, (x + y) % 256, 128 if x < 32 else 255))
    img.save(image_path, format="PNG")
    return image_path


@pytest.fixture
def sample_jpg(temp_dir):
    """Create a real 80x60 RGB JPEG."""
    image_path = temp_dir / "scan.jpg"
    img = Image.new("RGB", (80, 60))
    for x in range(80):
        for y in range(60):
            img.putpixel((x, y), (x * 3, y * 4, 200))
    img.save(image_path, format="JPEG", quality=95)
    return image_path


@pytest.fixture
def sample_webp(temp_dir):
    """Create a real 40x30 WebP that carries an alpha channel."""
    image_path = temp_dir / "sticker.webp"
    img = Image.new("RGBA", (40, 30), (10, 120, 230, 100))
    img.save(image_path, format="WEBP", lossless=True)
    return image_path


@pytest.fixture
def sample_text(temp_dir):
    """Create a highly redundant 10,000 byte text file."""
    text_path = temp_dir / "notes.txt"
    text_path.write_bytes(b"a" * 10000)
    return text_path


@pytest.fixture
def sample_pdf(temp_dir):
    """Create a file with a .pdf extension (content is never parsed by filepress)."""
    pdf_path = temp_dir / "report.pdf"
    pdf_path.write_bytes(b"%PDF-1.4\n" + b"0" * 2048 + b"\n%%EOF\n")
    return pdf_path


@pytest.fixture
def mock_pdf_backend():
    """Create a PdfBackend that writes a small output file and succeeds."""
    backend = MagicMock(spec=PdfBackend)

    def _rewrite(in_path, out_path, preset):
        Path(out_path).write_bytes(b"%PDF-1.4\nsmall\n%%EOF\n")
        return True

    backend.rewrite.side_effect = _rewrite
    return backend


@pytest.fixture
def failing_pdf_backend():
    """Create a PdfBackend that leaves a truncated file behind and reports failure."""
    backend = MagicMock(spec=PdfBackend)

    def _rewrite(in_path, out_path, preset):
        Path(out_path).write_bytes(b"%PDF-1.4\n")
        return False

    backend.rewrite.side_effect = _rewrite
    return backend
