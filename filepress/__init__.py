"""
filepress - compress a single PNG, JPEG, WebP, text or PDF file.
"""

__version__ = "0.1.0"

# Package-level exports for convenience
from filepress.cli import main
from filepress.core.config import CompressionConfig, ParameterValidator
from filepress.core.dispatcher import FileFormat, FormatDispatcher
from filepress.core.exceptions import (
    BackendNotFoundError,
    DecodeError,
    EncodeError,
    ExternalProcessError,
    FilePressError,
    InputNotFoundError,
    OutputExistsError,
    SizeReportError,
    UnsupportedFormatError,
    UsageError,
)
from filepress.core.file_compressor import FileCompressor
from filepress.core.image_compressor import JpegCompressor, PngCompressor, WebpCompressor
from filepress.core.models import CompressionResult, InputSpec
from filepress.core.pdf_backend import GhostscriptBackend, PdfBackend
from filepress.core.pdf_compressor import PdfCompressor
from filepress.core.resolver import ArgumentResolver
from filepress.core.text_compressor import TextCompressor
from filepress.services.size_reporter import SizeReporter
from filepress.utils.file_processor import FileProcessor
from filepress.utils.format import format_duration, format_size


__all__ = [
    "ArgumentResolver",
    "BackendNotFoundError",
    "CompressionConfig",
    "CompressionResult",
    "DecodeError",
    "EncodeError",
    "ExternalProcessError",
    "FileCompressor",
    "FileFormat",
    "FilePressError",
    "FileProcessor",
    "FormatDispatcher",
    "GhostscriptBackend",
    "InputNotFoundError",
    "InputSpec",
    "JpegCompressor",
    "OutputExistsError",
    "ParameterValidator",
    "PdfBackend",
    "PdfCompressor",
    "PngCompressor",
    "SizeReportError",
    "SizeReporter",
    "TextCompressor",
    "UnsupportedFormatError",
    "UsageError",
    "WebpCompressor",
    "format_duration",
    "format_size",
    "main",
]
