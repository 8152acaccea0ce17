from pathlib import Path
from typing import Dict, Optional

from filepress.core.config import CompressionConfig, ParameterValidator
from filepress.core.dispatcher import FileFormat, FormatDispatcher
from filepress.core.exceptions import EncodeError, FilePressError, OutputExistsError
from filepress.core.image_compressor import JpegCompressor, PngCompressor, WebpCompressor
from filepress.core.models import CompressionResult, InputSpec
from filepress.core.pdf_backend import GhostscriptBackend, PdfBackend
from filepress.core.pdf_compressor import PdfCompressor
from filepress.core.text_compressor import TextCompressor
from filepress.services.size_reporter import SizeReporter
from filepress.utils.file_processor import FileProcessor
from filepress.utils.logger import get_logger


# ============================================================================
# File Compressor
# ============================================================================


class FileCompressor:
    """Main orchestrator: dispatches one input file to its compression strategy."""

    def __init__(self, config: Optional[CompressionConfig] = None, pdf_backend: Optional[PdfBackend] = None):
        """
        Initialize file compressor with configuration.

        Args:
            config: Compression configuration (defaults used when None)
            pdf_backend: Backend for PDF rewriting (Ghostscript when None)
        """
        self.config = config or CompressionConfig()
        ParameterValidator.validate(self.config)

        self.logger = get_logger()
        self.file_processor = FileProcessor()
        self.pdf_backend = pdf_backend or GhostscriptBackend(self.config.ghostscript_command)
        self.compressors: Dict[FileFormat, object] = {
            FileFormat.PNG: PngCompressor(self.config),
            FileFormat.JPEG: JpegCompressor(self.config),
            FileFormat.WEBP: WebpCompressor(self.config),
            FileFormat.TEXT: TextCompressor(self.config),
            FileFormat.PDF: PdfCompressor(self.pdf_backend, self.config),
        }

    def compress(self, input_spec: InputSpec) -> CompressionResult:
        """
        Compress a single file next to the original.

        Args:
            input_spec: Validated input file

        Returns:
            CompressionResult with original and compressed sizes

        Raises:
            UnsupportedFormatError: If the extension has no strategy (nothing is written)
            FilePressError: Any other failure; an existing output file is left untouched
        """
        file_format = FormatDispatcher.dispatch(input_spec.extension)
        in_path = input_spec.path
        out_path = self.file_processor.determine_output_path(in_path, file_format)
        self.logger.debug(f"Dispatching {in_path.name} as {file_format.value} -> {out_path.name}")

        self._check_collision(out_path)

        # Strategies write to a temp sibling; an existing out_path is only
        # replaced once the new output is complete.
        temp_path = self.file_processor.temp_output_path(in_path, out_path)
        try:
            self.compressors[file_format].compress(in_path, temp_path)
            self._promote_output(temp_path, out_path)
        except FilePressError:
            self._cleanup_output(temp_path)
            raise

        original_size, compressed_size = SizeReporter.measure(in_path, out_path)
        self.logger.info(f"Compressed {in_path.name}: {original_size} -> {compressed_size} bytes")

        return CompressionResult(
            input_path=in_path,
            output_path=out_path,
            file_format=file_format.value,
            original_size=original_size,
            compressed_size=compressed_size,
        )

    def _check_collision(self, out_path: Path) -> None:
        if not out_path.exists():
            return
        if not self.config.overwrite:
            raise OutputExistsError(f"Output file already exists: {out_path}")
        self.logger.notice(f"Overwriting existing file: {out_path.name}")

    def _promote_output(self, temp_path: Path, out_path: Path) -> None:
        try:
            self.file_processor.handle_overwrite(out_path, temp_path)
        except OSError as error:
            raise EncodeError(f"Failed to finalize {out_path.name}: {error}") from error

    def _cleanup_output(self, out_path: Path) -> None:
        if not self.config.cleanup_on_error:
            return
        try:
            if self.file_processor.remove_partial_output(out_path):
                self.logger.debug(f"Removed partial output: {out_path.name}")
        except OSError as error:
            self.logger.warning(f"Could not remove partial output {out_path}: {error}")
