from pathlib import Path

from filepress.core.config import CompressionConfig
from filepress.core.exceptions import ExternalProcessError
from filepress.core.pdf_backend import PdfBackend
from filepress.utils.logger import get_logger


# ============================================================================
# PDF Compressor
# ============================================================================


class PdfCompressor:
    """Handles PDF compression by delegating to a PdfBackend."""

    def __init__(self, backend: PdfBackend, config: CompressionConfig):
        """
        Initialize PDF compressor.

        Args:
            backend: Backend that performs the rewrite
            config: Compression configuration
        """
        self.backend = backend
        self.config = config
        self.logger = get_logger()

    def compress(self, in_path: Path, out_path: Path) -> None:
        """
        Compress a PDF file.

        Raises:
            ExternalProcessError: If the backend reports a failure; out_path may
                be missing or invalid in that case
        """
        self.logger.debug(f"Compressing PDF: {in_path.name} -> {out_path.name} (preset {self.config.pdf_preset})")
        if not self.backend.rewrite(in_path, out_path, self.config.pdf_preset):
            raise ExternalProcessError(f"PDF compression failed for {in_path.name}: backend reported an error")
