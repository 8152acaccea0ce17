import shutil
import subprocess  # nosec B404
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional

from filepress.core.exceptions import BackendNotFoundError
from filepress.utils.logger import get_logger


# ============================================================================
# PDF Backend Interface
# ============================================================================


class PdfBackend(ABC):
    """Something that can rewrite a PDF into a smaller PDF."""

    @abstractmethod
    def rewrite(self, in_path: Path, out_path: Path, preset: str) -> bool:
        """
        Rewrite in_path into out_path using the given quality preset.

        Returns:
            True on success, False if the backend reported a failure
        """


# ============================================================================
# Ghostscript Backend
# ============================================================================


class GhostscriptBackend(PdfBackend):
    """Rewrites PDFs by running Ghostscript's pdfwrite device."""

    COMPATIBILITY_LEVEL = "1.4"

    def __init__(self, command: str = "gs"):
        """
        Initialize Ghostscript backend.

        Args:
            command: Ghostscript command name or path, looked up on PATH
        """
        self.command = command
        self.logger = get_logger()

    def find_ghostscript(self) -> Optional[str]:
        """Find the Ghostscript executable on PATH."""
        return shutil.which(self.command)

    def build_args(self, in_path: Path, out_path: Path, preset: str) -> List[str]:
        """
        Build Ghostscript arguments for PDF compression.

        Args:
            in_path: Input PDF path
            out_path: Output PDF path
            preset: PDFSETTINGS preset name (screen, ebook, printer)

        Returns:
            List of Ghostscript arguments (without the executable)
        """
        return [
            "-sDEVICE=pdfwrite",
            f"-dCompatibilityLevel={self.COMPATIBILITY_LEVEL}",
            f"-dPDFSETTINGS=/{preset}",
            "-dNOPAUSE",
            "-dQUIET",
            "-dBATCH",
            f"-sOutputFile={out_path}",
            str(in_path),
        ]

    def rewrite(self, in_path: Path, out_path: Path, preset: str) -> bool:
        """
        Run Ghostscript and wait for it to exit. No timeout is applied.

        Raises:
            BackendNotFoundError: If Ghostscript is not installed or cannot be started
        """
        gs_path = self.find_ghostscript()
        if gs_path is None:
            raise BackendNotFoundError(
                f"Ghostscript not found: '{self.command}' is not on PATH. Install Ghostscript to compress PDFs."
            )

        cmd = [gs_path] + self.build_args(in_path, out_path, preset)
        self.logger.debug(f"Ghostscript command: {' '.join(cmd)}")

        try:
            result = subprocess.run(  # nosec B603
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as error:
            raise BackendNotFoundError(f"Failed to launch Ghostscript ({gs_path}): {error}") from error

        if result.returncode != 0:
            self.logger.debug(f"Ghostscript exited with status {result.returncode}: {result.stderr.strip()}")
            return False
        return True
