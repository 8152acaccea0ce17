from pathlib import Path
from typing import Tuple

from filepress.core.exceptions import SizeReportError
from filepress.core.models import CompressionResult
from filepress.utils.format import format_size


# ============================================================================
# Size Reporter
# ============================================================================


class SizeReporter:
    """Measures and prints original vs. compressed file sizes."""

    @staticmethod
    def measure(original: Path, compressed: Path) -> Tuple[int, int]:
        """
        Read the byte length of both files.

        Raises:
            SizeReportError: If either file cannot be stat'ed
        """
        sizes = []
        for path in (original, compressed):
            try:
                sizes.append(path.stat().st_size)
            except OSError as error:
                raise SizeReportError(f"Cannot read size of {path}: {error}") from error
        return sizes[0], sizes[1]

    @staticmethod
    def report(result: CompressionResult) -> None:
        """Print the original and compressed sizes as two lines on stdout."""
        print(f"Original:   {result.original_size} bytes ({format_size(result.original_size)})")
        print(f"Compressed: {result.compressed_size} bytes ({format_size(result.compressed_size)})")
