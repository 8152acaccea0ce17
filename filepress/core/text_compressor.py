import gzip
from pathlib import Path
from typing import BinaryIO, Iterator

from filepress.core.config import CompressionConfig
from filepress.core.exceptions import DecodeError, EncodeError
from filepress.utils.logger import get_logger


COPY_BUFSIZE = 64 * 1024


# ============================================================================
# Text Compressor
# ============================================================================


class TextCompressor:
    """Gzips a file as an opaque byte stream."""

    def __init__(self, config: CompressionConfig):
        self.config = config
        self.logger = get_logger()

    def compress(self, in_path: Path, out_path: Path) -> None:
        """
        Stream in_path through gzip into out_path.

        The content is never validated as text; any bytes round-trip.

        Args:
            in_path: Path to input file
            out_path: Path to the .gz output file
        """
        level = self.config.gzip_level
        self.logger.debug(f"Gzipping {in_path.name} -> {out_path.name} (level {level})")

        try:
            source = open(in_path, "rb")
        except OSError as error:
            raise DecodeError(f"Failed to read {in_path.name}: {error}") from error

        with source:
            try:
                with gzip.open(out_path, "wb", compresslevel=level) as target:
                    for chunk in self._read_chunks(source, in_path):
                        target.write(chunk)
            except OSError as error:
                raise EncodeError(f"Failed to write {out_path.name}: {error}") from error

    @staticmethod
    def _read_chunks(source: BinaryIO, in_path: Path) -> Iterator[bytes]:
        """Yield the source in blocks, reporting read failures as DecodeError."""
        while True:
            try:
                chunk = source.read(COPY_BUFSIZE)
            except OSError as error:
                raise DecodeError(f"Failed to read {in_path.name}: {error}") from error
            if not chunk:
                return
            yield chunk
