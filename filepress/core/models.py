from dataclasses import dataclass
from pathlib import Path


# ============================================================================
# Invocation Models
# ============================================================================


@dataclass(frozen=True)
class InputSpec:
    """A validated input file and its lowercased extension (without the dot)."""

    path: Path
    extension: str


@dataclass(frozen=True)
class CompressionResult:
    """Sizes of one input file and the compressed file written next to it."""

    input_path: Path
    output_path: Path
    file_format: str
    original_size: int
    compressed_size: int

    @property
    def space_saved(self) -> int:
        return self.original_size - self.compressed_size

    @property
    def compression_ratio(self) -> float:
        """Percentage of the original size saved (negative if the output grew)."""
        if self.original_size <= 0:
            return 0.0
        return self.space_saved / self.original_size * 100
