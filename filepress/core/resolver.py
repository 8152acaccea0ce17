from pathlib import Path
from typing import Union

from filepress.core.exceptions import InputNotFoundError
from filepress.core.models import InputSpec


# ============================================================================
# Argument Resolver
# ============================================================================


class ArgumentResolver:
    """Turns the command-line path argument into a validated InputSpec."""

    @staticmethod
    def resolve(file_path: Union[str, Path]) -> InputSpec:
        """
        Validate the input path and extract its extension.

        Args:
            file_path: Path given on the command line

        Returns:
            InputSpec with the lowercased extension ("" if there is none)

        Raises:
            InputNotFoundError: If the path is missing or is not a regular file
        """
        path = Path(file_path)
        if not path.exists():
            raise InputNotFoundError(f"File does not exist: {path}")
        if not path.is_file():
            raise InputNotFoundError(f"Not a regular file: {path}")

        return InputSpec(path=path, extension=path.suffix.lower().lstrip("."))
