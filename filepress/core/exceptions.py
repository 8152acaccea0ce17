"""
Error taxonomy for filepress.

Every error carries the process exit code the command line reports for it.
"""


class FilePressError(Exception):
    """Base exception for all filepress errors."""

    exit_code = 1


class UsageError(FilePressError):
    """Raised when the tool is invoked with the wrong arguments."""

    exit_code = 2


class InputNotFoundError(FilePressError):
    """Raised when the input path does not exist or is not a regular file."""

    exit_code = 3


class UnsupportedFormatError(FilePressError):
    """Raised when the input extension has no compression strategy."""

    # Not a failure: nothing is written and the process exits cleanly.
    exit_code = 0


class DecodeError(FilePressError):
    """Raised when the input cannot be read or parsed as the expected format."""

    exit_code = 4


class EncodeError(FilePressError):
    """Raised when the output cannot be encoded, written or finalized."""

    exit_code = 5


class ExternalProcessError(FilePressError):
    """Raised when the PDF backend reports a failure exit status."""

    exit_code = 6


class BackendNotFoundError(FilePressError):
    """Raised when the PDF backend command cannot be located or launched."""

    exit_code = 7


class OutputExistsError(FilePressError):
    """Raised when the output file exists and overwriting is disabled."""

    exit_code = 8


class SizeReportError(FilePressError):
    """Raised when a file size cannot be read for the size report."""

    exit_code = 9
