"""
Command-line entry point: ``filepress <file_path>``.
"""

import argparse
import sys
import time
from typing import List, NoReturn, Optional

from filepress import __version__
from filepress.core.config import CompressionConfig
from filepress.core.exceptions import FilePressError, UnsupportedFormatError, UsageError
from filepress.core.file_compressor import FileCompressor
from filepress.core.resolver import ArgumentResolver
from filepress.services.size_reporter import SizeReporter
from filepress.utils.format import format_duration
from filepress.utils.logger import get_logger


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def create_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="filepress",
        description="Compress a PNG, JPEG, WebP, text or PDF file into a sibling output file.",
        epilog=(
            "Output naming: photo.png -> photo_compressed.png, scan.jpeg -> scan_compressed.jpg, "
            "notes.txt -> notes.txt.gz, doc.pdf -> doc_compressed.pdf (requires Ghostscript)."
        ),
    )
    parser.add_argument("file_path", help="File to compress")
    parser.add_argument(
        "--no-overwrite",
        action="store_true",
        help="Fail instead of replacing an existing output file",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "NOTICE", "WARNING", "ERROR"],
        help="Console log level (default: WARNING)",
    )
    parser.add_argument(
        "--log-dir",
        default=None,
        help="Also write a detailed log file into this directory",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run filepress.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

    Returns:
        Process exit code
    """
    parser = create_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError as error:
        parser.print_usage(sys.stderr)
        print(f"{parser.prog}: error: {error}", file=sys.stderr)
        return error.exit_code

    logger = get_logger()
    logger.configure(log_level=args.log_level, log_dir=args.log_dir)

    config = CompressionConfig(overwrite=not args.no_overwrite)
    start_time = time.perf_counter()

    try:
        input_spec = ArgumentResolver.resolve(args.file_path)
        result = FileCompressor(config).compress(input_spec)
    except UnsupportedFormatError as error:
        # Shown regardless of --log-level; nothing else is printed for this case
        print(str(error), file=sys.stderr)
        logger.debug(f"Skipped {args.file_path}: {error}")
        return error.exit_code
    except FilePressError as error:
        logger.error(str(error))
        logger.debug("Failure details", exc_info=True)
        return error.exit_code
    except ValueError as error:
        logger.error(str(error))
        return 1

    SizeReporter.report(result)
    print(f"Done in {format_duration(time.perf_counter() - start_time)}")
    return 0
