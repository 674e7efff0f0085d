"""
Command-Line Interface (CLI) for the Image to MVI converter.

This module uses Python's `argparse` to define the command-line options and
provides `main()`, which configures logging, runs the conversion pipeline and
maps its outcome to a process exit status. Every option is optional; without
any, the converter behaves exactly like a bare run in the target directory.
"""
import argparse
import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger

from .config.common import (
    EXIT_FATAL,
    EXIT_JOBS_FAILED,
    EXIT_OK,
    LOGGER_FORMAT,
)
from .config.conversion import DEFAULT_MAX_WORKERS
from .domain.exceptions import (
    DependencyException,
    DiscoveryException,
    ScratchDirectoryException,
)
from .pipeline.conversion_pipeline import ImageConversionPipeline


def get_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parses command-line arguments for the converter.

    Args:
        argv: The arguments to parse. Defaults to `sys.argv[1:]`.

    Returns:
        argparse.Namespace: An object containing the parsed command-line
                            arguments as attributes.
    """
    parser = argparse.ArgumentParser(
        description="Convert JPEG/PNG images into 1-second looping MPEG-1 clips (.mvi)."
    )
    parser.add_argument(
        "--target-dir", type=str, default=None,
        help="Directory to scan for images. Defaults to the directory of the invoking script.",
    )
    parser.add_argument(
        "--temp-work-dir", type=str, default=None,
        help="Parent directory for the scratch folder. Defaults to the system temp directory.",
    )
    parser.add_argument(
        "--processes", type=int, default=DEFAULT_MAX_WORKERS,
        help="Number of conversion jobs to run at the same time.",
    )
    parser.add_argument(
        "--timeout", type=float, default=None,
        help="Kill an FFmpeg run that takes longer than this many seconds.",
    )
    parser.add_argument(
        "--fail-on-errors", action="store_true",
        help=f"Exit with status {EXIT_JOBS_FAILED} if any single conversion failed.",
    )
    parser.add_argument(
        "--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Set the logging level.",
    )

    args = parser.parse_args(argv)

    if args.processes < 1:
        parser.error("--processes must be at least 1")
    if args.timeout is not None and args.timeout <= 0:
        parser.error("--timeout must be a positive number of seconds")

    # Validate temp_work_dir if provided. If it doesn't exist, try to create it.
    if args.temp_work_dir:
        temp_dir_path = Path(args.temp_work_dir)
        if not temp_dir_path.is_dir():
            try:
                temp_dir_path.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                parser.error(
                    f"The specified temporary working directory '{args.temp_work_dir}' "
                    f"is not a valid directory and could not be created: {e}"
                )
        args.temp_work_dir = temp_dir_path.resolve()

    return args


def configure_logger(level: str = "INFO"):
    logger.remove()
    logger.add(sys.stderr, level=level, format=LOGGER_FORMAT)


def main(argv: Optional[List[str]] = None, default_target_dir: Optional[Path] = None) -> int:
    """
    Runs the converter and returns the process exit status.

    Status 0 means the run completed, even if some conversions failed (unless
    `--fail-on-errors` is given). Status 1 means the run could not start:
    FFmpeg is unavailable, there was nothing to convert, or no scratch space.
    """
    args = get_args(argv)
    configure_logger(args.log_level)
    logger.debug(f"Parsed arguments: {args}")

    if args.target_dir:
        project_path = Path(args.target_dir).resolve()
    else:
        project_path = (default_target_dir or Path.cwd()).resolve()

    pipeline = ImageConversionPipeline(project_path, args=args)
    try:
        summary = pipeline.run()
    except DependencyException as e:
        logger.error(f"{e}. Exiting.")
        return EXIT_FATAL
    except DiscoveryException as e:
        logger.error(str(e))
        return EXIT_FATAL
    except ScratchDirectoryException as e:
        logger.error(f"Error: {e}")
        return EXIT_FATAL

    if args.fail_on_errors and summary.has_errors:
        logger.warning(f"{summary.error_count} conversion(s) failed.")
        return EXIT_JOBS_FAILED
    return EXIT_OK


def run():
    """Console script entry point; scans the current working directory by default."""
    sys.exit(main())
