"""
Main entry point for the Image to MVI converter.

Running this script converts every JPEG/PNG image that sits next to it into
`<stem>_1280x720.mvi` and `<stem>_1920x1080.mvi`. Use `--target-dir` to convert
another directory instead; see `--help` for the remaining options.
"""

import sys
from pathlib import Path

from loguru import logger

from image_to_mvi.cli import main
from image_to_mvi.config.common import LOGGER_FORMAT


# Configure the logger for initial setup.
# The level is overridden by the command-line arguments once they are parsed.
logger.remove()
logger.add(sys.stderr, level="INFO", format=LOGGER_FORMAT)


if __name__ == "__main__":
    sys.exit(main(default_target_dir=Path(__file__).resolve().parent))
