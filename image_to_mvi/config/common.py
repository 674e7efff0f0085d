"""
Common configuration settings used throughout the application.

This module contains globally shared configuration settings and constants that are
used across the whole converter. It centralizes parameters for logging, the
location of the FFmpeg executable, the package feed used to install it, and the
job status values reported for every conversion.
It also handles the loading of user-specific configurations from an external
YAML file, allowing for easy customization without modifying the source code.
"""
from pathlib import Path
import yaml
from loguru import logger

# --- User-Defined Configuration ---
# This block loads user-specific settings from a 'config.user.yaml' file located
# at the project root. It allows users to point at a specific FFmpeg build or
# at a different package manager without hardcoding paths.

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
USER_CONFIG_PATH = PROJECT_ROOT / "config.user.yaml"

# The directory containing the FFmpeg executable. This is loaded from
# 'config.user.yaml'. If not provided or None, the application assumes the
# executable is available in the system's PATH.
MODULE_PATH: Path | None = None

# The package manager queried when FFmpeg is missing, and the package it installs.
# The defaults match the embedded Linux images this tool was written for.
PACKAGE_MANAGER: str = "opkg"
PACKAGE_NAME: str = "ffmpeg"


def load_user_config(config_path: Path = USER_CONFIG_PATH) -> dict:
    """
    Reads the optional user configuration file.

    Returns:
        The parsed mapping, or an empty dict if the file is missing, empty or
        cannot be parsed.
    """
    if not config_path.is_file():
        logger.debug(f"User config '{config_path}' not found. Relying on system PATH for executables.")
        return {}
    try:
        with config_path.open("r", encoding="utf-8") as f:
            user_config = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Could not load or parse '{config_path}': {e}")
        return {}
    if not isinstance(user_config, dict):
        logger.warning(f"Ignoring '{config_path}': expected a mapping at the top level.")
        return {}
    return user_config


_user_config = load_user_config()

_paths_config = _user_config.get("paths") or {}
if _paths_config.get("ffmpeg_dir"):
    MODULE_PATH = Path(_paths_config["ffmpeg_dir"])

_feed_config = _user_config.get("package_feed") or {}
if _feed_config.get("manager"):
    PACKAGE_MANAGER = str(_feed_config["manager"])
if _feed_config.get("package"):
    PACKAGE_NAME = str(_feed_config["package"])


# --- Logging Configuration ---

# The format string for the Loguru logger. It defines the structure and appearance
# of log messages, including timestamp, level, module name, and the message itself.
LOGGER_FORMAT = (
    "<green>{time:MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

# How much of FFmpeg's stderr is kept in a failed job's error message.
STDERR_TAIL_LENGTH = 500


# --- Job Status Constants ---
# Every conversion job ends in exactly one of these states. They are carried by
# `ConversionResult` and folded into the run summary.

JOB_STATUS_SUCCESS = "success"  # The .mvi file was written to its final location.
JOB_STATUS_RESIZE_FAILED = "resize_failed"  # FFmpeg could not scale the source image.
JOB_STATUS_ENCODE_FAILED = "encode_failed"  # FFmpeg could not encode the looping clip.
JOB_STATUS_FINALIZE_FAILED = "finalize_failed"  # The encoded clip could not be moved into place.

JOB_FAILURE_STATUSES = (
    JOB_STATUS_RESIZE_FAILED,
    JOB_STATUS_ENCODE_FAILED,
    JOB_STATUS_FINALIZE_FAILED,
)


# --- Exit Codes ---
EXIT_OK = 0
EXIT_FATAL = 1
EXIT_JOBS_FAILED = 2
