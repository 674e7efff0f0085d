"""
This module provides utility functions for running external tools.

`run_cmd` wraps `subprocess.run` for the plain command lines used at startup
(version probes, the package feed). FFmpeg conversions themselves are built with
ffmpeg-python and executed by `run_ffmpeg_stream`.
"""

import os
import shlex
import subprocess
from typing import List, Optional, Tuple

import ffmpeg
from loguru import logger


def display_command(cmd_list: List[str]) -> str:
    """Joins a command list into a string suitable for logs."""
    if os.name == "nt":
        return subprocess.list2cmdline(cmd_list)
    return shlex.join(cmd_list)


def run_cmd(cmd_parts: List[str], show_cmd: bool = False) -> Optional[subprocess.CompletedProcess]:
    """
    Executes an external command and captures its output.

    This is a wrapper around Python's `subprocess.run` that adds logging and
    folds the "could not even start" cases into a single `None` return value.

    Args:
        cmd_parts: The command to execute as a list of strings (never run through a shell).
        show_cmd: If True, the command will be logged at the DEBUG level before execution.

    Returns:
        A `subprocess.CompletedProcess` object once the command ran, whatever its
        return code. Returns `None` if the command could not be started (e.g.
        `FileNotFoundError`).
    """
    cmd_list = list(cmd_parts)
    if not cmd_list:
        logger.error("run_cmd received an empty command list.")
        return None

    display_cmd_str = display_command(cmd_list)
    if show_cmd:
        logger.debug(f"Executing: {display_cmd_str}")

    try:
        result = subprocess.run(
            cmd_list,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            shell=False,
        )
    except FileNotFoundError:
        logger.debug(f"Command not found: '{cmd_list[0]}'")
        return None
    except OSError as e:
        logger.error(f"Could not execute '{display_cmd_str}': {e}")
        return None

    if result.stderr and result.returncode != 0:
        logger.debug(f"Command stderr (error, rc={result.returncode}): {result.stderr}")
    elif result.stdout:
        logger.trace(f"Command stdout: {result.stdout[:500]}")

    return result


def run_ffmpeg_stream(
    stream,
    ffmpeg_cmd: str = "ffmpeg",
    timeout: Optional[float] = None,
) -> Tuple[int, str]:
    """
    Runs an ffmpeg-python output stream to completion.

    Unlike `stream.run()`, this supports a timeout: the process is started with
    `run_async` and killed if it does not finish in time.

    Args:
        stream: An ffmpeg-python output node (the result of `.output(...)`).
        ffmpeg_cmd: The FFmpeg executable to invoke.
        timeout: Optional number of seconds after which FFmpeg is killed.

    Returns:
        A `(returncode, stderr)` tuple. A timed out run reports return code -1.

    Raises:
        FileNotFoundError: If the FFmpeg executable cannot be started.
    """
    args = stream.compile(cmd=ffmpeg_cmd)
    logger.trace(f"Executing: {display_command(args)}")

    process = ffmpeg.run_async(stream, cmd=ffmpeg_cmd, pipe_stdout=True, pipe_stderr=True, quiet=True)
    try:
        _, stderr = process.communicate(timeout=timeout)
    except subprocess.TimeoutExpired:
        process.kill()
        _, stderr = process.communicate()
        message = stderr.decode("utf-8", errors="replace") if stderr else ""
        return -1, f"timed out after {timeout}s\n{message}"

    return process.returncode, stderr.decode("utf-8", errors="replace") if stderr else ""
