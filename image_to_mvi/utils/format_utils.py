"""
This module contains helper functions for formatting data into human-readable strings
and for matching file extensions.
"""

from datetime import timedelta
from pathlib import Path
from typing import Iterable, Tuple


def split_minutes_seconds(td_object: timedelta) -> Tuple[int, int]:
    """
    Splits a duration into whole minutes and remaining whole seconds.

    Fractions of a second are truncated, so 61.9 seconds becomes (1, 1).
    Negative or invalid input is treated as zero.
    """
    if not isinstance(td_object, timedelta):
        return 0, 0
    total_seconds = max(0, int(td_object.total_seconds()))
    return divmod(total_seconds, 60)


def format_minutes_seconds(td_object: timedelta) -> str:
    """
    Formats a duration as "M minutes and S seconds".

    For example, a timedelta of 125 seconds becomes "2 minutes and 5 seconds".
    """
    minutes, seconds = split_minutes_seconds(td_object)
    return f"{minutes} minutes and {seconds} seconds"


def format_timedelta(td_object: timedelta) -> str:
    """
    Formats a timedelta object into a "HH:MM:SS" string.

    Returns "00:00:00" if the input is not a valid timedelta object.
    """
    if not isinstance(td_object, timedelta):
        return "00:00:00"

    total_seconds = int(td_object.total_seconds())
    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours:02}:{minutes:02}:{seconds:02}"


def normalize_extensions(extensions: Iterable[str]) -> set:
    """Lower-cases extensions and makes sure each one has a leading dot."""
    return {
        ext.lower() if ext.startswith(".") else f".{ext.lower()}"
        for ext in extensions
    }


def contains_any_extensions(file_path_obj: Path, extensions_to_check: Iterable[str]) -> bool:
    """
    Checks if a file's extension is present in a given list (case-insensitive).

    Args:
        file_path_obj: A `pathlib.Path` object for the file to check.
        extensions_to_check: File extensions, with or without the leading dot
                             (e.g. [".jpg", "png"]).

    Returns:
        True if the file's extension is in the list, False otherwise.
    """
    normalized_extensions = normalize_extensions(extensions_to_check)
    if not normalized_extensions:
        return False
    return file_path_obj.suffix.lower() in normalized_extensions
