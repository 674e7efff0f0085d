"""
Utilities Package for the Image to MVI converter.

This package contains helper modules that support the services and pipeline
without belonging to the conversion domain itself.

Modules:
    - dependency_checker.py: Verifies that FFmpeg can be invoked and installs it
      from the package feed when it is missing.
    - ffmpeg_utils.py: Runs external commands and ffmpeg-python streams.
    - format_utils.py: Formats durations and matches file extensions.
"""
