"""
Configuration settings related to image conversion.

This module defines the accepted input extensions, the fixed resolution matrix,
the FFmpeg encoding parameters and the naming of scratch and output files.
"""
import tempfile
from pathlib import Path

# --- Input Settings ---
IMAGE_EXTENSIONS = (".jpg", ".jpeg", ".png")

# --- Resolution Matrix ---
# (width, height) pairs every discovered image is converted to.
RESOLUTIONS = (
    (1280, 720),
    (1920, 1080),
)

# --- Encoder Settings ---
VIDEO_CODEC = "mpeg1video"
CLIP_DURATION_SECONDS = 1
# The intermediate clip is an MPEG program stream; the extension selects the muxer.
SCRATCH_VIDEO_EXTENSION = ".mpg"

# --- Output Settings ---
# The final file is the same program stream under the repository's own extension.
OUTPUT_EXTENSION = ".mvi"

# --- Scratch Directory Settings ---
SCRATCH_DIR_NAME = "image_conversion"
DEFAULT_SCRATCH_PARENT = Path(tempfile.gettempdir())

# --- Worker Settings ---
DEFAULT_MAX_WORKERS = 1
