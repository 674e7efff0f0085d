"""
The transcoding seam of the converter.

`Transcoder` describes the two operations the converter needs from a media tool:
scaling a still image to an exact frame size, and turning a still into a short
looping clip. `FFmpegTranscoder` implements both with FFmpeg through the
ffmpeg-python graph builder. Each method returns the path it produced or raises
a typed `ConversionException`, so callers never inspect exit codes themselves.
"""

from pathlib import Path
from typing import Optional

import ffmpeg
from loguru import logger

from ..config.common import STDERR_TAIL_LENGTH
from ..config.conversion import (
    CLIP_DURATION_SECONDS,
    SCRATCH_VIDEO_EXTENSION,
    VIDEO_CODEC,
)
from ..domain.exceptions import EncodeFailedException, ResizeFailedException
from ..domain.media import ImageFile, Resolution
from ..utils.ffmpeg_utils import run_ffmpeg_stream


class Transcoder:
    """Interface for the external tool that does the actual media work."""

    def resize(self, image: ImageFile, resolution: Resolution) -> Path:
        """Scales `image` to exactly `resolution` and returns the scaled still."""
        raise NotImplementedError("Subclasses must implement resize().")

    def encode_loop(self, still: Path, duration_seconds: int = CLIP_DURATION_SECONDS) -> Path:
        """Encodes `still` into a looping clip of `duration_seconds` and returns it."""
        raise NotImplementedError("Subclasses must implement encode_loop().")


class FFmpegTranscoder(Transcoder):
    """
    FFmpeg implementation of `Transcoder`.

    All intermediate files are written to `scratch_dir`. Names are derived from
    the image stem, its format and the resolution, so distinct jobs never share
    a scratch file.

    Attributes:
        scratch_dir (Path): Directory for intermediate stills and clips.
        ffmpeg_cmd (str): The FFmpeg command or absolute path to invoke.
        timeout (Optional[float]): Seconds after which an FFmpeg run is killed.
        video_codec (str): The encoder used for the looping clip.
    """

    def __init__(
        self,
        scratch_dir: Path,
        ffmpeg_cmd: str = "ffmpeg",
        timeout: Optional[float] = None,
        video_codec: str = VIDEO_CODEC,
    ):
        self.scratch_dir = scratch_dir
        self.ffmpeg_cmd = ffmpeg_cmd
        self.timeout = timeout
        self.video_codec = video_codec

    # --- Command construction ---

    def resized_still_path(self, image: ImageFile, resolution: Resolution) -> Path:
        # The still keeps the source format.
        return self.scratch_dir / f"{image.stem}_{resolution.label}.{image.extension}"

    def clip_path(self, still: Path) -> Path:
        # photo.jpg and photo.png must not share a clip.
        return self.scratch_dir / f"{still.stem}_{still.suffix.lstrip('.').lower()}{SCRATCH_VIDEO_EXTENSION}"

    @staticmethod
    def build_resize_stream(source: Path, destination: Path, resolution: Resolution):
        # scale=W:H stretches to the exact size; aspect ratio is not preserved.
        return (
            ffmpeg
            .input(str(source))
            .output(str(destination), vf=f"scale={resolution.width}:{resolution.height}")
            .overwrite_output()
        )

    def build_encode_stream(self, still: Path, destination: Path, duration_seconds: int):
        return (
            ffmpeg
            .input(str(still), loop=1)
            .output(str(destination), vcodec=self.video_codec, t=duration_seconds)
            .overwrite_output()
        )

    # --- Execution ---

    def _run(self, stream, source: Path, destination: Path, exception_cls, action: str) -> Path:
        try:
            returncode, stderr = run_ffmpeg_stream(stream, ffmpeg_cmd=self.ffmpeg_cmd, timeout=self.timeout)
        except OSError as e:
            raise exception_cls(f"Failed to {action}: {e}", source=source) from e

        if returncode != 0:
            raise exception_cls(
                f"Failed to {action} (ffmpeg exit code {returncode}).",
                source=source,
                stderr=stderr[-STDERR_TAIL_LENGTH:],
            )
        if not destination.is_file():
            raise exception_cls(
                f"Failed to {action}: ffmpeg reported success but {destination} is missing.",
                source=source,
                stderr=stderr[-STDERR_TAIL_LENGTH:],
            )
        return destination

    def resize(self, image: ImageFile, resolution: Resolution) -> Path:
        destination = self.resized_still_path(image, resolution)
        logger.debug(f"Resizing {image.filename} to {resolution.label} -> {destination}")
        stream = self.build_resize_stream(image.path, destination, resolution)
        return self._run(
            stream, image.path, destination, ResizeFailedException,
            f"resize image {image.path} to resolution {resolution.label}",
        )

    def encode_loop(self, still: Path, duration_seconds: int = CLIP_DURATION_SECONDS) -> Path:
        destination = self.clip_path(still)
        logger.debug(f"Encoding {still.name} as a {duration_seconds}s {self.video_codec} loop -> {destination}")
        stream = self.build_encode_stream(still, destination, duration_seconds)
        return self._run(
            stream, still, destination, EncodeFailedException,
            f"convert resized image {still} to video",
        )
