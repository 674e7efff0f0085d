"""
Converts a single (image, resolution) job into a `.mvi` clip.

Each job runs three steps: resize the source to the exact target size, encode
the resized still as a looping MPEG-1 clip, and move the clip next to the
original image. A failing step abandons the job and is reported through the
returned `ConversionResult`; it is never raised to the caller, so one bad image
cannot stop the rest of the batch.
"""

import shutil
from pathlib import Path

from loguru import logger

from ..config.common import (
    JOB_STATUS_ENCODE_FAILED,
    JOB_STATUS_FINALIZE_FAILED,
    JOB_STATUS_RESIZE_FAILED,
)
from ..config.conversion import CLIP_DURATION_SECONDS
from ..domain.exceptions import ConversionException, FinalizeFailedException
from ..domain.job_models import ConversionJob, ConversionResult
from .transcoder import Transcoder


class ImageConverter:
    """
    Runs conversion jobs against a `Transcoder`.

    Attributes:
        transcoder (Transcoder): Performs the resize and encode steps.
        duration_seconds (int): Length of every produced clip.
    """

    def __init__(self, transcoder: Transcoder, duration_seconds: int = CLIP_DURATION_SECONDS):
        self.transcoder = transcoder
        self.duration_seconds = duration_seconds

    @staticmethod
    def finalize(clip: Path, output_path: Path) -> Path:
        """Moves the encoded scratch clip to its final location, replacing any older output."""
        try:
            shutil.move(str(clip), str(output_path))
        except OSError as e:
            raise FinalizeFailedException(
                f"Failed to move video {clip} to {output_path}: {e}", source=clip
            ) from e
        return output_path

    def convert(self, job: ConversionJob) -> ConversionResult:
        """
        Runs all three steps of `job` and returns its outcome.

        The status of a failed result names the step that failed. Unexpected
        errors are attributed to the step that was running when they happened.
        """
        failed_status = JOB_STATUS_RESIZE_FAILED
        try:
            still = self.transcoder.resize(job.image, job.resolution)
            failed_status = JOB_STATUS_ENCODE_FAILED
            clip = self.transcoder.encode_loop(still, self.duration_seconds)
            failed_status = JOB_STATUS_FINALIZE_FAILED
            output_path = self.finalize(clip, job.output_path)
        except ConversionException as e:
            logger.error(f"Error: {e}")
            if e.stderr:
                logger.debug(f"ffmpeg stderr for {job.name}:\n{e.stderr}")
            return ConversionResult.failure(job, failed_status, str(e))
        except Exception as e:
            logger.opt(exception=e).error(f"Unexpected error while converting {job.name}: {e}")
            return ConversionResult.failure(job, failed_status, f"{type(e).__name__}: {e}")

        logger.info(f"Created {output_path.name}")
        return ConversionResult.success(job, output_path)
