"""
The pipeline that drives a complete conversion run, from the dependency check
to the final report.
"""

import argparse
import concurrent.futures
import shutil
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence

from loguru import logger

from ..config.conversion import (
    CLIP_DURATION_SECONDS,
    DEFAULT_MAX_WORKERS,
    DEFAULT_SCRATCH_PARENT,
    IMAGE_EXTENSIONS,
    SCRATCH_DIR_NAME,
)
from ..domain.exceptions import ScratchDirectoryException
from ..domain.job_models import ConversionJob, RunSummary
from ..domain.media import DEFAULT_RESOLUTIONS, ImageFile, Resolution
from ..services.conversion_service import ImageConverter
from ..services.discovery_service import ProcessImageFiles
from ..services.reporting_service import ConversionReporter
from ..services.transcoder import FFmpegTranscoder, Transcoder
from ..utils.dependency_checker import DependencyChecker


def build_jobs(images: Iterable[ImageFile], resolutions: Sequence[Resolution]) -> List[ConversionJob]:
    """One job per (image, resolution) pair, image-major, in the given orders."""
    return [ConversionJob(image, resolution) for image in images for resolution in resolutions]


class ImageConversionPipeline:
    """
    Orchestrates a whole run: dependency check, discovery, the job loop,
    scratch cleanup and the final report.

    Fatal problems (FFmpeg unavailable, no images, no scratch space) raise and
    end the run before any job starts. Job failures are only counted.
    """

    def __init__(
        self,
        project_dir: Path,
        args: Optional[argparse.Namespace] = None,
        resolutions: Sequence[Resolution] = DEFAULT_RESOLUTIONS,
        dependency_checker: Optional[DependencyChecker] = None,
        transcoder_factory: Optional[Callable[[Path, str], Transcoder]] = None,
        reporter: Optional[ConversionReporter] = None,
    ):
        self.project_dir: Path = project_dir.resolve()
        self.args = args if args is not None else argparse.Namespace()
        self.resolutions = tuple(resolutions)
        self.dependency_checker = dependency_checker or DependencyChecker()
        self.transcoder_factory = transcoder_factory or self._default_transcoder_factory
        self.reporter = reporter or ConversionReporter()

        temp_work_dir = getattr(self.args, "temp_work_dir", None)
        scratch_parent = Path(temp_work_dir) if temp_work_dir else DEFAULT_SCRATCH_PARENT
        self.scratch_dir: Path = scratch_parent / SCRATCH_DIR_NAME
        self.max_workers = max(1, getattr(self.args, "processes", None) or DEFAULT_MAX_WORKERS)

    def _default_transcoder_factory(self, scratch_dir: Path, ffmpeg_cmd: str) -> Transcoder:
        return FFmpegTranscoder(
            scratch_dir,
            ffmpeg_cmd=ffmpeg_cmd,
            timeout=getattr(self.args, "timeout", None),
        )

    # --- Scratch directory ---

    def create_scratch_dir(self):
        try:
            self.scratch_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ScratchDirectoryException(
                f"Unable to create temporary directory {self.scratch_dir}: {e}"
            ) from e
        logger.debug(f"Using scratch directory {self.scratch_dir}")

    def remove_scratch_dir(self):
        if not self.scratch_dir.exists():
            return
        try:
            shutil.rmtree(self.scratch_dir)
            logger.debug(f"Removed scratch directory {self.scratch_dir}")
        except OSError as e:
            logger.warning(f"Could not remove scratch directory {self.scratch_dir}: {e}")

    # --- Job loop ---

    def run_jobs(self, converter: ImageConverter, jobs: Sequence[ConversionJob], summary: RunSummary) -> RunSummary:
        """
        Runs every job and folds each result into `summary`.

        With a single worker the jobs run strictly in order. With more, they run
        on a thread pool; results are still folded here, on the calling thread.
        """
        if self.max_workers == 1:
            for job in jobs:
                summary.record(converter.convert(job))
            return summary

        logger.info(f"Using {self.max_workers} workers.")
        with concurrent.futures.ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = {executor.submit(converter.convert, job): job for job in jobs}
            for future in concurrent.futures.as_completed(futures):
                summary.record(future.result())
        return summary

    def run(self) -> RunSummary:
        ffmpeg_cmd = self.dependency_checker.ensure()

        logger.info(f"Starting image conversion in folder: {self.project_dir} ...")
        images = ProcessImageFiles(self.project_dir, IMAGE_EXTENSIONS).files
        logger.info(f"Found {len(images)} images for conversion.")

        jobs = build_jobs(images, self.resolutions)
        summary = RunSummary(total_files=len(images))

        self.create_scratch_dir()
        try:
            converter = ImageConverter(
                self.transcoder_factory(self.scratch_dir, ffmpeg_cmd),
                duration_seconds=CLIP_DURATION_SECONDS,
            )
            self.reporter.start()
            self.run_jobs(converter, jobs, summary)
            self.reporter.stop(summary)
        finally:
            self.remove_scratch_dir()

        self.reporter.report(summary)
        return summary

