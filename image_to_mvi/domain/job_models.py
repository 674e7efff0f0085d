"""
Defines the data models that describe conversion work and its outcome.

A `ConversionJob` is created for every (image, resolution) pair, converted into
exactly one `ConversionResult`, and every result is folded into the
`RunSummary` owned by the pipeline run. Nothing here is persisted.
"""

from datetime import timedelta
from pathlib import Path
from typing import Optional

from ..config.common import (
    JOB_FAILURE_STATUSES,
    JOB_STATUS_SUCCESS,
)
from .media import ImageFile, Resolution


class ConversionJob:
    """
    One unit of work: a single image converted to a single resolution.

    Attributes:
        image (ImageFile): The source image.
        resolution (Resolution): The target frame size.
        output_path (Path): Where the finished `.mvi` file is placed.
    """

    def __init__(self, image: ImageFile, resolution: Resolution):
        self.image = image
        self.resolution = resolution
        self.output_path: Path = image.output_path_for(resolution)

    @property
    def name(self) -> str:
        return f"{self.image.filename} @ {self.resolution.label}"

    def __repr__(self) -> str:
        return f"ConversionJob({self.image.filename!r}, {self.resolution.label!r})"


class ConversionResult:
    """
    The outcome of one `ConversionJob`.

    Results are never mutated after creation; the job loop only reads them when
    folding them into the summary.

    Attributes:
        job (ConversionJob): The job this result belongs to.
        status (str): One of the `JOB_STATUS_*` constants from `config.common`.
        error_message (Optional[str]): What went wrong, for failed jobs.
        output_path (Optional[Path]): The written `.mvi` file, for successful jobs.
    """

    def __init__(
        self,
        job: ConversionJob,
        status: str,
        error_message: Optional[str] = None,
        output_path: Optional[Path] = None,
    ):
        if status != JOB_STATUS_SUCCESS and status not in JOB_FAILURE_STATUSES:
            raise ValueError(f"Unknown job status: {status}")
        self.job = job
        self.status = status
        self.error_message = error_message
        self.output_path = output_path

    @classmethod
    def success(cls, job: ConversionJob, output_path: Path) -> "ConversionResult":
        return cls(job, JOB_STATUS_SUCCESS, output_path=output_path)

    @classmethod
    def failure(cls, job: ConversionJob, status: str, error_message: str) -> "ConversionResult":
        return cls(job, status, error_message=error_message)

    @property
    def succeeded(self) -> bool:
        return self.status == JOB_STATUS_SUCCESS

    def __repr__(self) -> str:
        return f"ConversionResult({self.job!r}, status={self.status!r})"


class RunSummary:
    """
    Aggregate outcome of one run.

    The summary is a local accumulator: the pipeline creates one per run, folds
    each `ConversionResult` into it with `record()`, and hands it to the
    reporter once the loop is done.
    """

    def __init__(self, total_files: int = 0):
        self.total_files = total_files
        self.success_count = 0
        self.error_count = 0
        self.elapsed: timedelta = timedelta(0)
        self.failed_jobs = []

    @property
    def jobs_attempted(self) -> int:
        return self.success_count + self.error_count

    @property
    def has_errors(self) -> bool:
        return self.error_count > 0

    def record(self, result: ConversionResult) -> "RunSummary":
        if result.succeeded:
            self.success_count += 1
        else:
            self.error_count += 1
            self.failed_jobs.append(result)
        return self

    def __repr__(self) -> str:
        return (
            f"RunSummary(total_files={self.total_files}, success={self.success_count}, "
            f"errors={self.error_count}, elapsed={self.elapsed})"
        )
