"""
Produces the end-of-run summary.
"""

from datetime import datetime
from typing import List, Optional

from loguru import logger

from ..domain.job_models import RunSummary
from ..utils.format_utils import format_minutes_seconds, format_timedelta


class ConversionReporter:
    """
    Times the job loop and reports the aggregate outcome of a run.

    `start()` is called just before the first job and `stop()` just after the
    last one; the elapsed time is stored on the summary.
    """

    def __init__(self):
        self.start_datetime: Optional[datetime] = None
        self.end_datetime: Optional[datetime] = None

    def start(self):
        self.start_datetime = datetime.now()
        self.end_datetime = None

    def stop(self, summary: RunSummary) -> RunSummary:
        self.end_datetime = datetime.now()
        if self.start_datetime is not None:
            summary.elapsed = self.end_datetime - self.start_datetime
        return summary

    @staticmethod
    def summary_lines(summary: RunSummary) -> List[str]:
        return [
            ">>> Conversion completed!",
            f"Total files processed: {summary.total_files}",
            f"Successful conversions: {summary.success_count}",
            f"Failed conversions: {summary.error_count}",
            f"Total time taken: {format_minutes_seconds(summary.elapsed)}.",
        ]

    def report(self, summary: RunSummary):
        for line in self.summary_lines(summary):
            logger.info(line)
        for result in summary.failed_jobs:
            logger.debug(f"  failed: {result.job.name} ({result.status})")
        logger.debug(f"Job loop took {format_timedelta(summary.elapsed)} for {summary.jobs_attempted} job(s).")
