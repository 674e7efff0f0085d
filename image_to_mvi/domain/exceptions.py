"""
Defines custom exception types for the Image to MVI converter.

These exceptions separate the two kinds of failure the converter knows about.
Fatal precondition errors (FFmpeg unavailable, nothing to convert, no scratch
space) propagate to the entry point and stop the run. Per-job errors (resize,
encode, finalize) are caught inside the job loop and turned into a failed
`ConversionResult`, so a single bad image never aborts the batch.

All custom exceptions inherit from the base `ImageToMviException`.
"""


class ImageToMviException(Exception):
    """Base class for all custom exceptions in the converter."""

    pass


# --- Startup / Precondition Exceptions ---
class DependencyException(ImageToMviException):
    """Base class for problems with external tools required at startup."""

    pass


class ToolUnavailableException(DependencyException):
    """
    Raised when a required tool is missing and cannot be installed.

    This covers a package that is absent from the feed, a failed installation,
    and a missing package manager. It is a one-shot check: nothing is retried.
    """

    def __init__(self, tool: str, reason: str):
        self.tool = tool
        self.reason = reason
        super().__init__(f"{tool} is not available: {reason}")


class DiscoveryException(ImageToMviException):
    """Base class for exceptions raised while looking for input images."""

    pass


class NoImagesFoundException(DiscoveryException):
    """
    Raised when the scanned directory contains no convertible image.

    An empty batch is a defined failure of the run, not a silent no-op.
    """

    def __init__(self, directory, message: str = "No images found for conversion."):
        self.directory = directory
        super().__init__(message)


class ScratchDirectoryException(ImageToMviException):
    """Raised when the scratch directory for intermediate files cannot be created."""

    pass


# --- Per-Job Conversion Exceptions ---
class ConversionException(ImageToMviException):
    """
    Base class for failures of a single (image, resolution) job.

    Attributes:
        source: The file the failing step was working on.
        stderr: Captured FFmpeg diagnostics, when the step ran FFmpeg.
    """

    def __init__(self, message: str, source=None, stderr: str = ""):
        self.source = source
        self.stderr = stderr
        super().__init__(message)


class ResizeFailedException(ConversionException):
    """Raised when FFmpeg cannot scale the source image to the target resolution."""

    pass


class EncodeFailedException(ConversionException):
    """Raised when FFmpeg cannot turn the resized still into a looping MPEG-1 clip."""

    pass


class FinalizeFailedException(ConversionException):
    """Raised when the encoded clip cannot be moved to its final `.mvi` location."""

    pass
