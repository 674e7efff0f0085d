"""
Services Package for the Image to MVI converter.

This package contains the "service layer" of the application. A service is a
class designed to perform one high-level task. Services sit between the pipeline
(the "when" and "in which order") and the domain models and external tools
(the "what" and "with what").

- **Discovery (`ProcessImageFiles`):** finds the images to convert in the target
  directory.
- **Transcoding (`Transcoder`, `FFmpegTranscoder`):** the seam to the external
  media tool; resizes stills and encodes looping clips.
- **Conversion (`ImageConverter`):** runs one (image, resolution) job through
  resize, encode and finalize, and turns the outcome into a `ConversionResult`.
- **Reporting (`ConversionReporter`):** times the job loop and emits the final
  summary.
"""
from .conversion_service import ImageConverter
from .discovery_service import ProcessImageFiles
from .reporting_service import ConversionReporter
from .transcoder import FFmpegTranscoder, Transcoder

__all__ = [
    "ConversionReporter",
    "FFmpegTranscoder",
    "ImageConverter",
    "ProcessImageFiles",
    "Transcoder",
]
