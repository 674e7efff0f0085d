"""
This package contains the core domain models of the Image to MVI converter.

The domain layer represents the concepts of the conversion as this application
sees them, independent of the CLI, the pipeline and FFmpeg itself.

Modules:
    exceptions.py: Custom exception types, split into fatal precondition errors
                   and per-job conversion errors.
    media.py: `ImageFile`, a discovered input image, and `Resolution`, a target
              frame size.
    job_models.py: `ConversionJob`, `ConversionResult` and `RunSummary`, which
                   describe the work of a run and its outcome.
"""
