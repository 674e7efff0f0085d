"""
Image to MVI converter.

Batch-converts the JPEG and PNG images of a directory into 1-second looping
MPEG-1 clips at a fixed set of resolutions, named `<stem>_<W>x<H>.mvi`. All media
work is done by FFmpeg; this package discovers the inputs, runs FFmpeg for every
(image, resolution) pair, places the outputs and reports the results.

Subpackages:
    config: Static settings and the optional `config.user.yaml`.
    domain: Images, resolutions, jobs, results and exceptions.
    services: Discovery, transcoding, conversion and reporting.
    pipeline: The orchestration of a whole run.
    utils: Dependency checking, command execution and formatting helpers.
"""

__version__ = "1.0.0"
