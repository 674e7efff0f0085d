"""
This package contains the conversion pipeline of the Image to MVI converter.

The pipeline orchestrates a whole run: it checks that FFmpeg is available,
discovers the input images, runs every (image, resolution) job, cleans up the
scratch directory and hands the aggregate result to the reporter.
"""
