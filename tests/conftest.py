"""Shared fixtures for the converter test suite."""

from pathlib import Path

import pytest
from loguru import logger

from image_to_mvi.domain.exceptions import EncodeFailedException, ResizeFailedException
from image_to_mvi.services.transcoder import Transcoder


class FakeTranscoder(Transcoder):
    """Writes placeholder files instead of running FFmpeg, and records every call."""

    def __init__(self, scratch_dir: Path, fail_resize=(), fail_encode=()):
        self.scratch_dir = scratch_dir
        self.fail_resize = set(fail_resize)
        self.fail_encode = set(fail_encode)
        self.resize_calls = []
        self.encode_calls = []

    def resize(self, image, resolution):
        self.resize_calls.append((image.filename, resolution))
        if image.stem in self.fail_resize:
            raise ResizeFailedException(f"Failed to resize image {image.path}", source=image.path, stderr="bad input")
        still = self.scratch_dir / f"{image.stem}_{resolution.label}.{image.extension}"
        still.write_bytes(f"{resolution.width}x{resolution.height}".encode())
        return still

    def encode_loop(self, still, duration_seconds=1):
        self.encode_calls.append((still.name, duration_seconds))
        if still.stem.split("_")[0] in self.fail_encode:
            raise EncodeFailedException(f"Failed to convert resized image {still} to video", source=still)
        clip = self.scratch_dir / f"{still.stem}_{still.suffix.lstrip('.')}.mpg"
        clip.write_bytes(b"\x00\x00\x01\xba" + still.read_bytes())
        return clip


class StubDependencyChecker:
    def __init__(self, executable="ffmpeg", error=None):
        self.executable = executable
        self.error = error
        self.calls = 0

    def ensure(self):
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.executable


@pytest.fixture
def image_dir(tmp_path):
    directory = tmp_path / "images"
    directory.mkdir()
    return directory


@pytest.fixture
def scratch_dir(tmp_path):
    directory = tmp_path / "scratch"
    directory.mkdir()
    return directory


@pytest.fixture
def log_messages():
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
