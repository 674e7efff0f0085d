"""Tests for argument parsing and the exit status of `main()`."""

from pathlib import Path

import pytest
from loguru import logger

from image_to_mvi import cli
from image_to_mvi.domain.exceptions import ToolUnavailableException
from image_to_mvi.domain.job_models import RunSummary
from image_to_mvi.pipeline.conversion_pipeline import ImageConversionPipeline
from image_to_mvi.utils.dependency_checker import DependencyChecker


@pytest.fixture(autouse=True)
def reset_logger():
    # main() rebinds loguru to the stderr of the running test.
    yield
    logger.remove()


def test_defaults_match_a_bare_run() -> None:
    args = cli.get_args([])

    assert args.target_dir is None
    assert args.temp_work_dir is None
    assert args.processes == 1
    assert args.timeout is None
    assert args.fail_on_errors is False
    assert args.log_level == "INFO"


def test_temp_work_dir_is_created(tmp_path: Path) -> None:
    args = cli.get_args(["--temp-work-dir", str(tmp_path / "ram" / "disk")])

    assert args.temp_work_dir == (tmp_path / "ram" / "disk").resolve()
    assert args.temp_work_dir.is_dir()


@pytest.mark.parametrize("argv", [["--processes", "0"], ["--timeout", "-3"], ["--log-level", "LOUD"]])
def test_invalid_arguments_exit(argv) -> None:
    with pytest.raises(SystemExit):
        cli.get_args(argv)


def test_no_images_exits_with_status_1(image_dir: Path, monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    (image_dir / "readme.txt").write_text("hello")
    monkeypatch.setattr(DependencyChecker, "ensure", lambda self: "ffmpeg")

    status = cli.main([], default_target_dir=image_dir)

    assert status == 1
    assert "No images found for conversion." in capsys.readouterr().err
    assert list(image_dir.glob("*.mvi")) == []


def test_unavailable_tool_exits_with_status_1(image_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (image_dir / "photo.png").write_bytes(b"png")

    def unavailable(self):
        raise ToolUnavailableException("ffmpeg", "'ffmpeg' is not available in the feed")

    monkeypatch.setattr(DependencyChecker, "ensure", unavailable)

    assert cli.main(["--target-dir", str(image_dir)]) == 1


def _summary_with_errors(errors: int) -> RunSummary:
    summary = RunSummary(total_files=1)
    summary.success_count = 2 - errors
    summary.error_count = errors
    return summary


def test_partial_failure_still_exits_0(image_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(ImageConversionPipeline, "run", lambda self: _summary_with_errors(1))

    assert cli.main(["--target-dir", str(image_dir)]) == 0


def test_fail_on_errors_exits_2(image_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(ImageConversionPipeline, "run", lambda self: _summary_with_errors(1))

    assert cli.main(["--target-dir", str(image_dir), "--fail-on-errors"]) == 2


def test_fail_on_errors_without_errors_exits_0(image_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(ImageConversionPipeline, "run", lambda self: _summary_with_errors(0))

    assert cli.main(["--target-dir", str(image_dir), "--fail-on-errors"]) == 0


def test_target_dir_defaults_to_given_directory(image_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    seen = {}

    def fake_run(self):
        seen["project_dir"] = self.project_dir
        return _summary_with_errors(0)

    monkeypatch.setattr(ImageConversionPipeline, "run", fake_run)

    cli.main([], default_target_dir=image_dir)

    assert seen["project_dir"] == image_dir.resolve()
