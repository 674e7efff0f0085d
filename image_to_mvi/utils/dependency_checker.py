"""
This module provides the DependencyChecker class, which makes sure the external
transcoding tool (FFmpeg) can be invoked before any conversion starts, installing
it from the package feed when it is missing.
"""
import shutil
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from ..config.common import MODULE_PATH, PACKAGE_MANAGER, PACKAGE_NAME
from ..domain.exceptions import ToolUnavailableException
from .ffmpeg_utils import run_cmd


class DependencyChecker:
    """
    Verifies that a required command-line tool is available.

    The lookup order is: the directory configured as `paths.ffmpeg_dir` in
    `config.user.yaml`, then the system PATH. If the tool is found in neither,
    the package feed is queried once and the package installed if it is listed.
    Any failure along that path raises `ToolUnavailableException`; there are no
    retries.

    Attributes:
        tool (str): The executable name to look for (e.g. 'ffmpeg').
        package (str): The feed package that provides the tool.
        package_manager (str): The feed command, e.g. 'opkg'.
        module_path (Optional[Path]): An explicit directory holding the executable.
    """

    def __init__(
        self,
        tool: str = "ffmpeg",
        package: str = PACKAGE_NAME,
        package_manager: str = PACKAGE_MANAGER,
        module_path: Optional[Path] = MODULE_PATH,
    ):
        self.tool = tool
        self.package = package
        self.package_manager = package_manager
        self.module_path = module_path

    @property
    def executable_name(self) -> str:
        return f"{self.tool}.exe" if sys.platform == "win32" else self.tool

    def find_executable(self) -> Optional[str]:
        """
        Returns the command or absolute path to invoke the tool, or None.

        A configured `module_path` takes priority; if the executable is not
        there, the system PATH is used instead.
        """
        if self.module_path and self.module_path.is_dir():
            configured_path = self.module_path / self.executable_name
            if configured_path.is_file():
                logger.debug(f"Using {self.tool} from configured path: '{configured_path}'")
                return str(configured_path)
            logger.warning(
                f"`ffmpeg_dir` is configured, but '{self.executable_name}' was not found there. "
                f"Falling back to system PATH."
            )
        return shutil.which(self.tool)

    def is_in_feed(self) -> bool:
        """Checks whether `<package_manager> list` offers the package."""
        result = run_cmd([self.package_manager, "list"])
        if result is None or result.returncode != 0:
            logger.warning(f"Could not list packages with '{self.package_manager}'.")
            return False
        prefix = f"{self.package} "
        return any(line.startswith(prefix) for line in result.stdout.splitlines())

    def install(self) -> bool:
        """
        Refreshes the feed index and installs the package.

        The result of the index refresh is not checked; only the install
        command's exit status decides success.
        """
        run_cmd([self.package_manager, "update"])
        result = run_cmd([self.package_manager, "install", self.package], show_cmd=True)
        if result is None:
            return False
        if result.returncode != 0:
            logger.error(f"'{self.package_manager} install {self.package}' failed:\n{result.stderr}")
            return False
        return True

    def log_version(self, executable: str):
        """Logs the first line of `<tool> -version`. A failing probe is only a warning."""
        result = run_cmd([executable, "-version"])
        if result is None or result.returncode != 0 or not result.stdout:
            logger.warning(f"Could not determine the {self.tool} version using '{executable}'.")
            return
        logger.info(f"{self.tool} version check successful: {result.stdout.splitlines()[0]}")

    def ensure(self) -> str:
        """
        Makes sure the tool can be invoked, installing it if necessary.

        Returns:
            The command or path to invoke the tool with.

        Raises:
            ToolUnavailableException: If the tool is missing and cannot be installed.
        """
        logger.info(f"Checking if {self.tool} is installed...")
        executable = self.find_executable()
        if executable:
            logger.info(f"{self.tool} is already installed.")
            self.log_version(executable)
            return executable

        logger.warning(f"{self.tool} is not installed. Attempting to install...")
        if shutil.which(self.package_manager) is None:
            raise ToolUnavailableException(
                self.tool, f"package manager '{self.package_manager}' was not found"
            )
        if not self.is_in_feed():
            raise ToolUnavailableException(self.tool, f"'{self.package}' is not available in the feed")

        logger.info(f"{self.package} is available in the feed. Installing...")
        if not self.install():
            raise ToolUnavailableException(self.tool, f"failed to install '{self.package}'")

        executable = self.find_executable()
        if not executable:
            raise ToolUnavailableException(
                self.tool, f"'{self.package}' was installed but '{self.tool}' is still not on PATH"
            )
        logger.success(f"{self.package} installed successfully.")
        self.log_version(executable)
        return executable
