"""
Provides the service that discovers the images to convert.

Discovery is shallow: only regular files directly inside the source
directory are considered, never its subdirectories, and only those whose
extension is one of the accepted image extensions (case-insensitive).
"""

from pathlib import Path
from typing import Iterable, Optional, Tuple

from loguru import logger

from ..config.conversion import IMAGE_EXTENSIONS
from ..domain.exceptions import NoImagesFoundException
from ..domain.media import ImageFile
from ..utils.format_utils import contains_any_extensions, normalize_extensions


class ProcessImageFiles:
    """
    Discovers the image files to be converted.

    Instantiating the class performs the scan. The result is sorted by path so
    that runs over the same directory always process files in the same order.

    Attributes:
        source_dir (Path): The directory that was scanned.
        extensions (set): The accepted extensions, lower-cased with a leading dot.
        files (Tuple[ImageFile, ...]): The discovered images, sorted by path.

    Raises:
        NoImagesFoundException: If the path is not a directory or holds no
                                matching image. An empty batch is a failed run.
    """

    files: Tuple[ImageFile, ...] = tuple()

    def __init__(self, path: Path, extensions: Iterable[str] = IMAGE_EXTENSIONS):
        self.extensions = normalize_extensions(extensions)
        source_dir = self._get_source_directory_from_path(path)
        if source_dir is None:
            raise NoImagesFoundException(path, f"Source directory does not exist or is not a directory: {path}")
        self.source_dir: Path = source_dir

        self.set_files_to_process()
        if not self.files:
            raise NoImagesFoundException(self.source_dir)

    @staticmethod
    def _get_source_directory_from_path(input_path: Path) -> Optional[Path]:
        """Resolves the input path to the directory to scan, or None if it is not one."""
        resolved_path = input_path.resolve()
        if not resolved_path.exists():
            logger.error(f"Input path does not exist: {resolved_path}")
            return None
        if not resolved_path.is_dir():
            logger.error(f"Input path {resolved_path} is not a directory.")
            return None
        return resolved_path

    def set_files_to_process(self):
        """Scans `source_dir` (non-recursive) and populates `self.files`."""
        matches = [
            ImageFile(entry)
            for entry in self.source_dir.iterdir()
            if self._is_regular_file(entry) and contains_any_extensions(entry, self.extensions)
        ]
        self.files = tuple(sorted(matches))
        logger.debug(f"Discovered {len(self.files)} image(s) in {self.source_dir}")
        for image in self.files:
            logger.trace(f"  {image.filename}")

    @staticmethod
    def _is_regular_file(entry: Path) -> bool:
        # Symlinks are skipped even when they point at an image.
        return entry.is_file() and not entry.is_symlink()
