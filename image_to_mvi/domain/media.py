"""
Defines the media value objects handled by the converter: input images and the
target resolutions they are converted to.
"""

from pathlib import Path
from typing import NamedTuple, Tuple

from ..config.conversion import OUTPUT_EXTENSION, RESOLUTIONS


class Resolution(NamedTuple):
    """A target frame size. FFmpeg scales to exactly these dimensions."""

    width: int
    height: int

    @property
    def label(self) -> str:
        return f"{self.width}x{self.height}"

    def __str__(self) -> str:
        return self.label


DEFAULT_RESOLUTIONS: Tuple[Resolution, ...] = tuple(Resolution(w, h) for w, h in RESOLUTIONS)


class ImageFile:
    """
    Represents a single discovered input image.

    Only the path is inspected; the image itself is never decoded here, that is
    left entirely to FFmpeg. The path is made absolute but symlinks are not
    followed, so the stem and directory are always those of the name that was
    discovered.

    Attributes:
        path (Path): The absolute path to the image.
        filename (str): The file name, including its extension.
        extension (str): The lower-cased extension without the leading dot (e.g. 'png').
        stem (str): The file name without its extension, used to name outputs.
    """

    def __init__(self, path: Path):
        self._path: Path = path.absolute()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def filename(self) -> str:
        return self._path.name

    @property
    def extension(self) -> str:
        return self._path.suffix.lower().lstrip(".")

    @property
    def stem(self) -> str:
        return self._path.stem

    @property
    def directory(self) -> Path:
        return self._path.parent

    def output_path_for(self, resolution: Resolution) -> Path:
        """The final `.mvi` path for this image at `resolution`, next to the original."""
        return self.directory / f"{self.stem}_{resolution.label}{OUTPUT_EXTENSION}"

    def __eq__(self, other):
        if not isinstance(other, ImageFile):
            return NotImplemented
        return self._path == other._path

    def __hash__(self):
        return hash(self._path)

    def __lt__(self, other: "ImageFile") -> bool:
        return self._path < other._path

    def __repr__(self) -> str:
        return f"ImageFile({str(self._path)!r})"
