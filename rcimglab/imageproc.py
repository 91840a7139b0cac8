"""An image-filtering session: load a PGM image, filter a copy, save it."""

from __future__ import annotations

from os import PathLike
from typing import Optional, Union

from rcimglab.pgm import FilterMode, GrayImage, read_pgm, write_pgm

_LABELS = {
    FilterMode.BINARIZE: "이진화",
    FilterMode.INVERT: "반전",
    FilterMode.BRIGHTEN: "밝기 조절",
    FilterMode.SHARPEN: "샤프닝",
}

NO_FILTER_INFO = "적용 필터: 없음"


class SessionError(RuntimeError):
    """Raised when a session operation is attempted in the wrong state."""


def filter_label(mode: Union[FilterMode, int]) -> str:
    """Return the display name of a filter."""
    return _LABELS[FilterMode(mode)]


class ImageSession:
    """Holds an original image and, once a filter is applied, its processed copy."""

    def __init__(self) -> None:
        self.path: Optional[str] = None
        self.original: Optional[GrayImage] = None
        self.processed: Optional[GrayImage] = None
        self.filter_info = NO_FILTER_INFO

    @property
    def loaded(self) -> bool:
        """Whether an image has been loaded."""
        return self.original is not None

    def load(self, path: Union[str, PathLike]) -> GrayImage:
        """Load the original image and discard any processed result."""
        image = read_pgm(path)
        self.path = str(path)
        self.original = image
        self.processed = None
        self.filter_info = NO_FILTER_INFO
        return image

    def apply(self, mode: Optional[Union[FilterMode, int]]) -> GrayImage:
        """Filter a fresh copy of the original image."""
        if self.original is None:
            raise SessionError("이미지를 불러온 뒤 필터를 적용해주세요.")
        if mode is None:
            raise SessionError("처리 기법을 선택해주세요.")
        label = filter_label(mode)
        processed = self.original.copy()
        processed.apply(mode)
        self.processed = processed
        self.filter_info = "적용 필터: " + label
        return processed

    def save(self, path: Union[str, PathLike]) -> None:
        """Write the processed image to ``path`` as a PGM file."""
        if self.processed is None:
            raise SessionError("저장할 이미지가 없습니다. 먼저 필터를 적용해주세요.")
        try:
            write_pgm(self.processed, path)
        except OSError as exc:
            raise SessionError("이미지 저장에 실패했습니다.") from exc

    def reset(self) -> None:
        """Drop the processed image; the original stays loaded."""
        self.processed = None
        self.filter_info = NO_FILTER_INFO