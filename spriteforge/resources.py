"""Finds texture and animation files on disk and caches what is loaded from them."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from types import MappingProxyType
from typing import Any, Callable, Mapping

from PIL import Image

from .animation import AnimationClip, load_animation_clips

_log = logging.getLogger(__name__)


def _load_bitmap(path: Path) -> Image.Image:
    with Image.open(path) as image:
        return image.convert("RGBA")


class ResourceManager:
    """Indexes .json and .png files by file name and loads them on demand."""

    def __init__(self, bitmap_loader: Callable[[Path], Any] | None = None) -> None:
        self.resource_path = Path()
        self._bitmap_loader = bitmap_loader if bitmap_loader is not None else _load_bitmap
        self._json_paths: dict[str, Path] = {}
        self._png_paths: dict[str, Path] = {}
        self._textures: dict[str, Any] = {}
        self._clips: dict[str, AnimationClip] = {}

    @property
    def json_files(self) -> Mapping[str, Path]:
        return MappingProxyType(self._json_paths)

    @property
    def png_files(self) -> Mapping[str, Path]:
        return MappingProxyType(self._png_paths)

    def set_resource_path(self, path: str | os.PathLike[str]) -> None:
        self.resource_path = Path(path)

    def load_path(self) -> None:
        """Index every .json and .png file below the resource path by file name."""
        root = self.resource_path
        if not root.exists():
            raise FileNotFoundError(f"resource directory does not exist: {root}")
        if not root.is_dir():
            raise NotADirectoryError(f"resource path is not a directory: {root}")

        for path in sorted(root.rglob("*")):
            if not path.is_file():
                continue
            if path.suffix == ".json":
                index = self._json_paths
            elif path.suffix == ".png":
                index = self._png_paths
            else:
                continue
            _log.debug("found resource %s", path.name)
            index.setdefault(path.name, path)

    def load_texture(self, key: str) -> Any:
        """Return the bitmap for the .png file named key, loading it once."""
        try:
            path = self._png_paths[key]
        except KeyError:
            raise KeyError(f"unknown texture file: {key}") from None
        if key not in self._textures:
            self._textures[key] = self._bitmap_loader(path)
        return self._textures[key]

    def load_animation_clip(self, key: str, clip_tag: str) -> AnimationClip:
        """Return the clip tagged clip_tag from the .json file named key.

        The sprite sheet is the .png beside the JSON file with the same stem.
        """
        try:
            path = self._json_paths[key]
        except KeyError:
            raise KeyError(f"unknown animation file: {key}") from None

        if key not in self._textures:
            self._textures[key] = self._bitmap_loader(path.with_suffix(".png"))
        sheet = self._textures[key]

        clip_key = f"{key}_{clip_tag}"
        if clip_key not in self._clips:
            for clip in load_animation_clips(path):
                clip.bitmap = sheet
                self._clips[f"{key}_{clip.name}"] = clip

        try:
            return self._clips[clip_key]
        except KeyError:
            raise KeyError(f"no clip tagged {clip_tag!r} in {key}") from None

    def uninitialize(self) -> None:
        self._textures.clear()
        self._clips.clear()
        self._json_paths.clear()
        self._png_paths.clear()