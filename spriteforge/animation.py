"""Sprite-sheet animation clips and the loader for their JSON descriptions."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .render_info import Rect


@dataclass(slots=True)
class FrameData:
    """One frame of a sprite sheet: its pixel rectangle and how long it shows."""

    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0
    frame_index: int = 0
    duration: float = 0.0

    @property
    def width(self) -> float:
        return float(self.right - self.left)

    @property
    def height(self) -> float:
        return float(self.bottom - self.top)

    def to_rect(self) -> Rect:
        """The frame rectangle as floating-point edges."""
        return Rect(float(self.left), float(self.top), float(self.right), float(self.bottom))


@dataclass
class AnimationClip:
    """A named sequence of frames cut from one sprite sheet."""

    name: str = ""
    bitmap: Any = None
    frames: list[FrameData] = field(default_factory=list)
    total_duration: float = 0.0
    looping: bool = False

    def add_frame(self, frame: FrameData) -> None:
        self.frames.append(frame)
        self.total_duration += frame.duration


def load_animation_clips(json_path: str | os.PathLike[str]) -> list[AnimationClip]:
    """Read a sprite-sheet JSON file and return one clip per frame tag.

    Raises FileNotFoundError if the file is missing and ValueError if it is
    not valid JSON.
    """
    path = Path(json_path)
    with path.open(encoding="utf-8") as handle:
        document = json.load(handle)

    frames = document["frames"]
    if isinstance(frames, dict):
        frames = list(frames.values())

    clips: list[AnimationClip] = []
    for tag in document["meta"]["frameTags"]:
        clip = AnimationClip(str(tag["name"]))
        for index in range(int(tag["from"]), int(tag["to"]) + 1):
            entry = frames[index]
            box = entry["frame"]
            x, y = int(box["x"]), int(box["y"])
            clip.add_frame(
                FrameData(
                    left=x,
                    top=y,
                    right=x + int(box["w"]),
                    bottom=y + int(box["h"]),
                    frame_index=index,
                    duration=entry["duration"] / 1000.0,
                )
            )
        clips.append(clip)
    return clips