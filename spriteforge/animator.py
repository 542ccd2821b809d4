"""Component that plays animation clips on its object's sprite renderer."""

from __future__ import annotations

from .animation import AnimationClip, FrameData
from .component import MonoBehaviour
from .sprite_renderer import SpriteRenderer


class Animator(MonoBehaviour):
    """Switches between named clips and steps through their frames over time."""

    def __init__(self) -> None:
        super().__init__()
        self._renderer: SpriteRenderer | None = None
        self._animations: dict[str, AnimationClip] = {}
        self._current_clip: AnimationClip | None = None
        self._frames: list[FrameData] = []
        self._frame_index = 0
        self._elapsed = 0.0

    @property
    def current_clip(self) -> AnimationClip | None:
        return self._current_clip

    @property
    def current_frame(self) -> FrameData | None:
        if not self._frames:
            return None
        return self._frames[self._frame_index]

    def awake(self) -> None:
        self._renderer = self.get_component(SpriteRenderer)

    def update(self, delta_time: float) -> None:
        """Advance to the next frame once the current one has shown long enough."""
        if not self._frames:
            return
        if self._frames[self._frame_index].duration <= self._elapsed:
            self._frame_index = (self._frame_index + 1) % len(self._frames)
            self._require_renderer().set_src_rect(self._frames[self._frame_index].to_rect())
            self._elapsed = 0.0
        self._elapsed += delta_time

    def add_clip(self, name: str, clip: AnimationClip) -> None:
        """Register a clip under name; an existing name keeps its first clip."""
        self._animations.setdefault(name, clip)

    def change_state(self, name: str) -> None:
        """Play the clip registered under name from its first frame."""
        try:
            clip = self._animations[name]
        except KeyError:
            raise KeyError(f"animation clip not found: {name}") from None
        if not clip.frames:
            raise ValueError(f"animation clip {name!r} has no frames")
        renderer = self._require_renderer()

        self._current_clip = clip
        renderer.set_bitmap(clip.bitmap)
        self._frames = list(clip.frames)
        self._frame_index = 0
        renderer.set_src_rect(self._frames[0].to_rect())

    def set_entry_state(self, name: str) -> None:
        self.change_state(name)

    def _require_renderer(self) -> SpriteRenderer:
        if self._renderer is None:
            raise RuntimeError("animator has no sprite renderer; add one and call awake() first")
        return self._renderer