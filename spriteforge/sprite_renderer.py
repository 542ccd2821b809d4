"""Component that describes how its object's sprite is drawn."""

from __future__ import annotations

from typing import Any

from .component import MonoBehaviour
from .render_info import Rect, RenderInfo
from .transform import Transform


class SpriteRenderer(MonoBehaviour):
    """Holds the bitmap, source and destination rectangles for a sprite."""

    def __init__(self) -> None:
        super().__init__()
        self._transform: Transform | None = None
        self._render_info = RenderInfo()

    def awake(self) -> None:
        self._transform = self.get_component(Transform)

    def _require_transform(self) -> Transform:
        if self._transform is None:
            raise RuntimeError("sprite renderer has no transform; call awake() first")
        return self._transform

    def set_bitmap(self, bitmap: Any) -> None:
        self._render_info.bitmap = bitmap

    @property
    def bitmap(self) -> Any:
        return self._render_info.bitmap

    def set_size(self, width: float, height: float) -> None:
        """Draw the sprite centred at the origin with the given size."""
        transform = self._require_transform()
        self._render_info.dest_rect = Rect(-width / 2.0, -height / 2.0, width / 2.0, height / 2.0)
        transform.set_sprite_size(width, height)

    def set_src_rect(self, rect: Rect) -> None:
        """Use a region of the bitmap; the destination is centred with the same size."""
        half_w = rect.width() / 2
        half_h = rect.height() / 2
        self._render_info.src_rect = rect
        self._render_info.dest_rect = Rect(-half_w, -half_h, half_w, half_h)

    @property
    def flip(self) -> bool:
        return self._render_info.is_flip

    @flip.setter
    def flip(self, value: bool) -> None:
        self._render_info.is_flip = value

    def get_render_info(self) -> RenderInfo:
        """Return the render info with its world matrix brought up to date."""
        self._render_info.world_tm = self._require_transform().world_matrix()
        return self._render_info