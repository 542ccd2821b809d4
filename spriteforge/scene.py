"""Scenes: collections of game objects driven through the lifecycle."""

from __future__ import annotations

from enum import Enum, auto
from typing import Any, Callable

from .gameobject import GameObject
from .matrix import Matrix3x2
from .physics import PhysicsManager
from .render_info import RenderInfo
from .sprite_renderer import SpriteRenderer


class ScenePhase(Enum):
    NONE = auto()
    AWAKE = auto()
    START = auto()
    UPDATE = auto()
    FIXED_UPDATE = auto()
    LATE_UPDATE = auto()
    RENDER = auto()


class Scene:
    """Owns game objects; additions and removals during a pass wait until it ends."""

    _enabled: bool = False
    viewport_size: tuple[int, int] | None = None

    def __init__(self, name: str = "NewScene", physics: PhysicsManager | None = None) -> None:
        self.name = name
        self.active = True
        self.camera: Any = None
        self.physics = physics if physics is not None else PhysicsManager()
        self._game_objects: list[GameObject] = []
        self._pending_add: list[GameObject] = []
        self._pending_destroy: list[GameObject] = []
        self._iterating = False
        self._phase = ScenePhase.NONE
        self._enabled = False
        self.viewport_size = None

    @property
    def game_objects(self) -> tuple[GameObject, ...]:
        return tuple(self._game_objects)

    @property
    def phase(self) -> ScenePhase:
        return self._phase

    @property
    def enabled(self) -> bool:
        """True between on_enable and the next on_disable."""
        return self._enabled

    def create_game_object(self, name: str = "GameObject") -> GameObject:
        go = GameObject(name)
        if self._iterating:
            self._pending_add.append(go)
        else:
            self._game_objects.append(go)
        return go

    def destroy(self, game_object: GameObject | None) -> None:
        """Mark an object for removal at the end of the next lifecycle pass."""
        if game_object is not None:
            self._pending_destroy.append(game_object)

    def awake(self) -> None:
        self._run(ScenePhase.AWAKE, lambda go: go.awake())

    def start(self) -> None:
        self._run(ScenePhase.START, lambda go: go.start())

    def update(self, delta_time: float) -> None:
        self._run(ScenePhase.UPDATE, lambda go: go.update(delta_time))

    def fixed_update(self, fixed_delta: float) -> None:
        self._run(ScenePhase.FIXED_UPDATE, lambda go: go.fixed_update(fixed_delta))
        self.physics.step(fixed_delta, self._game_objects)

    def late_update(self, delta_time: float) -> None:
        self._run(ScenePhase.LATE_UPDATE, lambda go: go.late_update(delta_time))

    def uninitialize(self) -> None:
        self._game_objects.clear()

    def build_render_queue(self) -> list[RenderInfo]:
        """Render info of every object that has a sprite renderer, in object order."""
        return [
            renderer.get_render_info()
            for go in self._game_objects
            if (renderer := go.get_component(SpriteRenderer)) is not None
        ]

    def register_camera(self, camera: Any) -> None:
        if self.camera is not None:
            raise RuntimeError("a scene cannot have two cameras")
        self.camera = camera

    def unregister_camera(self, camera: Any) -> None:
        if self.camera is camera:
            self.camera = None

    def get_render_tm(
        self, is_flip: bool = False, offset_x: float = 0.0, offset_y: float = 0.0
    ) -> Matrix3x2:
        """Matrix that turns a y-down sprite upright, mirrored if is_flip."""
        scale_x = -1.0 if is_flip else 1.0
        offset_x = -offset_x if is_flip else offset_x
        offset_y = -offset_y
        return Matrix3x2.scaling(scale_x, -1.0) @ Matrix3x2.translation(offset_x, offset_y)

    def on_enable(self) -> None:
        self._enabled = True

    def on_disable(self) -> None:
        self._enabled = False

    def on_resize(self, width: int, height: int) -> None:
        self.viewport_size = (width, height)

    def _run(self, phase: ScenePhase, call: Callable[[GameObject], None]) -> None:
        self._phase = phase
        self._iterating = True
        try:
            for go in list(self._game_objects):
                call(go)
        finally:
            self._iterating = False
        self._flush_pending()

    def _flush_pending(self) -> None:
        added = list(self._pending_add)
        self._game_objects.extend(added)
        self._pending_add.clear()

        if self._phase is ScenePhase.AWAKE:
            for go in added:
                go.awake()
        elif self._phase is ScenePhase.START:
            for go in added:
                go.start()

        for dead in self._pending_destroy:
            self._game_objects = [go for go in self._game_objects if go is not dead]
        self._pending_destroy.clear()