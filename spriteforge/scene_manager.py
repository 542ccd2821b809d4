"""Registry of named scenes with one active scene."""

from __future__ import annotations

import logging

from .gameobject import GameObject
from .scene import Scene

_log = logging.getLogger(__name__)


class SceneManager:
    """Holds scenes by name and switches between them."""

    def __init__(self) -> None:
        self._scenes: dict[str, Scene] = {}
        self.active_scene: Scene | None = None

    def register_scene(self, name: str, scene: Scene) -> None:
        if name in self._scenes:
            raise ValueError(f"a scene named {name!r} is already registered")
        self._scenes[name] = scene

    def get_scene(self, name: str) -> Scene | None:
        return self._scenes.get(name)

    def load_scene(self, name: str) -> None:
        """Disable the current scene, then wake, start and enable the named one."""
        try:
            next_scene = self._scenes[name]
        except KeyError:
            raise KeyError(f"no scene named {name!r}") from None

        previous = self.active_scene
        _log.debug(
            "LoadScene: %s->%s",
            previous.name if previous is not None else "Nothing",
            next_scene.name,
        )
        if previous is not None:
            previous.on_disable()
        self.active_scene = next_scene
        next_scene.awake()
        next_scene.start()
        next_scene.on_enable()

    def uninitialize(self) -> None:
        if self.active_scene is not None:
            self.active_scene.uninitialize()


def instantiate(manager: SceneManager, name: str = "GameObject") -> GameObject:
    """Create a game object in the manager's active scene."""
    scene = manager.active_scene
    if scene is None:
        raise RuntimeError("no active scene to instantiate into")
    return scene.create_game_object(name)