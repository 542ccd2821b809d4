"""Game objects: named containers of components with a lifecycle."""

from __future__ import annotations

import logging
from typing import Any, Callable, TypeVar

from .component import Component, MonoBehaviour
from .transform import Transform

T = TypeVar("T", bound=Component)

_log = logging.getLogger(__name__)


class GameObject:
    """An object in a scene; always carries a Transform."""

    def __init__(self, name: str = "GameObject") -> None:
        self.name = name
        self.tag = "Untagged"
        self.active = True
        self._components: list[Component] = []
        self._iterating = False
        self._pending_add: list[Component] = []
        self._pending_remove: list[Component] = []
        self._transform = Transform()
        self._transform.owner = self

    @property
    def transform(self) -> Transform:
        return self._transform

    @property
    def components(self) -> tuple[Component, ...]:
        """Components other than the Transform, in the order they were added."""
        return tuple(self._components)

    def add_component(self, component_type: type[T], *args: Any, **kwargs: Any) -> T:
        """Create and attach a component; an existing one of that type is returned instead."""
        if not (isinstance(component_type, type) and issubclass(component_type, Component)):
            raise TypeError(f"{component_type!r} is not a Component type")

        existing = self.get_component(component_type)
        if existing is not None:
            _log.warning(
                "%s already has a %s; returning the existing one",
                self.name,
                component_type.__name__,
            )
            return existing

        component = component_type(*args, **kwargs)
        component.owner = self
        if self._iterating:
            self._pending_add.append(component)
        else:
            self._components.append(component)
        return component

    def get_component(self, component_type: type[T]) -> T | None:
        """Return the first component that is an instance of the type, or None."""
        if component_type is Transform:
            return self._transform  # type: ignore[return-value]
        for component in self._components:
            if isinstance(component, component_type):
                return component
        return None

    def remove_component(self, component: Component | None) -> None:
        """Detach a component; during a lifecycle pass this waits until the pass ends."""
        if component is None:
            return
        if self._iterating:
            self._pending_remove.append(component)
        else:
            self._components = [c for c in self._components if c is not component]

    def awake(self) -> None:
        self._dispatch(lambda mb: mb.awake())

    def start(self) -> None:
        self._dispatch(lambda mb: mb.start())

    def update(self, delta_time: float) -> None:
        self._dispatch(lambda mb: mb.update(delta_time))

    def fixed_update(self, fixed_delta: float) -> None:
        self._dispatch(lambda mb: mb.fixed_update(fixed_delta))

    def late_update(self, delta_time: float) -> None:
        self._dispatch(lambda mb: mb.late_update(delta_time))

    def broadcast_trigger_enter(self, other: Any) -> None:
        for mb in self._behaviours():
            mb.on_trigger_enter(other)

    def broadcast_trigger_stay(self, other: Any) -> None:
        for mb in self._behaviours():
            mb.on_trigger_stay(other)

    def broadcast_trigger_exit(self, other: Any) -> None:
        for mb in self._behaviours():
            mb.on_trigger_exit(other)

    def _behaviours(self) -> list[MonoBehaviour]:
        return [c for c in self._components if isinstance(c, MonoBehaviour)]

    def _dispatch(self, call: Callable[[MonoBehaviour], None]) -> None:
        self._iterating = True
        try:
            for component in self._components:
                if isinstance(component, MonoBehaviour):
                    call(component)
        finally:
            self._iterating = False
        self._flush_pending()

    def _flush_pending(self) -> None:
        self._components.extend(self._pending_add)
        self._pending_add.clear()
        for dead in self._pending_remove:
            self._components = [c for c in self._components if c is not dead]
        self._pending_remove.clear()