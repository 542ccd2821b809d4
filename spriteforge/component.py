"""Base classes for components that live on a game object."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

if TYPE_CHECKING:
    from .gameobject import GameObject

T = TypeVar("T", bound="Component")


class Component:
    """Something attached to a game object; the object is its owner."""

    def __init__(self) -> None:
        self.owner: GameObject | None = None

    def _require_owner(self) -> GameObject:
        if self.owner is None:
            raise RuntimeError(
                "component has no owner game object; look up components in awake(), "
                "not in the constructor"
            )
        return self.owner

    def add_component(self, component_type: type[T], *args: Any, **kwargs: Any) -> T:
        """Add a component of the given type to the owner."""
        return self._require_owner().add_component(component_type, *args, **kwargs)

    def get_component(self, component_type: type[T]) -> T | None:
        """Find a component of the given type on the owner."""
        return self._require_owner().get_component(component_type)


class Behaviour(Component):
    """A component that can be switched on and off."""

    def __init__(self) -> None:
        super().__init__()
        self.enabled = True

    def enable(self) -> None:
        self.enabled = True

    def disable(self) -> None:
        self.enabled = False


class MonoBehaviour(Behaviour):
    """A behaviour with lifecycle and trigger hooks.

    The default hooks only keep lifecycle bookkeeping: whether awake and start
    ran, the time each update kind has seen, and the colliders currently
    touching. Subclasses override the hooks they need.
    """

    awakened: bool = False
    started: bool = False
    elapsed: float = 0.0
    fixed_elapsed: float = 0.0
    late_elapsed: float = 0.0
    _contacts: frozenset = frozenset()

    @property
    def touching(self) -> frozenset:
        """Colliders reported as overlapping and not yet reported as leaving."""
        return self._contacts

    def awake(self) -> None:
        self.awakened = True

    def start(self) -> None:
        self.started = True

    def update(self, delta_time: float) -> None:
        self.elapsed += delta_time

    def fixed_update(self, fixed_delta: float) -> None:
        self.fixed_elapsed += fixed_delta

    def late_update(self, delta_time: float) -> None:
        self.late_elapsed += delta_time

    def on_trigger_enter(self, other: Any) -> None:
        self._contacts = self._contacts | {other}

    def on_trigger_stay(self, other: Any) -> None:
        if other not in self._contacts:
            self._contacts = self._contacts | {other}

    def on_trigger_exit(self, other: Any) -> None:
        self._contacts = self._contacts - {other}