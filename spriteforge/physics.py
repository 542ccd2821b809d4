"""Pairwise overlap detection that raises trigger enter, stay and exit events."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import combinations
from typing import Iterable

from .colliders import Collider
from .gameobject import GameObject


@dataclass(frozen=True)
class CollisionPair:
    """Two colliders in a fixed order, so that (a, b) and (b, a) are the same pair."""

    a: Collider
    b: Collider

    @staticmethod
    def of(a: Collider, b: Collider) -> CollisionPair:
        if id(a) > id(b):
            a, b = b, a
        return CollisionPair(a, b)


class PhysicsManager:
    """Remembers which colliders overlapped last step to tell enter, stay and exit apart."""

    def __init__(self) -> None:
        self._previous: dict[CollisionPair, None] = {}

    @property
    def contacts(self) -> tuple[CollisionPair, ...]:
        """Pairs that overlapped in the last step."""
        return tuple(self._previous)

    def step(self, fixed_delta: float, game_objects: Iterable[GameObject]) -> None:
        colliders = [
            collider
            for go in game_objects
            if go.active and (collider := go.get_component(Collider)) is not None
        ]

        current: dict[CollisionPair, None] = {}
        for a, b in combinations(colliders, 2):
            if not a.is_collide(b):
                continue
            pair = CollisionPair.of(a, b)
            current[pair] = None
            if pair in self._previous:
                a.owner.broadcast_trigger_stay(b)
                b.owner.broadcast_trigger_stay(a)
            else:
                a.owner.broadcast_trigger_enter(b)
                b.owner.broadcast_trigger_enter(a)

        for pair in self._previous:
            if pair in current:
                continue
            pair.a.owner.broadcast_trigger_exit(pair.b)
            pair.b.owner.broadcast_trigger_exit(pair.a)

        self._previous = current