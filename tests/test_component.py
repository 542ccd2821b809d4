import pytest

from spriteforge.component import Behaviour, Component, MonoBehaviour
from spriteforge.gameobject import GameObject
from spriteforge.transform import Transform


def test_new_component_has_no_owner():
    assert Component().owner is None


def test_get_component_without_owner_raises():
    with pytest.raises(RuntimeError):
        Component().get_component(Transform)


def test_add_component_without_owner_raises():
    with pytest.raises(RuntimeError):
        MonoBehaviour().add_component(MonoBehaviour)


def test_get_component_goes_through_owner():
    go = GameObject()
    comp = go.add_component(MonoBehaviour)
    assert comp.get_component(Transform) is go.transform


def test_add_component_goes_through_owner():
    class Extra(MonoBehaviour):
        pass

    go = GameObject()
    comp = go.add_component(MonoBehaviour)
    extra = comp.add_component(Extra)
    assert go.get_component(Extra) is extra
    assert extra.owner is go


def test_behaviour_enabled_by_default_and_toggles():
    b = Behaviour()
    assert b.enabled is True
    b.disable()
    assert b.enabled is False
    b.enable()
    assert b.enabled is True


def test_hooks_can_be_overridden_selectively():
    class OnlyUpdate(MonoBehaviour):
        def __init__(self):
            super().__init__()
            self.seen = []

        def update(self, delta_time):
            self.seen.append(delta_time)

    go = GameObject()
    mb = go.add_component(OnlyUpdate)
    go.awake()
    go.start()
    go.update(0.5)
    go.late_update(0.25)
    go.fixed_update(0.02)
    assert mb.seen == [0.5]