import pytest

from spriteforge.animation import AnimationClip, FrameData
from spriteforge.animator import Animator
from spriteforge.gameobject import GameObject
from spriteforge.sprite_renderer import SpriteRenderer


def _clip(name, count, duration=0.1):
    clip = AnimationClip(name, bitmap=f"{name}-sheet")
    for index in range(count):
        clip.add_frame(
            FrameData(left=index * 16, top=0, right=index * 16 + 16, bottom=16,
                      frame_index=index, duration=duration)
        )
    return clip


@pytest.fixture
def rig():
    go = GameObject("player")
    renderer = go.add_component(SpriteRenderer)
    animator = go.add_component(Animator)
    go.awake()
    return renderer, animator


def test_entry_state_sets_bitmap_and_first_frame(rig):
    renderer, animator = rig
    clip = _clip("eat", 3)
    animator.add_clip("eat", clip)
    animator.set_entry_state("eat")

    assert animator.current_clip is clip
    assert renderer.bitmap == "eat-sheet"
    assert renderer.get_render_info().src_rect == clip.frames[0].to_rect()


def test_update_advances_after_duration(rig):
    renderer, animator = rig
    clip = _clip("eat", 3, duration=0.1)
    animator.add_clip("eat", clip)
    animator.set_entry_state("eat")

    animator.update(0.05)
    animator.update(0.06)
    assert animator.current_frame is clip.frames[0] or animator.current_frame == clip.frames[0]
    animator.update(0.0)
    assert animator.current_frame == clip.frames[1]
    assert renderer.get_render_info().src_rect == clip.frames[1].to_rect()


def test_update_wraps_to_first_frame(rig):
    _, animator = rig
    clip = _clip("wave", 2, duration=0.0)
    animator.add_clip("wave", clip)
    animator.set_entry_state("wave")

    animator.update(0.01)
    assert animator.current_frame == clip.frames[1]
    animator.update(0.01)
    assert animator.current_frame == clip.frames[0]


def test_change_state_switches_clip(rig):
    renderer, animator = rig
    eat, wave = _clip("eat", 2), _clip("wave", 4)
    animator.add_clip("eat", eat)
    animator.add_clip("wave", wave)
    animator.set_entry_state("eat")
    animator.change_state("wave")

    assert animator.current_clip is wave
    assert renderer.bitmap == "wave-sheet"


def test_add_clip_keeps_first_registration(rig):
    _, animator = rig
    first, second = _clip("a", 1), _clip("b", 1)
    animator.add_clip("idle", first)
    animator.add_clip("idle", second)
    animator.change_state("idle")
    assert animator.current_clip is first


def test_unknown_state_raises(rig):
    _, animator = rig
    with pytest.raises(KeyError):
        animator.change_state("missing")


def test_empty_clip_raises(rig):
    _, animator = rig
    animator.add_clip("empty", AnimationClip("empty"))
    with pytest.raises(ValueError):
        animator.change_state("empty")


def test_change_state_without_renderer_raises():
    go = GameObject()
    animator = go.add_component(Animator)
    go.awake()
    animator.add_clip("eat", _clip("eat", 1))
    with pytest.raises(RuntimeError):
        animator.change_state("eat")


def test_update_without_state_keeps_no_frame(rig):
    _, animator = rig
    animator.update(1.0)
    assert animator.current_frame is None