import json

import pytest

from spriteforge.animation import AnimationClip, FrameData, load_animation_clips
from spriteforge.render_info import Rect


def _sheet(frames, tags):
    return {"frames": frames, "meta": {"frameTags": tags}}


def _frame(x, y, w, h, duration):
    return {"frame": {"x": x, "y": y, "w": w, "h": h}, "duration": duration}


def test_frame_size_and_rect():
    frame = FrameData(left=10, top=20, right=42, bottom=68)
    assert frame.width == 32.0
    assert frame.height == 48.0
    assert frame.to_rect() == Rect(10.0, 20.0, 42.0, 68.0)


def test_add_frame_accumulates_duration():
    clip = AnimationClip("walk")
    clip.add_frame(FrameData(duration=0.25))
    clip.add_frame(FrameData(duration=0.5))
    assert len(clip.frames) == 2
    assert clip.total_duration == pytest.approx(0.25 + 0.5)
    assert clip.looping is False


def test_load_clips_from_list_frames(tmp_path):
    frames = [
        _frame(0, 0, 32, 32, 100),
        _frame(32, 0, 32, 32, 200),
        _frame(64, 0, 32, 32, 100),
    ]
    tags = [
        {"name": "TagEat", "from": 0, "to": 1},
        {"name": "TagWave", "from": 2, "to": 2},
    ]
    path = tmp_path / "sheet.json"
    path.write_text(json.dumps(_sheet(frames, tags)), encoding="utf-8")

    clips = load_animation_clips(path)

    assert [clip.name for clip in clips] == ["TagEat", "TagWave"]
    assert [len(clip.frames) for clip in clips] == [2, 1]
    second = clips[0].frames[1]
    assert (second.left, second.top, second.right, second.bottom) == (32, 0, 64, 32)
    assert second.duration == pytest.approx(200 / 1000)
    assert clips[1].frames[0].frame_index == 2


def test_load_clips_from_hash_frames(tmp_path):
    frames = {
        "a.png": _frame(5, 6, 7, 8, 100),
        "b.png": _frame(12, 6, 7, 8, 100),
    }
    tags = [{"name": "all", "from": 0, "to": 1}]
    path = tmp_path / "hash.json"
    path.write_text(json.dumps(_sheet(frames, tags)), encoding="utf-8")

    (clip,) = load_animation_clips(path)
    assert [f.left for f in clip.frames] == [5, 12]
    assert clip.frames[0].to_rect() == Rect(5.0, 6.0, 12.0, 14.0)


def test_total_duration_matches_frames(tmp_path):
    frames = [_frame(0, 0, 1, 1, d) for d in (100, 150, 250)]
    tags = [{"name": "t", "from": 0, "to": 2}]
    path = tmp_path / "d.json"
    path.write_text(json.dumps(_sheet(frames, tags)), encoding="utf-8")

    (clip,) = load_animation_clips(path)
    assert clip.total_duration == pytest.approx(sum(f.duration for f in clip.frames))


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_animation_clips(tmp_path / "nope.json")


def test_invalid_json_raises(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        load_animation_clips(path)