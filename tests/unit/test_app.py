"""Tests for the playback session lifecycle."""

from __future__ import annotations

import io
import signal

import pytest

from stickman.app import StickmanApp
from stickman.config import PlaybackConfig
from stickman.errors import EmptyDirectoryError, FrameLoadError
from stickman.loader import load_frame_set
from stickman.terminal import CLEAR_SCREEN, HIDE_CURSOR, SHOW_CURSOR, AnsiTerminal

pytestmark = pytest.mark.unit


def _app(directory, *, loops=1, stream=None, **kwargs) -> StickmanApp:
    playback = PlaybackConfig(anim_dir=str(directory), delay_ms=5)
    terminal = AnsiTerminal(stream if stream is not None else io.StringIO())
    return StickmanApp(playback, terminal=terminal, loops=loops, **kwargs)


def test_run_plays_requested_loops(write_frames):
    directory = write_frames({"a.txt": "A", "b.txt": "B", "c.txt": "C"})
    sleeps: list[float] = []
    app = _app(directory, loops=2, sleep=sleeps.append)

    result = app.run()

    assert result.ticks == 6
    assert result.frame_count == 3
    assert result.stopped_by_signal is False
    assert sleeps == [0.005] * 6


def test_terminal_is_set_up_and_restored(write_frames):
    directory = write_frames({"a.txt": "o"})
    stream = io.StringIO()

    _app(directory, stream=stream, sleep=lambda _: None).run()

    output = stream.getvalue()
    assert output.startswith(CLEAR_SCREEN + HIDE_CURSOR)
    assert "\033[1;1Ho" in output
    assert output.endswith(SHOW_CURSOR + CLEAR_SCREEN)


def test_load_failure_leaves_terminal_untouched(write_frames):
    directory = write_frames({})
    stream = io.StringIO()
    app = _app(directory, stream=stream)

    with pytest.raises(EmptyDirectoryError):
        app.run()

    assert stream.getvalue() == ""
    assert app.sequence is None


def test_unreadable_frame_is_reported(write_frames):
    directory = write_frames({"a.txt": "A"})
    (directory / "b.txt").symlink_to(directory / "missing.txt")

    with pytest.raises(FrameLoadError) as excinfo:
        _app(directory).run()

    assert excinfo.value.path.name == "b.txt"


def test_signal_stops_playback(write_frames):
    directory = write_frames({"a.txt": "A", "b.txt": "B"})

    def sleep(_: float) -> None:
        signal.raise_signal(signal.SIGINT)

    result = _app(directory, loops=0, sleep=sleep).run()

    assert result.ticks == 1
    assert result.stopped_by_signal is True


def test_signal_handlers_restored_after_run(write_frames):
    directory = write_frames({"a.txt": "A"})
    before = signal.getsignal(signal.SIGINT)

    _app(directory, sleep=lambda _: None).run()

    assert signal.getsignal(signal.SIGINT) is before


def test_frames_released_after_run(write_frames):
    directory = write_frames({"a.txt": "A"})
    app = _app(directory, sleep=lambda _: None)

    app.run()

    assert app.sequence is None


def test_debug_log_exported_on_failure(write_frames, tmp_path):
    directory = write_frames({})
    target = tmp_path / "debug.log"

    with pytest.raises(EmptyDirectoryError):
        _app(directory, debug_log_path=target).run()

    assert target.exists()


def test_signal_during_load_exits_cleanly(write_frames, monkeypatch):
    directory = write_frames({"a.txt": "A"})
    stream = io.StringIO()
    real_load = load_frame_set

    def interrupted_load(*args, **kwargs):
        signal.raise_signal(signal.SIGINT)
        return real_load(*args, **kwargs)

    monkeypatch.setattr("stickman.app.load_frame_set", interrupted_load)

    result = _app(directory, stream=stream, sleep=lambda _: None).run()

    assert result.ticks == 0
    assert result.frame_count == 1
    assert result.stopped_by_signal is True
    assert stream.getvalue() == ""


def test_debug_log_export_creates_data_dir(write_frames, monkeypatch, tmp_path):
    directory = write_frames({"a.txt": "A"})
    data_dir = tmp_path / "data"
    monkeypatch.setenv("STICKMAN_DATA_DIR", str(data_dir))

    _app(directory, sleep=lambda _: None, debug_log_path=tmp_path / "debug.log").run()

    assert data_dir.is_dir()
