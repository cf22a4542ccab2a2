"""Tests for the interactive loop with scripted keys and fake terminal."""

from __future__ import annotations

from contextlib import contextmanager
import unittest

from tfselect.loop import LoopIO, run_wizard_loop
from tfselect.picker.geometry import Geometry
from tfselect.ui_theme import PLAIN_THEME
from tfselect.wizard import Wizard

TARGETS = ["module.net", "resource.aws_instance.web"]


class _FakeTerminal:
    def __init__(self) -> None:
        self.entered = 0
        self.exited = 0

    @contextmanager
    def raw_mode(self):
        self.entered += 1
        try:
            yield
        finally:
            self.exited += 1


class _ScriptedKeys:
    def __init__(self, keys: list[str]) -> None:
        self.keys = list(keys)
        self.calls: list[tuple[int, int | None]] = []

    def __call__(self, fd: int, timeout_ms: int | None = None) -> str:
        self.calls.append((fd, timeout_ms))
        if not self.keys:
            raise AssertionError("loop read past the end of the script")
        return self.keys.pop(0)


class _Geometry:
    def __init__(self, sizes: list[Geometry]) -> None:
        self.sizes = list(sizes)
        self.current = self.sizes[0]

    def __call__(self) -> Geometry:
        if self.sizes:
            self.current = self.sizes.pop(0)
        return self.current


def _run(keys: list[str], geometry=None):
    frames: list[list[str]] = []
    terminal = _FakeTerminal()
    reader = _ScriptedKeys(keys)
    provider = geometry if geometry is not None else _Geometry([Geometry(80, 24)])
    wizard = Wizard(TARGETS, provider)
    io = LoopIO(read_key=reader, write_frame=frames.append, key_timeout_ms=5)
    result = run_wizard_loop(wizard, terminal, 7, PLAIN_THEME, io)
    return result, frames, terminal, reader


class RunWizardLoopTests(unittest.TestCase):
    def test_full_session_returns_action_and_targets(self) -> None:
        result, frames, terminal, reader = _run(["DOWN", " ", "ENTER", "DOWN", "ENTER"])

        self.assertEqual(result.action, "apply")
        self.assertEqual(result.targets, ["module.net"])
        self.assertEqual((terminal.entered, terminal.exited), (1, 1))
        self.assertEqual(reader.calls[0], (7, 5))
        self.assertEqual(frames[0][0], "Select targets")
        self.assertEqual(frames[-1][0], "Select action")

    def test_idle_timeouts_do_not_redraw(self) -> None:
        _result, frames, _terminal, _reader = _run(["", "", "ESC"])
        self.assertEqual(len(frames), 1)

    def test_cancel_returns_empty_result(self) -> None:
        result, _frames, terminal, _reader = _run([" ", "CTRL_C"])
        self.assertTrue(result.cancelled)
        self.assertEqual(result.targets, [])
        self.assertEqual(terminal.exited, 1)

    def test_resize_triggers_redraw(self) -> None:
        geometry = _Geometry([Geometry(80, 24), Geometry(80, 24), Geometry(30, 8)])
        _result, frames, _terminal, _reader = _run(["", "", "ESC"], geometry)
        self.assertEqual(len(frames), 2)

    def test_terminal_restored_when_handler_raises(self) -> None:
        terminal = _FakeTerminal()
        wizard = Wizard(TARGETS, _Geometry([Geometry(80, 24)]))

        def boom(_fd: int, timeout_ms: int | None = None) -> str:
            raise KeyboardInterrupt

        with self.assertRaises(KeyboardInterrupt):
            run_wizard_loop(wizard, terminal, 0, PLAIN_THEME, LoopIO(read_key=boom, write_frame=lambda _lines: None))
        self.assertEqual(terminal.exited, 1)


if __name__ == "__main__":
    unittest.main()
