"""Tests for ui.py helpers and the headless app."""

import pytest
from textual.color import Color

from routine.sequencer import StepKind
from routine.settings import Settings
from routine.ui import RoutineApp, format_remaining, render_big_time


class FakeClock:
    """Clock that only moves when told to."""

    def __init__(self, now: float = 500.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


class TestFormatRemaining:
    """Test MM:SS.d formatting."""

    @pytest.mark.parametrize(
        "seconds, expected",
        [
            (0, "00:00.0"),
            (0.999, "00:00.9"),
            (2.3, "00:02.3"),
            (30, "00:30.0"),
            (59.96, "00:59.9"),
            (61.25, "01:01.2"),
            (600, "10:00.0"),
        ],
    )
    def test_format(self, seconds, expected):
        """Seconds are shown as minutes, seconds and truncated tenths."""
        assert format_remaining(seconds) == expected

    def test_negative_clamped(self):
        """Negative input never shows a minus sign."""
        assert format_remaining(-0.5) == "00:00.0"


class TestRenderBigTime:
    """Test block digit rendering."""

    def test_five_lines(self):
        """Output is five rows of equal width."""
        lines = render_big_time("01:23.4").split("\n")
        assert len(lines) == 5
        assert len({len(line) for line in lines}) == 1

    def test_only_blocks_and_spaces(self):
        """Rendered text contains only blocks and spaces."""
        assert set(render_big_time("98:76.5")) <= {"█", " ", "\n"}

    def test_dot_is_bottom_row(self):
        """The decimal point is lit on the last row only."""
        lines = render_big_time(".").split("\n")
        assert lines[:-1] == ["  "] * 4
        assert lines[-1] == "██"


class TestRoutineApp:
    """Test the app against a fake clock."""

    @pytest.mark.asyncio
    async def test_paints_active_step(self):
        """Each frame paints the step the sequencer reports."""
        clock = FakeClock()
        app = RoutineApp(Settings(prep=5, work=10, rest=10), clock=clock)
        async with app.run_test() as pilot:
            await pilot.pause()
            assert app.last_tick.step.kind is StepKind.PREPARE
            container = app.query_one("#timer-container")
            assert container.styles.background == Color.parse("#0000cc")

            clock.now += 6
            app.refresh_frame()
            assert app.last_tick.step.kind is StepKind.WORK
            assert app.last_tick.round == 1
            assert container.styles.background == Color.parse("#cc0000")

    @pytest.mark.asyncio
    async def test_restart_binding(self):
        """r restarts the routine from Prepare."""
        clock = FakeClock()
        app = RoutineApp(Settings(prep=5, work=10, rest=10), clock=clock)
        async with app.run_test() as pilot:
            clock.now += 47
            app.refresh_frame()
            assert app.last_tick.round == 3

            await pilot.press("r")
            assert app.last_tick.step.kind is StepKind.PREPARE
            assert app.last_tick.round == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("key", ["q", "escape"])
    async def test_quit_bindings(self, key, monkeypatch):
        """q and Esc both exit the app."""
        app = RoutineApp(Settings(prep=5, work=10, rest=10), clock=FakeClock())
        exits = []
        async with app.run_test() as pilot:
            monkeypatch.setattr(app, "exit", lambda *args, **kwargs: exits.append(key))
            await pilot.press(key)
            await pilot.pause()
        assert exits == [key]
