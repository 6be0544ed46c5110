"""Textual-based UI for the interval timer."""

import logging
import time
from typing import Callable, Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Vertical
from textual.timer import Timer
from textual.widgets import Footer, ProgressBar, Static

from .sequencer import Sequencer, Step, Tick
from .settings import Settings

logger = logging.getLogger(__name__)

# Seconds between two polls of the sequencer.
FRAME_INTERVAL = 0.1

# 3x5 block font, '#' is lit
FONT = {
    "0": ("###", "#.#", "#.#", "#.#", "###"),
    "1": (".#.", "##.", ".#.", ".#.", "###"),
    "2": ("###", "..#", "###", "#..", "###"),
    "3": ("###", "..#", "###", "..#", "###"),
    "4": ("#.#", "#.#", "###", "..#", "..#"),
    "5": ("###", "#..", "###", "..#", "###"),
    "6": ("###", "#..", "###", "#.#", "###"),
    "7": ("###", "..#", "..#", "..#", "..#"),
    "8": ("###", "#.#", "###", "#.#", "###"),
    "9": ("###", "#.#", "###", "..#", "###"),
    ":": (".", "#", ".", "#", "."),
    ".": (".", ".", ".", ".", "#"),
}
FONT_HEIGHT = 5
BLANK = ("...",) * FONT_HEIGHT


def format_remaining(seconds: float) -> str:
    """Format seconds as MM:SS.d, truncating to tenths."""
    millis = max(0, int(round(seconds * 1000)))
    minutes, millis = divmod(millis, 60_000)
    secs, millis = divmod(millis, 1000)
    return f"{minutes:02d}:{secs:02d}.{millis // 100}"


def render_big_time(text: str) -> str:
    """Render a MM:SS.d string in the block font."""
    lines = []
    for row in range(FONT_HEIGHT):
        cells = (FONT.get(char, BLANK)[row] for char in text)
        line = " ".join(cells)
        lines.append(line.replace("#", "██").replace(".", "  "))
    return "\n".join(lines)


def round_caption(tick: Tick) -> str:
    return f"Round {tick.round} | {tick.step.label}"


class RoundLabel(Static):
    """Round counter and step name."""

    def show(self, tick: Tick) -> None:
        self.update(round_caption(tick))


class BigTimer(Static):
    """Big block-digit countdown."""

    def show(self, tick: Tick) -> None:
        self.update(render_big_time(format_remaining(tick.remaining)))


class RoutineApp(App):
    """Interval timer application."""

    TITLE = "Routine"
    CSS_PATH = "routine.tcss"

    BINDINGS = [
        Binding("r", "restart", "Restart"),
        Binding("q", "quit", "Quit"),
        Binding("escape", "quit", "Quit", show=False, priority=True),
    ]

    def __init__(
        self,
        settings: Settings,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        super().__init__()
        self.clock = clock
        self.sequencer = Sequencer.from_settings(settings, clock())
        self.last_tick: Optional[Tick] = None
        self._frame_timer: Optional[Timer] = None

    def compose(self) -> ComposeResult:
        with Container(id="main"):
            with Vertical(id="timer-container"):
                yield RoundLabel(id="round-label")
                yield BigTimer(id="big-timer")
                yield ProgressBar(
                    id="progress", total=100, show_eta=False, show_percentage=False
                )
        yield Footer()

    def on_mount(self) -> None:
        self.refresh_frame()
        self._frame_timer = self.set_interval(FRAME_INTERVAL, self.refresh_frame)

    def refresh_frame(self) -> None:
        """Poll the sequencer once and paint the result."""
        previous: Optional[Step] = self.last_tick.step if self.last_tick else None
        tick = self.sequencer.advance(self.clock())
        self.last_tick = tick

        if tick.step is not previous:
            logger.info("%s", round_caption(tick))
            self.query_one("#timer-container").styles.background = tick.step.color

        self.query_one("#round-label", RoundLabel).show(tick)
        self.query_one("#big-timer", BigTimer).show(tick)
        self.query_one("#progress", ProgressBar).update(progress=tick.progress * 100)

    def action_restart(self) -> None:
        """Start over from Prepare at round 1."""
        self.sequencer.reset(self.clock())
        self.last_tick = None
        self.refresh_frame()


def run_ui(settings: Settings, clock: Callable[[], float] = time.monotonic) -> None:
    """Run the interval timer UI.

    Args:
        settings: Validated step durations.
        clock: Monotonic seconds source polled once per frame.
    """
    app = RoutineApp(settings, clock)
    app.run()
