"""Pure logic for the interval timer step sequencer."""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import NamedTuple, Tuple

from .settings import Settings

logger = logging.getLogger(__name__)

BLUE = "#0000cc"
RED = "#cc0000"
GREEN = "#00cc00"


class StepKind(Enum):
    """Step types."""
    PREPARE = auto()
    WORK = auto()
    REST = auto()


@dataclass(frozen=True)
class Step:
    """One timed segment of the routine."""
    kind: StepKind
    label: str
    color: str
    duration: float


class Tick(NamedTuple):
    """What the sequencer reports for a given instant."""
    round: int
    step: Step
    remaining: float

    @property
    def progress(self) -> float:
        """Progress through the active step (0.0 to 1.0)."""
        if self.step.duration <= 0:
            return 1.0
        return 1.0 - (self.remaining / self.step.duration)


class Sequencer:
    """Interval timer state machine.

    Cycles Prepare -> Work -> Rest -> Work -> ... and counts rounds. Time is
    never read here: every operation takes the current instant from the
    caller, in seconds on a monotonic scale.
    """

    def __init__(self, prep: float, work: float, rest: float, now: float):
        """Initialize the sequencer with Prepare active.

        Args:
            prep: Duration of the one-time prepare step in seconds.
            work: Duration of the work step in seconds.
            rest: Duration of the rest step in seconds.
            now: Current clock reading.

        A zero prepare duration is legal: the first advance() skips it.
        Work and rest must not both be zero, otherwise advance() never
        finds a step to land on.
        """
        self.steps: Tuple[Step, Step, Step] = (
            Step(StepKind.PREPARE, "Prepare", BLUE, prep),
            Step(StepKind.WORK, "Work", RED, work),
            Step(StepKind.REST, "Rest", GREEN, rest),
        )
        self.reset(now)

    @classmethod
    def from_settings(cls, settings: Settings, now: float) -> "Sequencer":
        """Build a sequencer from a Settings value."""
        return cls(settings.prep, settings.work, settings.rest, now)

    @property
    def step(self) -> Step:
        """Active step (as of the last advance)."""
        return self.steps[self.index]

    def reset(self, now: float) -> None:
        """Start the routine over from Prepare at round 1."""
        self.index = 0
        self.round = 1
        self.expires_at = now + self.steps[0].duration

    def advance(self, now: float) -> Tick:
        """Bring the state up to date with now and report it.

        An exact boundary (remaining == 0) is still the current step; the
        transition only fires once remaining goes negative. A zero-length
        step (an empty prepare at construction) is never reported. Any
        number of elapsed steps and rounds are unwound in one call, each
        new step starting where the previous one ended.
        """
        remaining = self.expires_at - now

        while remaining < 0 or self.step.duration == 0:
            self.index += 1
            if self.index >= len(self.steps):
                self.index = 0
                self.round += 1

            step = self.steps[self.index]
            # Prepare is only done once
            if step.kind is StepKind.PREPARE or step.duration == 0:
                continue

            self.expires_at += step.duration
            remaining = self.expires_at - now
            logger.debug(
                "round %d: %s for %.1fs", self.round, step.label, step.duration
            )

        return Tick(self.round, self.steps[self.index], remaining)
