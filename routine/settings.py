"""Command line settings for the interval timer."""

import argparse
from dataclasses import dataclass
from typing import NoReturn, Optional, Sequence

DEFAULT_PREP = 10
DEFAULT_WORK = 30
DEFAULT_REST = 30


class SettingsError(Exception):
    """Base class for settings errors."""


class HelpRequested(SettingsError):
    """-h/--help was given; carries the usage text."""

    def __init__(self, usage: str):
        super().__init__("help requested")
        self.usage = usage


class InvalidArgument(SettingsError):
    """Unknown flag, missing value, or an unusable configuration."""


class InvalidFormat(SettingsError):
    """A duration that is not a non-negative integer."""


@dataclass(frozen=True)
class Settings:
    """Step durations in seconds."""
    prep: int = DEFAULT_PREP
    work: int = DEFAULT_WORK
    rest: int = DEFAULT_REST

    def validate(self) -> None:
        """Reject a cycle that could never advance.

        Prepare only runs once, so work and rest can't both be zero.
        """
        for name in ("prep", "work", "rest"):
            if getattr(self, name) < 0:
                raise InvalidFormat(f"{name} must not be negative")
        if self.work == 0 and self.rest == 0:
            raise InvalidArgument("work and rest can't both be 0")


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise InvalidArgument(message)


def _seconds(flag: str, value: Optional[str], default: int) -> int:
    if value is None:
        return default
    try:
        seconds = int(value)
    except ValueError:
        raise InvalidFormat(f"{flag}: {value!r} is not a number") from None
    if seconds < 0:
        raise InvalidFormat(f"{flag}: {value!r} must not be negative")
    return seconds


def build_parser(prog: str = "routine") -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = _ArgumentParser(
        prog=prog,
        description="Workout interval timer: prepare once, then work and rest in rounds.",
        add_help=False,
    )
    parser.add_argument(
        "-h",
        "--help",
        action="store_true",
        help="display this help and exit",
    )
    # Durations are kept as strings so a bad value is an InvalidFormat
    # rather than a generic argparse error.
    parser.add_argument(
        "-p",
        "--prep",
        metavar="NUMBER",
        help=f"set the preparation time to NUMBER seconds (default: {DEFAULT_PREP})",
    )
    parser.add_argument(
        "-w",
        "--work",
        metavar="NUMBER",
        help=f"set the workout time to NUMBER seconds (default: {DEFAULT_WORK})",
    )
    parser.add_argument(
        "-r",
        "--rest",
        metavar="NUMBER",
        help=f"set the rest time to NUMBER seconds (default: {DEFAULT_REST})",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="log at DEBUG level",
    )
    parser.add_argument(
        "--log-file",
        metavar="PATH",
        help="also write the log to PATH",
    )
    return parser


def parse_args(argv: Sequence[str], prog: str = "routine") -> argparse.Namespace:
    """Parse argv into a namespace, raising SettingsError on bad input."""
    parser = build_parser(prog)
    args = parser.parse_args(list(argv))
    if args.help:
        raise HelpRequested(parser.format_help())
    return args


def settings_from_args(args: argparse.Namespace) -> Settings:
    """Build validated Settings from a parsed namespace."""
    settings = Settings(
        prep=_seconds("--prep", args.prep, DEFAULT_PREP),
        work=_seconds("--work", args.work, DEFAULT_WORK),
        rest=_seconds("--rest", args.rest, DEFAULT_REST),
    )
    settings.validate()
    return settings


def parse_settings(argv: Sequence[str], prog: str = "routine") -> Settings:
    """Parse an explicit argument list into Settings.

    Args:
        argv: Arguments, without the program name.
        prog: Program name used in the usage text.

    Raises:
        HelpRequested: -h/--help was given.
        InvalidArgument: Unknown flag, missing value, or empty cycle.
        InvalidFormat: A duration is not a non-negative integer.
    """
    return settings_from_args(parse_args(argv, prog))
