"""Entry point for python -m routine."""

import logging
import sys
from typing import Optional, Sequence

from .logging_setup import setup_logging
from .settings import (
    HelpRequested,
    InvalidArgument,
    InvalidFormat,
    parse_args,
    settings_from_args,
)
from .ui import run_ui

logger = logging.getLogger(__name__)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    if argv is None:
        argv = sys.argv[1:]

    try:
        args = parse_args(argv)
        settings = settings_from_args(args)
    except HelpRequested as e:
        print(e.usage, end="")
        return 0
    except InvalidArgument as e:
        print(f"Error: invalid argument. {e}", file=sys.stderr)
        return 1
    except InvalidFormat as e:
        print(f"Error: invalid argument format. {e}", file=sys.stderr)
        return 1

    setup_logging(verbose=args.verbose, log_file=args.log_file)
    logger.info(
        "prepare %ds, work %ds, rest %ds", settings.prep, settings.work, settings.rest
    )

    try:
        run_ui(settings)
    except KeyboardInterrupt:
        pass

    return 0


def cli() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    cli()
