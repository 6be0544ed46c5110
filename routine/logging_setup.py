"""Logging configuration for the interval timer."""

import logging
from pathlib import Path
from typing import List, Optional, Union

from textual.logging import TextualHandler

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def setup_logging(
    verbose: bool = False, log_file: Optional[Union[str, Path]] = None
) -> None:
    """Configure the root logger.

    Args:
        verbose: Log at DEBUG instead of INFO.
        log_file: Also append records to this file, creating its directory.
    """
    # Plain stream handlers would scribble over the full-screen UI, so
    # records go to the Textual devtools console and, optionally, a file.
    handlers: List[logging.Handler] = [TextualHandler()]
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path, encoding="utf-8"))
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
