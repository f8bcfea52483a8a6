"""
Logging setup for the registration wizard: Rich console output on the
``registration`` logger.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

console = Console()


def setup_logging(level: str = "INFO", show_path: bool = False) -> logging.Logger:
    logger = logging.getLogger("registration")
    logger.setLevel(getattr(logging, level))
    logger.handlers.clear()

    handler = RichHandler(
        console=console,
        show_time=True,
        show_path=show_path,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setLevel(getattr(logging, level))
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)

    # keep records out of the root logger's handlers
    logger.propagate = False

    return logger
