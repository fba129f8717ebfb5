"""Console logging for pathgrid.

Each line goes to stdout with a bracket tag naming its channel: grid edits,
search runs, errors, successes and info. The tag keeps lines readable when
colour is off (``PATHGRID_NO_COLOR``) or hard to tell apart.
"""

import os
from enum import Enum
from typing import Optional


class Color(Enum):
    """ANSI escape codes used by the channels."""

    BLUE = "\033[94m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    GREEN = "\033[92m"
    CYAN = "\033[96m"

    BOLD = "\033[1m"
    RESET = "\033[0m"


class Channel(Enum):
    """Log channel: its bracket tag and the colour its lines are printed in."""

    GRID = ("[•]", Color.BLUE)
    SEARCH = ("[search]", Color.YELLOW)
    ERROR = ("[!]", Color.RED)
    SUCCESS = ("[✓]", Color.GREEN)
    INFO = ("[i]", Color.CYAN)

    def __init__(self, tag: str, color: Color):
        self.tag = tag
        self.color = color


def colors_enabled() -> bool:
    return not os.getenv("PATHGRID_NO_COLOR")


def colored(text: str, color: Color, bold: bool = False, tag: Optional[str] = None) -> str:
    """Return ``text`` (prefixed by ``tag`` if given) wrapped in ANSI codes.

    The tag is kept even when colours are disabled; only the escape codes
    are dropped.
    """
    if tag:
        text = f"{tag} {text}"
    if not colors_enabled():
        return text

    prefix = Color.BOLD.value + color.value if bold else color.value
    return f"{prefix}{text}{Color.RESET.value}"


def emit(channel: Channel, message: str) -> None:
    """Print one tagged line on ``channel``."""
    print(colored(message, channel.color, bold=channel is Channel.ERROR, tag=channel.tag))


def log_grid(message: str) -> None:
    emit(Channel.GRID, message)


def log_search(message: str) -> None:
    emit(Channel.SEARCH, message)


def log_error(message: str) -> None:
    emit(Channel.ERROR, message)


def log_success(message: str) -> None:
    emit(Channel.SUCCESS, message)


def log_info(message: str) -> None:
    emit(Channel.INFO, message)
