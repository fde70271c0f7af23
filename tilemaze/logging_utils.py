"""Tagged, color-coded console output for tilemaze.

Every line carries a bracketed tag so grid bookkeeping, search results and
unreachable goals stay distinguishable without color. Set TILEMAZE_NO_COLOR
to print plain text (useful when piping a host's output to a file).
"""

import os
from enum import Enum


class Color(Enum):
    BLUE = "\033[94m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    GREEN = "\033[92m"
    CYAN = "\033[96m"
    BOLD = "\033[1m"
    RESET = "\033[0m"


LOG_TAG_DETERMINISTIC = "[•]"  # generation, linking, target selection
LOG_TAG_SEARCH = "[A*]"        # relaxation and host ticks
LOG_TAG_ERROR = "[!]"          # failures and unreachable goals
LOG_TAG_SUCCESS = "[✓]"
LOG_TAG_INFO = "[i]"


def colored(text: str, color: Color, bold: bool = False) -> str:
    """Wrap ``text`` in ANSI codes unless TILEMAZE_NO_COLOR is set."""
    if os.getenv("TILEMAZE_NO_COLOR"):
        return text
    prefix = (Color.BOLD.value if bold else "") + color.value
    return f"{prefix}{text}{Color.RESET.value}"


def _emit(tag: str, color: Color, message: str) -> None:
    print(colored(f"{tag} {message}", color))


def log_deterministic(message: str) -> None:
    _emit(LOG_TAG_DETERMINISTIC, Color.BLUE, message)


def log_search(message: str) -> None:
    _emit(LOG_TAG_SEARCH, Color.YELLOW, message)


def log_error(message: str) -> None:
    _emit(LOG_TAG_ERROR, Color.RED, message)


def log_success(message: str) -> None:
    _emit(LOG_TAG_SUCCESS, Color.GREEN, message)


def log_info(message: str) -> None:
    _emit(LOG_TAG_INFO, Color.CYAN, message)
