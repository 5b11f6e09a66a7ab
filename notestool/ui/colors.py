"""ANSI color codes with semantic meanings."""

import platform
import os

from notestool.config import Config

# Initialize color support for Windows terminals
if platform.system() == "Windows":
    os.system("")  # Enables ANSI escape sequences in Windows 10/11 terminals


def _code(sequence: str) -> str:
    """Return the escape sequence, or nothing when colors are disabled."""
    return sequence if Config.ENABLE_COLORS else ""


class Colors:
    """ANSI color codes with semantic naming."""

    RESET = _code("\033[0m")

    # Standard colors
    GREEN = _code("\033[32m")
    YELLOW = _code("\033[33m")
    CYAN = _code("\033[36m")

    # ========== SEMANTIC COLORS - USE THESE FOR CONSISTENCY ==========

    # Status Colors
    SUCCESS = _code("\033[92m")  # Bright Green
    ERROR = _code("\033[91m")  # Bright Red
    WARNING = _code("\033[93m")  # Bright Yellow
    INFO = _code("\033[94m")  # Bright Blue

    # UI Component Colors
    PROMPT = _code("\033[96m")  # Bright Cyan - Input prompts

    # Note listing
    INDEX = YELLOW
    NAME = GREEN
    TIMESTAMP = CYAN
