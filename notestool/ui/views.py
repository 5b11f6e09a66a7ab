"""Handles all user-facing output and display formatting."""

import os
import platform
from typing import List, Tuple

from notestool.config import Config
from notestool.core.note import Note
from notestool.ui.colors import Colors


# ============================================
# SCREEN CONTROL
# ============================================


def clear_screen():
    """Clear the terminal screen."""
    if Config.ENABLE_SCREEN_CLEAR:
        os.system("cls" if platform.system() == "Windows" else "clear")


# ============================================
# RENDERING
# ============================================


def render_menu() -> List[str]:
    """Menu lines, numbered from 1."""
    lines = ["", "Select operation:"]
    for number, label in enumerate(Config.MENU_OPTIONS, start=1):
        lines.append(f"{number}. {label}")
    return lines


def format_note_line(index: int, note: Note, content: str) -> str:
    """
    Format one listing line: ``001 - [name] content [timestamp]``.

    Args:
        index: 1-based position in the collection
        note: The note being shown
        content: Readable content (already decoded if encrypted)
    """
    return (
        f"{Colors.INDEX}{index:0{Config.INDEX_WIDTH}d}{Colors.RESET} - "
        f"{Colors.NAME}[{note.name}]{Colors.RESET} {content} "
        f"{Colors.TIMESTAMP}[{note.timestamp}]{Colors.RESET}"
    )


def render_note_list(entries: List[Tuple[int, Note, str]]) -> List[str]:
    """Listing lines for (index, note, content) entries."""
    if not entries:
        return ["No notes available."]
    lines = ["Notes:"]
    lines.extend(format_note_line(i, note, content) for i, note, content in entries)
    lines.append("")
    return lines


def render_help() -> List[str]:
    return [
        "",
        f"Usage: {Config.APP_NAME} [COLLECTION_NAME]",
        "Manage short single-line notes in the specified collection.",
    ]


# ============================================
# OUTPUT
# ============================================


def print_lines(lines: List[str]):
    for line in lines:
        print(line)


def show_menu():
    print_lines(render_menu())


def show_note_list(entries: List[Tuple[int, Note, str]]):
    print_lines(render_note_list(entries))


def show_help():
    print_lines(render_help())


def show_welcome():
    print("Welcome to the notes tool!")


def show_goodbye():
    print("Thank you for using notes tool!\n\nExiting...")


# ============================================
# USER PROMPTS
# ============================================


def prompt_input(prompt_text: str) -> str:
    """
    Prompt for user input.

    Args:
        prompt_text: Prompt text to display

    Returns:
        Raw user input (callers trim as needed)
    """
    return input(f"{Colors.PROMPT}{prompt_text}{Colors.RESET} ")


# ============================================
# STATUS MESSAGES
# ============================================


def show_success(message: str):
    print(f"{Colors.SUCCESS}{message}{Colors.RESET}")


def show_error(message: str):
    print(f"{Colors.ERROR}{message}{Colors.RESET}")


def show_warning(message: str):
    print(f"{Colors.WARNING}{message}{Colors.RESET}")


def show_info(message: str):
    print(f"{Colors.INFO}{message}{Colors.RESET}")
