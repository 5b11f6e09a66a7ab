"""Reusable validation utilities."""

from typing import Optional, Tuple

from notestool.config import Config


def _parse_int(raw: str) -> Optional[int]:
    """Parse an optionally signed run of ASCII digits; anything else is None."""
    text = raw.strip()
    digits = text[1:] if text[:1] in ("+", "-") else text
    if not (digits.isascii() and digits.isdigit()):
        return None
    return int(text)


class InputValidator:
    """Centralized input validation."""

    @staticmethod
    def validate_note_name(name: str) -> Tuple[bool, str]:
        """Validate a note name (already trimmed)."""
        if not name:
            return False, "Note name cannot be empty."

        if Config.FIELD_DELIMITER in name:
            return False, f"Note name cannot contain '{Config.FIELD_DELIMITER}'."

        return True, ""

    @staticmethod
    def validate_note_content(content: str) -> Tuple[bool, str]:
        """Validate note content (already trimmed). Delimiters are allowed."""
        if not content:
            return False, "Note content cannot be empty."

        return True, ""

    @staticmethod
    def parse_menu_choice(raw: str) -> Tuple[Optional[int], str]:
        """Parse a menu selection; returns (choice, error message)."""
        option_count = len(Config.MENU_OPTIONS)
        choice = _parse_int(raw)
        if choice is None:
            return (
                None,
                f"Invalid input, please enter a number between 1 and {option_count}.",
            )

        if not 1 <= choice <= option_count:
            return (
                None,
                f"Invalid choice, please enter a number between 1 and {option_count}.",
            )

        return choice, ""

    @staticmethod
    def parse_note_index(raw: str, note_count: int) -> Tuple[Optional[int], str]:
        """
        Parse a 1-based note index, 0 meaning cancel.

        The accepted range is [0, note_count]; note_count selects the last note.
        """
        index = _parse_int(raw)
        if index is None:
            return None, "Invalid input, please enter a note index."

        if index < 0 or index > note_count:
            return None, "Invalid choice, note index out of bounds."

        return index, ""

    @staticmethod
    def parse_encrypt_choice(raw: str) -> Tuple[bool, bool]:
        """
        Interpret a y/n encrypt answer.

        Returns:
            (encrypt, recognized); anything other than y or n means no
            encryption and is reported as unrecognized
        """
        answer = raw.strip().lower()
        if answer == "y":
            return True, True
        return False, answer == "n"
