"""Reads and writes note collections as delimited text files."""

import logging
import os
import re
from typing import List, Optional, Tuple

from notestool.config import Config
from notestool.core.note import Note
from notestool.exceptions import StorageError

# --- Path Management ---


def get_storage_directory():
    """Ensures and returns the application's storage directory path."""
    storage_dir = Config.STORAGE_DIR
    os.makedirs(storage_dir, exist_ok=True)
    return storage_dir


def get_log_path():
    """Returns the path to the activity log."""
    return os.path.join(get_storage_directory(), Config.LOG_FILE)


# --- Record Encoding ---


def encode_note(note: Note) -> str:
    """Encodes a note as one record line (without the trailing newline)."""
    flag = Config.TRUE_TOKEN if note.is_encrypted else Config.FALSE_TOKEN
    return Config.FIELD_DELIMITER.join(
        (note.name, flag, note.timestamp, note.content)
    )


_TIMESTAMP_FIELD = re.compile(
    rf"({Config.TIMESTAMP_PATTERN}){re.escape(Config.FIELD_DELIMITER)}(.*)\Z",
    re.DOTALL,
)


def _split_timestamp(remainder: str) -> Optional[Tuple[str, str]]:
    """Splits 'timestamp:content', keeping a formatted timestamp whole."""
    match = _TIMESTAMP_FIELD.match(remainder)
    if match:
        return match.group(1), match.group(2)
    parts = remainder.split(Config.FIELD_DELIMITER, 1)
    if len(parts) != 2:
        return None
    return parts[0], parts[1]


def decode_line(line: str) -> Optional[Note]:
    """
    Parses one record line into a Note.

    Splitting stops after the fourth field starts, so content may contain
    the delimiter itself. A timestamp written in TIMESTAMP_FORMAT is read
    back whole even though it contains the delimiter. Returns None for lines
    that do not have four fields.
    """
    parts = line.split(Config.FIELD_DELIMITER, Config.RECORD_FIELDS - 2)
    if len(parts) != Config.RECORD_FIELDS - 1:
        return None
    name, flag, remainder = parts

    fields = _split_timestamp(remainder)
    if fields is None:
        return None
    timestamp, content = fields
    return Note(
        name=name,
        is_encrypted=flag == Config.TRUE_TOKEN,
        timestamp=timestamp,
        content=content,
    )


# --- Collection I/O ---


def load_notes(filename: str) -> List[Note]:
    """
    Loads every well-formed note from a collection file.

    A missing file is an empty collection. Malformed lines are skipped.
    Bytes that are not valid UTF-8 are kept as escapes and written back
    unchanged by save_notes().

    Raises:
        StorageError: If the file exists but cannot be opened or read
    """
    notes: List[Note] = []
    try:
        with open(
            filename, "r", encoding=Config.FILE_ENCODING, errors=Config.FILE_ERRORS
        ) as f:
            for line in f:
                note = decode_line(line.rstrip("\r\n"))
                if note is None:
                    logging.warning(f"Skipped malformed line in '{filename}'")
                    continue
                notes.append(note)
    except FileNotFoundError:
        logging.info(f"Collection '{filename}' not found, starting empty")
        return []
    except OSError as e:
        raise StorageError(f"Error opening file: {e}") from e

    logging.info(f"Loaded {len(notes)} notes from '{filename}'")
    return notes


def save_notes(filename: str, notes: List[Note]):
    """
    Rewrites the collection file with every note, in order.

    The file is truncated first; an interrupted write leaves it partial.

    Raises:
        StorageError: If the file cannot be created or written
    """
    try:
        with open(
            filename,
            "w",
            encoding=Config.FILE_ENCODING,
            errors=Config.FILE_ERRORS,
            newline="\n",
        ) as f:
            for note in notes:
                f.write(encode_note(note) + "\n")
    except (OSError, UnicodeError) as e:
        raise StorageError(f"Error writing file: {e}") from e

    logging.info(f"Saved {len(notes)} notes to '{filename}'")
