"""Note record stored in a collection."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from notestool.config import Config


@dataclass
class Note:
    """
    A single-line note.

    When is_encrypted is set, content holds ciphertext; decoding is applied
    only when the note is displayed.
    """

    name: str
    is_encrypted: bool
    timestamp: str
    content: str


def current_timestamp(now: Optional[datetime] = None) -> str:
    """Return a creation timestamp in the collection file format."""
    return (now or datetime.now()).strftime(Config.TIMESTAMP_FORMAT)
