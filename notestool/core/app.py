"""Core application session and collection management."""

import logging
from datetime import datetime
from typing import List, Optional, Tuple

from notestool.core import cipher
from notestool.core.note import Note, current_timestamp
from notestool.data import store
from notestool.exceptions import NoteValidationError
from notestool.utils.validators import InputValidator


class App:
    """Manages the notes collection of the active session."""

    def __init__(self, collection_name: str):
        self.collection_name = collection_name
        self.notes: List[Note] = []
        # Distinguishes "purged" from "never had notes" when the list is empty
        self.has_had_notes = False

    def load_collection(self):
        """Load the collection file into memory (missing file = empty)."""
        self.notes = store.load_notes(self.collection_name)
        self.has_had_notes = bool(self.notes)

    def save_collection(self):
        """Rewrite the collection file from memory."""
        store.save_notes(self.collection_name, self.notes)

    def is_empty(self) -> bool:
        return not self.notes

    def note_entries(self) -> List[Tuple[int, Note, str]]:
        """
        Notes prepared for display.

        Returns:
            (1-based index, note, readable content) for each note; encrypted
            content is decoded here and never written back
        """
        entries = []
        for i, note in enumerate(self.notes, start=1):
            content = cipher.decrypt(note.content) if note.is_encrypted else note.content
            entries.append((i, note, content))
        return entries

    def empty_collection_message(self) -> str:
        """Message for a delete request against an empty collection."""
        if self.has_had_notes:
            return "You already purged all of your most wildest ideas."
        return "The collection is already empty."

    def add_note(
        self,
        name: str,
        content: str,
        encrypt: bool,
        now: Optional[datetime] = None,
    ) -> Note:
        """
        Append a note and save the collection.

        Args:
            name: Note name, trimmed before validation
            content: Plain text content, trimmed before validation
            encrypt: Store the content as ciphertext
            now: Creation time, defaults to the current time

        Raises:
            NoteValidationError: If name or content is rejected
            StorageError: If the collection cannot be saved
        """
        name = name.strip()
        valid, msg = InputValidator.validate_note_name(name)
        if not valid:
            raise NoteValidationError(msg)

        content = content.strip()
        valid, msg = InputValidator.validate_note_content(content)
        if not valid:
            raise NoteValidationError(msg)

        if encrypt:
            content = cipher.encrypt(content)

        note = Note(
            name=name,
            is_encrypted=encrypt,
            timestamp=current_timestamp(now),
            content=content,
        )
        self.notes.append(note)
        self.has_had_notes = True
        logging.info(f"Note '{name}' added (encrypted={encrypt})")

        self.save_collection()
        return note

    def delete_note(self, index: int) -> Optional[Note]:
        """
        Remove the note at a 1-based index and save the collection.

        Index 0 cancels and returns None without saving. Valid indices are
        1..len(notes); len(notes) removes the last note.

        Raises:
            NoteValidationError: If index is outside [0, len(notes)]
            StorageError: If the collection cannot be saved
        """
        if index < 0 or index > len(self.notes):
            raise NoteValidationError("Invalid choice, note index out of bounds.")

        if index == 0:
            logging.info("Delete cancelled")
            return None

        removed = self.notes.pop(index - 1)
        logging.info(f"Note {index} ('{removed.name}') deleted")

        self.save_collection()
        return removed
