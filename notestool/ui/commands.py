"""Interactive handlers for the menu operations."""

from notestool.core import app
from notestool.exceptions import NoteValidationError
from notestool.ui import views
from notestool.utils.validators import InputValidator


# ============================================
# COMMAND HANDLERS
# ============================================


def show_notes_command(app_session: app.App):
    """Display every note, decoding encrypted content for display only."""
    views.clear_screen()
    views.show_note_list(app_session.note_entries())


def add_note_command(app_session: app.App):
    """
    Add a new note to the collection.

    Prompts for:
    - Note name
    - Note content
    - Whether to encrypt the content (y/n)

    An empty name or content aborts without touching the collection.
    Any encrypt answer other than y or n adds a non-encrypted note with a
    warning.

    Args:
        app_session: Active application session
    """
    name = views.prompt_input("Enter the note name:").strip()
    valid, msg = InputValidator.validate_note_name(name)
    if not valid:
        views.clear_screen()
        views.show_error(msg)
        return

    content = views.prompt_input("\nEnter the note content:").strip()
    valid, msg = InputValidator.validate_note_content(content)
    if not valid:
        views.clear_screen()
        views.show_error(msg)
        return

    answer = views.prompt_input("\nDo you want to encrypt this note? (y/n):")
    encrypt, recognized = InputValidator.parse_encrypt_choice(answer)

    try:
        app_session.add_note(name, content, encrypt)
    except NoteValidationError as e:
        views.clear_screen()
        views.show_error(str(e))
        return

    views.clear_screen()
    if encrypt:
        views.show_success("Encrypted note added successfully.")
    elif not recognized:
        views.show_warning(
            "Warning: invalid input was defaulted to 'n', non-encrypted note was added."
        )
    else:
        views.show_success("Non-encrypted note added successfully.")


def delete_note_command(app_session: app.App):
    """
    Delete a note chosen by its listed number.

    Args:
        app_session: Active application session
    """
    if app_session.is_empty():
        views.clear_screen()
        views.show_info(app_session.empty_collection_message())
        return

    views.show_note_list(app_session.note_entries())

    raw = views.prompt_input("Enter the number of the note to remove or 0 to cancel:")
    index, msg = InputValidator.parse_note_index(raw, len(app_session.notes))
    if index is None:
        views.clear_screen()
        views.show_error(msg)
        return

    if index == 0:
        views.clear_screen()
        views.show_info("No notes were deleted.")
        return

    app_session.delete_note(index)
    views.clear_screen()
    views.show_success("Note deleted successfully.")
