from unittest.mock import Mock, patch

import pytest

from notestool.core import cipher
from notestool.core.app import App
from notestool.core.note import Note
from notestool.ui import commands, views


@pytest.fixture
def app_session(collection_path):
    session = App(collection_path)
    session.load_collection()
    return session


class TestShowNotes:
    """Test the listing handler."""

    def test_empty_collection(self, app_session, capsys):
        commands.show_notes_command(app_session)
        assert "No notes available." in capsys.readouterr().out

    def test_lists_with_padded_index_and_decoded_content(self, app_session, capsys):
        app_session.add_note("a", "hello", False)
        app_session.add_note("b", "world", True)

        commands.show_notes_command(app_session)
        out = capsys.readouterr().out
        assert "001" in out and "[a]" in out and "hello" in out
        assert "002" in out and "[b]" in out and "world" in out
        assert cipher.encrypt("world") not in out


class TestAddNoteCommand:
    """Test the add flow."""

    def test_add_plain(self, app_session, capsys):
        with patch("notestool.ui.views.prompt_input", side_effect=["a", "hello", "n"]):
            commands.add_note_command(app_session)
        assert app_session.notes[0].content == "hello"
        assert "Non-encrypted note added successfully." in capsys.readouterr().out

    def test_add_encrypted(self, app_session, capsys):
        with patch("notestool.ui.views.prompt_input", side_effect=["b", "world", "Y"]):
            commands.add_note_command(app_session)
        note = app_session.notes[0]
        assert note.is_encrypted is True
        assert note.content == cipher.encrypt("world")
        assert "Encrypted note added successfully." in capsys.readouterr().out

    def test_unrecognized_answer_warns_and_adds_plain(self, app_session, capsys):
        with patch("notestool.ui.views.prompt_input", side_effect=["a", "x", "maybe"]):
            commands.add_note_command(app_session)
        assert app_session.notes[0].is_encrypted is False
        assert "defaulted to 'n'" in capsys.readouterr().out

    def test_empty_name_stops_before_content_prompt(self, app_session, capsys):
        prompt = Mock(return_value="   ")
        with patch("notestool.ui.views.prompt_input", prompt):
            with patch("notestool.data.store.save_notes") as mock_save:
                commands.add_note_command(app_session)
                mock_save.assert_not_called()
        assert prompt.call_count == 1
        assert app_session.notes == []
        assert "Note name cannot be empty." in capsys.readouterr().out

    def test_empty_content_aborts(self, app_session, capsys):
        with patch("notestool.ui.views.prompt_input", side_effect=["a", ""]):
            commands.add_note_command(app_session)
        assert app_session.notes == []
        assert "Note content cannot be empty." in capsys.readouterr().out

    def test_name_with_delimiter_rejected(self, app_session, capsys):
        with patch("notestool.ui.views.prompt_input", side_effect=["a:b"]):
            commands.add_note_command(app_session)
        assert app_session.notes == []
        assert "cannot contain ':'" in capsys.readouterr().out


class TestDeleteNoteCommand:
    """Test the delete flow."""

    def test_never_had_notes(self, app_session, capsys):
        with patch("notestool.ui.views.prompt_input") as prompt:
            commands.delete_note_command(app_session)
            prompt.assert_not_called()
        assert "The collection is already empty." in capsys.readouterr().out

    def test_purged_message(self, app_session, capsys):
        app_session.add_note("a", "hello", False)
        with patch("notestool.ui.views.prompt_input", return_value="1"):
            commands.delete_note_command(app_session)
        commands.delete_note_command(app_session)
        assert "already purged" in capsys.readouterr().out

    def test_delete_by_index(self, app_session, capsys):
        app_session.add_note("a", "hello", False)
        app_session.add_note("b", "world", True)
        with patch("notestool.ui.views.prompt_input", return_value="1"):
            commands.delete_note_command(app_session)
        assert [n.name for n in app_session.notes] == ["b"]
        assert "Note deleted successfully." in capsys.readouterr().out

    def test_cancel(self, app_session, capsys):
        app_session.add_note("a", "hello", False)
        with patch("notestool.ui.views.prompt_input", return_value="0"):
            commands.delete_note_command(app_session)
        assert len(app_session.notes) == 1
        assert "No notes were deleted." in capsys.readouterr().out

    @pytest.mark.parametrize(
        "raw,message",
        [("2", "out of bounds"), ("-1", "out of bounds"), ("one", "note index")],
    )
    def test_invalid_index(self, app_session, capsys, raw, message):
        app_session.add_note("a", "hello", False)
        with patch("notestool.ui.views.prompt_input", return_value=raw):
            commands.delete_note_command(app_session)
        assert len(app_session.notes) == 1
        assert message in capsys.readouterr().out


class TestViews:
    """Presentation helpers render to plain data."""

    def test_menu_lines(self):
        lines = views.render_menu()
        assert "1. Show notes." in lines
        assert "4. Exit." in lines

    def test_note_line_layout(self, monkeypatch):
        for attr in ("INDEX", "NAME", "TIMESTAMP", "RESET"):
            monkeypatch.setattr(views.Colors, attr, "")
        note = Note("a", False, "2024-05-01 09:15:00", "ignored")
        assert (
            views.format_note_line(7, note, "hello")
            == "007 - [a] hello [2024-05-01 09:15:00]"
        )
