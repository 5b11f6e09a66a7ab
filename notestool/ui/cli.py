import logging
import sys

from notestool.core import app
from notestool.data import store
from notestool.exceptions import StorageError
from notestool.ui import views, parser, commands
from notestool.utils.validators import InputValidator

EXIT_CHOICE = 4

# Menu number -> handler; EXIT_CHOICE leaves the loop
MENU_HANDLERS = {
    1: commands.show_notes_command,
    2: commands.add_note_command,
    3: commands.delete_note_command,
}


def setup_logging():
    """
    Configure logging to file within application storage directory.

    Creates log file in ~/.notestool/notestool_activity.log with timestamps.
    When the storage directory is unusable the session runs without a log.
    """
    try:
        logging.basicConfig(
            filename=store.get_log_path(),
            level=logging.INFO,
            format="%(asctime)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    except OSError as e:
        logging.basicConfig(handlers=[logging.NullHandler()])
        views.show_warning(f"Activity log disabled: {e}")


def run_menu(app_session: app.App):
    """
    Run the menu loop until the user picks Exit.

    Each iteration shows the menu, reads a choice and runs the matching
    handler; invalid choices are reported and the menu is shown again.
    Handlers save the collection themselves after every change.

    Raises:
        StorageError: If the collection cannot be saved
    """
    while True:
        views.show_menu()
        raw_choice = views.prompt_input("\nYour choice:")

        choice, msg = InputValidator.parse_menu_choice(raw_choice)
        if choice is None:
            views.clear_screen()
            views.show_error(msg)
            logging.warning(f"Invalid menu choice: {raw_choice!r}")
            continue

        if choice == EXIT_CHOICE:
            views.clear_screen()
            views.show_goodbye()
            return

        MENU_HANDLERS[choice](app_session)


def start_application(argv=None) -> int:
    """
    Main application entry point.

    Flow:
    1. Parse the collection name (usage/help exits 0)
    2. Setup logging
    3. Load the collection
    4. Menu loop until Exit

    Args:
        argv: Command line arguments without the program name

    Returns:
        Process exit status: 0 on normal exit or usage, 1 on I/O failure
    """
    if argv is None:
        argv = sys.argv[1:]

    collection_name = parser.parse_collection_name(argv)
    if collection_name is None:
        views.show_help()
        return 0

    setup_logging()
    logging.info(f"Application starting with collection '{collection_name}'")

    try:
        app_session = app.App(collection_name)
        app_session.load_collection()

        views.clear_screen()
        views.show_welcome()

        run_menu(app_session)

    except StorageError as e:
        views.clear_screen()
        views.show_error(e.message)
        return 1

    except UnicodeDecodeError as e:
        views.show_error(f"Error reading input: {e}")
        logging.error(f"Undecodable terminal input: {e}")
        return 1

    except (KeyboardInterrupt, EOFError):
        # Nothing unsaved: every change is written immediately
        print()
        logging.info("Session interrupted by user")

    finally:
        logging.info("Application shutdown")

    return 0


if __name__ == "__main__":
    sys.exit(start_application())
