import os


class Config:
    """
    Application configuration constants.

    Environment-aware configuration read once at import time.
    Set NOTESTOOL_HOME to relocate the activity log, NO_COLOR to disable
    colored output and NOTESTOOL_CLEAR_SCREEN=0 to keep the screen between
    menu actions.
    """

    # ============================================
    # VERSION
    # ============================================

    VERSION = "1.0.0"
    APP_NAME = "notestool"

    # ============================================
    # CIPHER
    # ============================================

    CIPHER_KEY = "KOODJOHVI"
    ALPHABET_SIZE = 26

    # ============================================
    # COLLECTION FILE FORMAT
    # ============================================

    FIELD_DELIMITER = ":"
    RECORD_FIELDS = 4  # name:isEncrypted:timestamp:content
    TRUE_TOKEN = "true"
    FALSE_TOKEN = "false"
    FILE_ENCODING = "utf-8"
    FILE_ERRORS = "surrogateescape"  # undecodable bytes survive a load/save cycle

    TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
    # Matches TIMESTAMP_FORMAT output, which itself contains the delimiter
    TIMESTAMP_PATTERN = r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}"

    # ============================================
    # USER INTERFACE SETTINGS
    # ============================================

    INDEX_WIDTH = 3  # 001, 002, ...
    MENU_OPTIONS = ("Show notes.", "Add a note.", "Delete a note.", "Exit.")

    # ============================================
    # FILE PATHS
    # ============================================

    STORAGE_DIR = os.getenv(
        "NOTESTOOL_HOME", os.path.join(os.path.expanduser("~"), ".notestool")
    )
    LOG_FILE = "notestool_activity.log"

    # ============================================
    # FEATURE FLAGS
    # ============================================

    ENABLE_SCREEN_CLEAR = os.getenv("NOTESTOOL_CLEAR_SCREEN", "1") != "0"
    ENABLE_COLORS = "NO_COLOR" not in os.environ


# ============================================
# VALIDATION
# ============================================


def validate_config():
    """
    Validate configuration parameters.

    Raises:
        ValueError: If configuration is inconsistent
    """
    errors = []

    key = Config.CIPHER_KEY
    if not key:
        errors.append("Cipher key cannot be empty")
    elif not all("A" <= c <= "Z" for c in key):
        errors.append("Cipher key must contain uppercase ASCII letters only")

    if len(Config.FIELD_DELIMITER) != 1:
        errors.append("Field delimiter must be a single character")

    if Config.INDEX_WIDTH < 1:
        errors.append("Index width must be >= 1")

    if errors:
        raise ValueError(
            "Configuration validation failed:\n"
            + "\n".join(f"  - {e}" for e in errors)
        )


# Run validation on import
try:
    validate_config()
except ValueError as e:
    import logging

    logging.warning(f"Configuration validation warning: {e}")