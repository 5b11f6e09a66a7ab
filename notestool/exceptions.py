"""Custom exceptions for application."""

import logging


class CoreException(Exception):
    """Base exception that logs errors."""

    def __init__(self, message: str):
        self.message = message
        logging.error(f"{self.__class__.__name__}: {message}")
        super().__init__(self.message)


class NoteValidationError(CoreException):
    """User input rejected (empty field, bad choice, index out of range)."""

    pass


class StorageError(CoreException):
    """Collection file could not be opened, read or written."""

    pass
