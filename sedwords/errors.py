"""Exceptions raised by sedwords"""


class SedWordsError(Exception):
    """Base class for sedwords errors."""


class WordListUnavailableError(SedWordsError):
    """The word list could not be opened for reading."""

    def __init__(self, path, reason: str = ""):
        self.path = str(path)
        self.reason = reason
        message = f"Failed to open {self.path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
