"""Custom exceptions for dagseg."""


class DagsegError(Exception):
    """Base exception for all dagseg errors."""

    pass


class InvalidFrequencyError(DagsegError, ValueError):
    """Raised when a dictionary entry has a missing or non-positive frequency."""

    def __init__(self, message: str, word: str | None = None):
        super().__init__(message)
        self.word = word


class DictionaryFormatError(DagsegError, ValueError):
    """Raised when dictionary text cannot be parsed into entries."""

    pass


class DictionaryFetchError(DagsegError):
    """Raised when a remote dictionary cannot be fetched."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
