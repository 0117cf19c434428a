# core/errors.py


class AppError(Exception):
    """Base class for errors raised by the storage and network layers."""


class StorageError(AppError):
    """Read or write failure against the local database."""


class NetworkError(AppError):
    """The remote menu could not be retrieved."""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class FormatError(AppError):
    """The remote payload does not have the expected shape."""
