# nhl235/errors.py


class NHL235Error(Exception):
    """Base class for errors that abort a run with a user-visible message."""

    def __init__(self, message, details=None):
        super().__init__(message)
        self.message = message
        self.details = details


class FetchError(NHL235Error):
    """The scores API could not be reached or answered with a non-2xx status."""


class MalformedDataError(NHL235Error):
    """The scores API answered, but not with the structure we expect."""
