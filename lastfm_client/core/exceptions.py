"""Custom exceptions for the Last.fm client."""


class LastFmError(Exception):
    """Base exception for all Last.fm client errors."""

    pass


class InvalidArgumentError(LastFmError, ValueError):
    """Caller supplied a value the API would reject."""

    pass


class ApiError(LastFmError):
    """Last.fm reported a failure for a call."""

    def __init__(self, message: str, code: int = 0):
        self.code = code
        super().__init__(message)


class NotFoundError(ApiError):
    """No entity was found for the request."""

    pass


class CrawlError(LastFmError):
    """A crawled page lacked an expected element."""

    pass
