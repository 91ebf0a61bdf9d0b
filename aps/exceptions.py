# aps/exceptions.py


class AppCenterError(Exception):
    """Base class for errors reported to the user with exit status 1."""


class MissingDependency(AppCenterError):
    def __init__(self, missing):
        self.missing = list(missing)
        super().__init__(f"missing dependencies: {', '.join(self.missing)}")


class UsageError(AppCenterError):
    pass


class FetchError(AppCenterError):
    """
    Raised when the metadata endpoints return nothing usable.
    `raw` keeps the last response body so it can be shown verbatim.
    """

    def __init__(self, message, raw=None):
        super().__init__(message)
        self.raw = raw
