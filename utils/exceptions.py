"""
Errors raised while fetching from the results API and while driving the view state.
"""


class FetchError(Exception):
    """A schedule or results request failed; message is safe to show to the user."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NetworkError(FetchError):
    """The request did not complete or the server answered with an error status."""


class ParseError(FetchError):
    """The response body is not JSON or does not have the expected shape."""


class UnhandledActionError(Exception):
    """An action of unknown kind reached the view state reducer."""
