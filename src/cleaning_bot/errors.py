"""Error types surfaced by the command pipeline."""


class RequestError(Exception):
    """A scheduling API call failed (network error or non-success status).

    The message is safe to show to chat users.
    """

    def __init__(self, message: str = "API request failed", status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ValidationError(Exception):
    """A user-supplied command argument is malformed."""
