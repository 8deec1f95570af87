"""
InvalidArgumentError - Raised for malformed or missing identifiers and
requests that break a business rule (e.g. chatting with yourself).
Maps to: HTTP 400 Bad Request
"""


class InvalidArgumentError(Exception):
    """Exception raised for invalid client input."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
