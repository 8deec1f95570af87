"""
Store errors - Raised by persistence adapters.

StoreFailureError maps to HTTP 500; the original error stays in the log.
StoreUnavailableError (timeouts, lost connections) maps to HTTP 503 and is
safe for the caller to retry.
"""


class StoreFailureError(Exception):
    """The persistence layer failed to complete an operation."""

    retryable = False

    def __init__(self, operation: str, message: str = "Store operation failed"):
        super().__init__(f"{message}: {operation}")
        self.operation = operation


class StoreUnavailableError(StoreFailureError):
    """The store did not answer in time or the connection was lost."""

    retryable = True

    def __init__(self, operation: str, message: str = "Store unavailable"):
        super().__init__(operation, message)
