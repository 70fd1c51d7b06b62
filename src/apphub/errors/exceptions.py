"""Custom exception classes for the AppHub API."""


class AppHubError(Exception):
    """Base exception for AppHub."""

    def __init__(self, message: str, errors=None, status_code: int = 500):
        self.message = message
        self.errors = errors
        self.status_code = status_code
        super().__init__(message)


class ValidationError(AppHubError):
    """Input failed one or more field constraints."""

    def __init__(self, message: str, errors: list[dict] | None = None):
        super().__init__(message, errors, status_code=400)


class NotFoundError(AppHubError):
    """Referenced record does not exist."""

    def __init__(self, resource: str, resource_id: int | str | None = None):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(f"{resource} not found", status_code=404)


class PersistenceError(AppHubError):
    """Reading or writing the backing file failed."""

    def __init__(self, message: str = "Failed to persist data"):
        super().__init__(message, status_code=500)
