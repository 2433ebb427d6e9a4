"""Error hierarchy for the request pipeline.

Each error carries the HTTP status it is translated to at the handler
boundary. 500-class errors are never shown to clients verbatim.
"""

from fastapi import status

GENERIC_ERROR_MESSAGE = "Internal server error"


class TeamsAPIError(Exception):
    """Base exception for all Teams API errors."""

    http_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def public_message(self) -> str:
        """Message safe to return to the client."""
        if self.http_status >= 500:
            return GENERIC_ERROR_MESSAGE
        return self.message


class InvalidIdentifierError(TeamsAPIError):
    """Path identifier is not a positive integer."""

    http_status = status.HTTP_400_BAD_REQUEST

    def __init__(self, raw_value: str) -> None:
        super().__init__(f"Invalid ID '{raw_value}': must be a positive integer")
        self.raw_value = raw_value


class NotFoundError(TeamsAPIError):
    """Query matched zero rows."""

    http_status = status.HTTP_404_NOT_FOUND

    def __init__(self, resource: str, resource_id: int | str) -> None:
        super().__init__(f"{resource} for id {resource_id} not found")
        self.resource = resource
        self.resource_id = resource_id


class StoreError(TeamsAPIError):
    """Connectivity, query execution or driver failure."""

    def __init__(self, message: str, operation: str) -> None:
        super().__init__(f"Database {operation} failed: {message}")
        self.operation = operation


class MappingError(TeamsAPIError):
    """A row could not be converted into a domain record."""

    def __init__(self, message: str, column: str | None = None) -> None:
        super().__init__(message)
        self.column = column
