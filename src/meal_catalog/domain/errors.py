"""Errors raised for malformed catalog requests."""

HTTP_BAD_REQUEST = 400


class SearchQueryError(Exception):
    """Raised when a search request cannot be honoured as given.

    Attributes:
        message: human-readable reason
        status_code: suggested HTTP status for the transport layer
    """

    def __init__(self, message: str, status_code: int = HTTP_BAD_REQUEST) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        return self.message


class InvalidFilterScope(SearchQueryError):
    """A filter id owned by another provider was routed to this one."""

    def __init__(self, filter_id: str) -> None:
        super().__init__(f"Filter {filter_id!r} does not belong to this provider")
        self.filter_id = filter_id


class AmbiguousFilter(SearchQueryError):
    """More than one filter of an exclusive group was requested."""

    def __init__(self, group: str) -> None:
        super().__init__(f"Only one {group} filter may be applied")
        self.group = group
