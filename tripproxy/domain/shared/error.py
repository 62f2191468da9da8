"""Error hierarchy for the trip proxy.

Error layers:
- ProxyError: Base class for all proxy errors
- DomainError: Bad requests, e.g. unknown sort keys or malformed query params (4xx responses)
- InfrastructureError: Upstream/transport failures (5xx responses)

These errors are mapped to HTTP responses by the global exception handler in app.py.
"""


class ProxyError(Exception):
    """Base class for all proxy errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Domain Errors (caller mistakes - typically 4xx)
# =============================================================================


class DomainError(ProxyError):
    """Base class for domain errors."""


class ValidationError(DomainError):
    """Input validation failed."""

    def __init__(self, message: str, field: str | None = None, code: str | None = None) -> None:
        super().__init__(message, code=code or "VALIDATION_ERROR")
        self.field = field


class InvalidSortKey(ValidationError):
    """Requested sort key is not a sortable field of the record shape."""

    def __init__(self, message: str, field: str = "sortKey") -> None:
        super().__init__(message, field=field, code="INVALID_SORT_KEY")


class InvalidQueryParam(ValidationError):
    """A query parameter is missing, non-numeric or out of range."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, field=field, code="INVALID_QUERY_PARAM")


# =============================================================================
# Infrastructure Errors (system-level failures - typically 5xx)
# =============================================================================


class InfrastructureError(ProxyError):
    """Base class for infrastructure/system errors."""


class UpstreamError(InfrastructureError):
    """Upstream API failed, was unreachable, or returned an unusable body.

    ``transient`` marks failures that may succeed when the request is repeated
    (transport errors, 5xx answers). Malformed payloads are not transient.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        transient: bool = False,
    ) -> None:
        super().__init__(message, code="UPSTREAM_ERROR")
        self.status_code = status_code
        self.transient = transient
