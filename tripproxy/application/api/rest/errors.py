"""Centralized error transformation for API routes.

Maps proxy errors (domain and infrastructure) to HTTPException responses.
"""

from typing import Any

from fastapi import HTTPException

from tripproxy.domain.shared.error import (
    DomainError,
    InfrastructureError,
    ProxyError,
    UpstreamError,
    ValidationError,
)


def map_proxy_error(error: ProxyError) -> HTTPException:
    """Map a proxy error to an HTTPException.

    Args:
        error: The proxy error to map.

    Returns:
        HTTPException with appropriate status code and detail.
    """
    detail: dict[str, Any] = {
        "code": error.code,
        "message": error.message,
    }

    if isinstance(error, UpstreamError):
        return HTTPException(status_code=502, detail=detail)

    if isinstance(error, InfrastructureError):
        return HTTPException(status_code=503, detail=detail)

    if isinstance(error, ValidationError):
        if error.field is not None:
            detail["field"] = error.field
        return HTTPException(status_code=422, detail=detail)

    if isinstance(error, DomainError):
        return HTTPException(status_code=400, detail=detail)

    # Fallback for unknown ProxyError subclasses
    return HTTPException(status_code=500, detail=detail)
