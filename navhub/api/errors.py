# navhub/api/errors.py
"""Standardized API error responses."""

from fastapi import HTTPException, status


class APIError:
    """Helper class for standardized API error responses."""

    @staticmethod
    def not_found(resource: str, identifier: str = "") -> HTTPException:
        """Return a 404 Not Found error."""
        detail = f"{resource} not found"
        if identifier:
            detail = f"{resource} not found: {identifier}"
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
        )

    @staticmethod
    def service_unavailable(message: str) -> HTTPException:
        """Return a 503 Service Unavailable error."""
        return HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=message,
        )
