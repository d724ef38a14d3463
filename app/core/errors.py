"""
Error taxonomy for instruction operations.

Each error carries the HTTP status it maps to; the handlers registered in
main.py render them as ``{"success": false, "message": ...}`` bodies.
"""

from typing import Optional


class InstructionStoreError(Exception):
    status_code = 500

    def __init__(self, message: str, error: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.error = error


class ValidationError(InstructionStoreError):
    """Missing or malformed input. Raised before any datastore call."""

    status_code = 400


class NotFoundError(InstructionStoreError):
    status_code = 404


class ForbiddenError(InstructionStoreError):
    """The acting user does not own the recipe."""

    status_code = 403


class InternalError(InstructionStoreError):
    """A datastore call failed; ``error`` holds the driver message."""

    status_code = 500
