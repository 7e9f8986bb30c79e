"""Application error types.

Each error carries the HTTP status the API layer responds with.
"""
from fastapi import status


class MessagelyError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(MessagelyError):
    """Requested user does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class InvalidCredentialsError(MessagelyError):
    """Username/password pair did not authenticate."""

    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(MessagelyError):
    """Username is already registered."""

    status_code = status.HTTP_409_CONFLICT
