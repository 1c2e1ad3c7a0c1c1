"""
Domain error classes for the users request validator.

These error classes provide explicit, typed exceptions that map cleanly to API responses.
Every validation failure is a client error: the caller sent input the API cannot accept.
"""

from typing import Dict, Any

from .response_codes import ResponseCode, CLIENT_ERROR, CLIENT_ERROR_CODE


class DomainError(Exception):
    """
    Base class for all domain errors.

    Domain errors are explicit errors that should be mapped
    to appropriate HTTP responses by the caller.
    """

    def __init__(self, code: str, message: str, details: Dict[str, Any] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}


class ValidationError(DomainError):
    """
    Raised when a request fails validation.

    Carries the catalog entry that was violated, the formatted message and the
    positional parameters used to format it. Maps to HTTP 400 Bad Request.

    Example:
        >>> error = ValidationError(ResponseCode.DATA_TYPE_ERROR, 'roles', 'List')
        >>> error.message
        'Data type of roles should be List.'
    """

    response_code = CLIENT_ERROR_CODE
    response_status = CLIENT_ERROR

    def __init__(self, kind: ResponseCode, *params: Any):
        super().__init__(
            kind.code,
            kind.format(*params),
            {'params': [str(param) for param in params]}
        )
        self.kind = kind
        self.params = params

    def __reduce__(self):
        return (self.__class__, (self.kind, *self.params), self.__dict__)

    def __repr__(self) -> str:
        return f'ValidationError({self.kind.name}, {self.message!r})'
