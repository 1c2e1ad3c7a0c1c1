"""Request validation for the User Management Service."""

from .types import (
    OperationName,
    ExternalIdOperation,
    ExternalIdsMode,
    AddressContext,
    Request,
    ExternalIdentity,
    AddressEntry,
    EducationEntry,
    JobProfileEntry,
    VisibilityRequest,
    ValidatorConfig,
    ErrorResponse
)

from .response_codes import (
    ResponseCode,
    CLIENT_ERROR,
    CLIENT_ERROR_CODE
)

from .errors import (
    DomainError,
    ValidationError
)

from .responses import (
    create_error_body,
    create_error_response
)

from .config import load_config
from .validator import RequestValidator

__all__ = [
    # Types
    'OperationName',
    'ExternalIdOperation',
    'ExternalIdsMode',
    'AddressContext',
    'Request',
    'ExternalIdentity',
    'AddressEntry',
    'EducationEntry',
    'JobProfileEntry',
    'VisibilityRequest',
    'ValidatorConfig',
    'ErrorResponse',
    # Catalog
    'ResponseCode',
    'CLIENT_ERROR',
    'CLIENT_ERROR_CODE',
    # Errors
    'DomainError',
    'ValidationError',
    # Responses
    'create_error_body',
    'create_error_response',
    # Validation
    'load_config',
    'RequestValidator',
]
