"""
Response helper for rejected requests.

Renders a ValidationError in the API contract shape so every caller returns
the same error body:
{
    "code": "ERROR_CODE",
    "message": "Human-readable message",
    "responseStatus": "CLIENT_ERROR",
    "details": { ... }
}
"""

import json
from typing import Dict, Any

from .errors import ValidationError
from .types import ErrorResponse


def create_error_body(error: ValidationError) -> ErrorResponse:
    return {
        'code': error.code,
        'message': error.message,
        'responseStatus': error.response_status,
        'details': error.details
    }


def create_error_response(error: ValidationError) -> Dict[str, Any]:
    """
    Create an HTTP error response for a validation failure.

    Args:
        error: The violation that stopped validation

    Returns:
        Lambda proxy integration response object
    """
    return {
        'statusCode': error.response_code,
        'headers': {
            'Content-Type': 'application/json'
        },
        'body': json.dumps(create_error_body(error))
    }
