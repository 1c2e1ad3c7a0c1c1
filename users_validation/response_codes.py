"""
Response code catalog for request validation failures.

Each member pairs a stable machine-readable code with a message template.
Templates use positional placeholders ({0}, {1}, {2}) filled in by the rule
that raises the error.
"""

from enum import Enum
from typing import Any

# Response classification for every validation failure
CLIENT_ERROR = 'CLIENT_ERROR'
CLIENT_ERROR_CODE = 400


class ResponseCode(Enum):
    """Enumerated validation error kinds."""

    INVALID_REQUEST_PARAMETER = ('INVALID_REQUEST_PARAMETER', 'Invalid parameter {0} in request.')
    DATA_TYPE_ERROR = ('DATA_TYPE_ERROR', 'Data type of {0} should be {1}.')
    MANDATORY_PARAMS_MISSING = ('MANDATORY_PARAMETER_MISSING', 'Mandatory parameter {0} is missing.')
    DEPENDENT_PARAMS_MISSING = ('DEPENDENT_PARAMETER_MISSING', 'Missing parameter value in {0}.')
    INVALID_VALUE = ('INVALID_PARAMETER_VALUE', 'Invalid {0}: {1}. Valid values are: {2}.')
    DUPLICATE_EXTERNAL_IDS = (
        'DUPLICATE_EXTERNAL_IDS',
        'Duplicate external IDs for given idType ({0}) and provider ({1}).'
    )

    USERNAME_REQUIRED = ('USERNAME_MISSING', 'Username is mandatory.')
    FIRST_NAME_REQUIRED = ('FIRST_NAME_MISSING', 'First name is mandatory.')
    EMAIL_OR_PHONE_REQUIRED = ('EMAIL_OR_PHONE_MISSING', 'Email or phone is mandatory.')
    EMAIL_FORMAT_ERROR = ('EMAIL_FORMAT_ERROR', 'Email is invalid.')
    DATE_FORMAT_ERROR = ('DATE_FORMAT_ERROR', 'Date format error, expected YYYY-MM-DD.')
    ROLES_REQUIRED = ('ROLES_MISSING', 'Roles are mandatory.')
    LANGUAGE_REQUIRED = ('LANGUAGE_MISSING', 'Language is mandatory.')
    INVALID_ROOT_ORGANISATION_ID = ('INVALID_ROOT_ORGANIZATION', 'Invalid root organisation id.')
    INVALID_WEB_PAGE_DATA = ('INVALID_WEBPAGE_DATA', 'Invalid web page data.')

    INVALID_COUNTRY_CODE = ('INVALID_COUNTRY_CODE', 'Invalid country code.')
    INVALID_PHONE_NUMBER = ('INVALID_PHONE_NUMBER', 'Please send phone number without country code.')
    PHONE_NUMBER_FORMAT_ERROR = ('PHONE_NUMBER_FORMAT_ERROR', 'Please provide a valid phone number.')
    PHONE_VERIFIED_ERROR = ('PHONE_VERIFIED_ERROR', 'Phone must be verified.')

    ADDRESS_ERROR = ('ADDRESS_ERROR', 'In {0}, {1} is mandatory.')
    ADDRESS_TYPE_ERROR = ('ADDRESS_TYPE_ERROR', 'Please provide a correct address type.')
    ADDRESS_REQUIRED = ('ADDRESS_REQUIRED', 'Address is mandatory.')
    EDUCATION_REQUIRED = ('EDUCATION_REQUIRED', 'Education is mandatory.')
    JOB_DETAILS_REQUIRED = ('JOB_DETAILS_REQUIRED', 'Job details are mandatory.')
    EDUCATION_NAME_ERROR = ('EDUCATION_NAME_ERROR', 'Education name is mandatory.')
    EDUCATION_DEGREE_ERROR = ('EDUCATION_DEGREE_ERROR', 'Education degree is mandatory.')
    JOB_NAME_ERROR = ('JOB_NAME_ERROR', 'Job name is mandatory.')
    ORGANISATION_NAME_ERROR = ('ORGANISATION_NAME_ERROR', 'Organisation name is mandatory.')
    ID_REQUIRED = ('ID_REQUIRED', 'Id is mandatory.')

    PASSWORD_REQUIRED = ('PASSWORD_MISSING', 'Password is mandatory.')
    NEW_PASSWORD_REQUIRED = ('NEW_PASSWORD_MISSING', 'New password is mandatory.')
    NEW_PASSWORD_EMPTY = ('NEW_PASSWORD_EMPTY', 'New password cannot be empty.')
    LOGIN_ID_REQUIRED = ('LOGIN_ID_MISSING', 'Login id is mandatory.')
    USER_ID_REQUIRED = ('USER_ID_MISSING', 'User id is mandatory.')

    INVALID_DATA = ('INVALID_REQUESTED_DATA', 'Requested data for this operation is not valid.')
    USERNAME_OR_USER_ID_ERROR = ('USERNAME_OR_USER_ID_ERROR', 'Please provide either username or userId.')
    VISIBILITY_INVALID = ('INVALID_VISIBILITY_REQUEST', 'Field cannot be both public and private.')

    def __init__(self, code: str, template: str):
        self.code = code
        self.template = template

    def format(self, *args: Any) -> str:
        """Render the message template with positional arguments."""
        if not args:
            return self.template
        return self.template.format(*args)


def join_by_dot(*parts: str) -> str:
    return '.'.join(parts)


def join_by_comma(*parts: str) -> str:
    return ', '.join(parts)


def join_by_and(*parts: str) -> str:
    return ' and '.join(parts)


def join_by_or(*parts: str) -> str:
    return ' or '.join(parts)
