"""
Field-level validation rules.

This module implements the single-field checks shared by the user operation
pipelines: forbidden fields, conditionally required fields, type-guarded
optional lists and the phone verification gate.

Follows steering rules:
- Fail fast on invalid input
- Raise on the first violation, never accumulate
- Never modify the request
"""

from typing import Any, Dict, Iterable

from . import keys
from .errors import ValidationError
from .payload import get_list, get_str
from .predicates import (
    is_blank,
    is_not_blank,
    is_valid_country_code,
    is_valid_date,
    is_valid_email,
    is_valid_phone,
)
from .response_codes import ResponseCode, join_by_and, join_by_comma, join_by_or


# Server-managed fields a client may not set when creating a user
CREATE_FORBIDDEN_FIELDS = (
    keys.REGISTERED_ORG_ID,
    keys.ROOT_ORG_ID,
    keys.PROVIDER,
    keys.EXTERNAL_ID,
    keys.EXTERNAL_ID_PROVIDER,
    keys.EXTERNAL_ID_TYPE,
    keys.ID_TYPE,
)

# Server-managed fields a client may not set when updating a user
UPDATE_FORBIDDEN_FIELDS = (
    keys.REGISTERED_ORG_ID,
    keys.ROOT_ORG_ID,
    keys.CHANNEL,
    keys.USERNAME,
    keys.PROVIDER,
    keys.ID_TYPE,
)

# "externalId, externalIdType and externalIdProvider"
COMPLETE_TRIAD_LABEL = join_by_and(
    join_by_comma(keys.EXTERNAL_ID, keys.EXTERNAL_ID_TYPE),
    keys.EXTERNAL_ID_PROVIDER
)


def fields_not_allowed(fields: Iterable[str], request: Dict[str, Any]) -> None:
    """
    Reject server-managed fields supplied by the client.

    Any listed field holding a non-null value, blank strings included, raises
    INVALID_REQUEST_PARAMETER naming that field.
    """
    for field in fields:
        if request.get(field) is not None:
            raise ValidationError(ResponseCode.INVALID_REQUEST_PARAMETER, field)


def validate_username_required(request: Dict[str, Any]) -> None:
    if is_blank(get_str(request, keys.USERNAME)):
        raise ValidationError(ResponseCode.USERNAME_REQUIRED)


def validate_create_basic(request: Dict[str, Any]) -> None:
    """
    Basic checks shared by create and bulk upload.

    Validates, in order:
    1. firstName is not blank
    2. roles and language, when non-null, are lists
    3. dob, when non-null, is a YYYY-MM-DD date
    4. email or phone is present
    5. email, when present, has a valid format
    """
    if is_blank(get_str(request, keys.FIRST_NAME)):
        raise ValidationError(ResponseCode.FIRST_NAME_REQUIRED)

    get_list(request, keys.ROLES)
    get_list(request, keys.LANGUAGE)

    dob = get_str(request, keys.DOB)
    if dob is not None and not is_valid_date(dob):
        raise ValidationError(ResponseCode.DATE_FORMAT_ERROR)

    email = get_str(request, keys.EMAIL)
    phone = get_str(request, keys.PHONE)
    if is_blank(email) and is_blank(phone):
        raise ValidationError(ResponseCode.EMAIL_OR_PHONE_REQUIRED)

    if is_not_blank(email) and not is_valid_email(email):
        raise ValidationError(ResponseCode.EMAIL_FORMAT_ERROR)


def validate_identity_anchor(request: Dict[str, Any]) -> None:
    """An update must name its user by userId/id or by the complete external id triad."""
    has_user_id = (
        is_not_blank(get_str(request, keys.USER_ID))
        or is_not_blank(get_str(request, keys.ID))
    )
    if has_user_id or has_complete_triad(request):
        return
    raise ValidationError(
        ResponseCode.MANDATORY_PARAMS_MISSING,
        join_by_or(keys.USER_ID, COMPLETE_TRIAD_LABEL)
    )


def has_complete_triad(request: Dict[str, Any]) -> bool:
    return all(
        is_not_blank(get_str(request, field))
        for field in (keys.EXTERNAL_ID, keys.EXTERNAL_ID_PROVIDER, keys.EXTERNAL_ID_TYPE)
    )


def _validate_non_empty_list(request: Dict[str, Any], field: str, required_code: ResponseCode) -> None:
    values = get_list(request, field)
    if values is not None and not values:
        raise ValidationError(required_code)


def validate_update_basic(request: Dict[str, Any]) -> None:
    """
    Basic checks for update.

    Fields are only required when their key is sent: an omitted firstName is
    fine, an explicitly blank one is not.
    """
    fields_not_allowed(UPDATE_FORBIDDEN_FIELDS, request)
    validate_identity_anchor(request)

    if keys.FIRST_NAME in request and is_blank(get_str(request, keys.FIRST_NAME)):
        raise ValidationError(ResponseCode.FIRST_NAME_REQUIRED)

    email = get_str(request, keys.EMAIL)
    if email is not None and not is_valid_email(email):
        raise ValidationError(ResponseCode.EMAIL_FORMAT_ERROR)

    _validate_non_empty_list(request, keys.ROLES, ResponseCode.ROLES_REQUIRED)
    _validate_non_empty_list(request, keys.LANGUAGE, ResponseCode.LANGUAGE_REQUIRED)


def validate_phone(request: Dict[str, Any], default_country_code: str) -> None:
    """
    Validate countryCode, phone and the phone verification gate.

    A phone number must be sent without its country code, must be valid for
    the calling code (or the default one), and must come with
    phoneVerified set to boolean true.
    """
    country_code = get_str(request, keys.COUNTRY_CODE)
    if is_not_blank(country_code) and not is_valid_country_code(country_code):
        raise ValidationError(ResponseCode.INVALID_COUNTRY_CODE)

    phone = get_str(request, keys.PHONE)
    if is_blank(phone):
        return

    if '+' in phone:
        raise ValidationError(ResponseCode.INVALID_PHONE_NUMBER)
    if not is_valid_phone(phone, country_code, default_country_code):
        raise ValidationError(ResponseCode.PHONE_NUMBER_FORMAT_ERROR)

    # Absent, null, false and non-boolean values all fail the gate
    if request.get(keys.PHONE_VERIFIED) is not True:
        raise ValidationError(ResponseCode.PHONE_VERIFIED_ERROR)


def validate_web_pages(request: Dict[str, Any]) -> None:
    if keys.WEB_PAGES not in request:
        return
    web_pages = get_list(request, keys.WEB_PAGES)
    if not web_pages:
        raise ValidationError(ResponseCode.INVALID_WEB_PAGE_DATA)


def validate_root_org_id(request: Dict[str, Any]) -> None:
    if keys.ROOT_ORG_ID in request and is_blank(get_str(request, keys.ROOT_ORG_ID)):
        raise ValidationError(ResponseCode.INVALID_ROOT_ORGANISATION_ID)
