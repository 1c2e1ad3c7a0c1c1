"""
Nested entity validators.

Address, education, job profile and external identity entries are validated
one element at a time with the same presence checks the top-level fields get.
"""

from typing import Any, Dict, Mapping

from . import keys
from .errors import ValidationError
from .payload import get_mapping, get_mapping_list, get_str
from .predicates import is_blank, is_not_blank, is_valid_date
from .response_codes import ResponseCode, join_by_dot
from .types import AddressContext, ExternalIdsMode


def validate_address(address: Mapping[str, Any], context: AddressContext) -> None:
    """
    Validate one address entry.

    addressLine1 and city are mandatory. The address type is only checked on
    top-level addresses: when the addType key is sent it must be non-blank and
    one of ADDRESS_TYPES.

    Args:
        address: Address entry
        context: Label of the containing entity, used in error messages
    """
    if is_blank(get_str(address, keys.ADDRESS_LINE1)):
        raise ValidationError(ResponseCode.ADDRESS_ERROR, context, keys.ADDRESS_LINE1)
    if is_blank(get_str(address, keys.CITY)):
        raise ValidationError(ResponseCode.ADDRESS_ERROR, context, keys.CITY)

    if keys.ADD_TYPE not in address or context != keys.ADDRESS:
        return
    address_type = get_str(address, keys.ADD_TYPE)
    if is_blank(address_type):
        raise ValidationError(ResponseCode.ADDRESS_ERROR, context, keys.TYPE)
    if address_type not in keys.ADDRESS_TYPES:
        raise ValidationError(ResponseCode.ADDRESS_TYPE_ERROR)


def _validate_nested_address(entry: Mapping[str, Any], context: AddressContext) -> None:
    address = get_mapping(entry, keys.ADDRESS)
    if address is not None:
        validate_address(address, context)


def validate_education(entry: Mapping[str, Any]) -> None:
    if is_blank(get_str(entry, keys.NAME)):
        raise ValidationError(ResponseCode.EDUCATION_NAME_ERROR)
    if is_blank(get_str(entry, keys.DEGREE)):
        raise ValidationError(ResponseCode.EDUCATION_DEGREE_ERROR)
    _validate_nested_address(entry, keys.EDUCATION)


def validate_job_profile(entry: Mapping[str, Any]) -> None:
    """Validate one job profile entry; dates are checked before names."""
    for date_field in (keys.JOINING_DATE, keys.END_DATE):
        value = get_str(entry, date_field)
        if value is not None and not is_valid_date(value):
            raise ValidationError(ResponseCode.DATE_FORMAT_ERROR)
    if is_blank(get_str(entry, keys.JOB_NAME)):
        raise ValidationError(ResponseCode.JOB_NAME_ERROR)
    if is_blank(get_str(entry, keys.ORG_NAME)):
        raise ValidationError(ResponseCode.ORGANISATION_NAME_ERROR)
    _validate_nested_address(entry, keys.JOB_PROFILE)


def validate_address_list(request: Dict[str, Any]) -> None:
    for address in get_mapping_list(request, keys.ADDRESS) or []:
        validate_address(address, keys.ADDRESS)


def validate_education_list(request: Dict[str, Any]) -> None:
    for entry in get_mapping_list(request, keys.EDUCATION) or []:
        validate_education(entry)


def validate_job_profile_list(request: Dict[str, Any]) -> None:
    for entry in get_mapping_list(request, keys.JOB_PROFILE) or []:
        validate_job_profile(entry)


def _validate_external_id_mandatory_param(identity: Mapping[str, Any], field: str) -> None:
    if is_blank(get_str(identity, field)):
        raise ValidationError(
            ResponseCode.MANDATORY_PARAMS_MISSING,
            join_by_dot(keys.EXTERNAL_IDS, field)
        )


def validate_external_identity(identity: Mapping[str, Any], mode: ExternalIdsMode) -> None:
    """
    Validate one externalIds entry.

    Performs the following validations:
    1. operation, when sent, is one of add/remove/edit (case-insensitive)
    2. on create, operation, when sent, is add
    3. id, provider and idType are not blank
    """
    operation = get_str(identity, keys.OPERATION)
    operation_label = join_by_dot(keys.EXTERNAL_IDS, keys.OPERATION)
    if is_not_blank(operation):
        if operation.lower() not in keys.EXTERNAL_ID_OPERATIONS:
            raise ValidationError(
                ResponseCode.INVALID_VALUE,
                operation_label,
                operation,
                ','.join(keys.EXTERNAL_ID_OPERATIONS)
            )
        # Creating a user can only add identities
        if mode == keys.CREATE and operation.lower() != keys.ADD:
            raise ValidationError(ResponseCode.INVALID_VALUE, operation_label, operation, keys.ADD)

    _validate_external_id_mandatory_param(identity, keys.ID)
    _validate_external_id_mandatory_param(identity, keys.PROVIDER)
    _validate_external_id_mandatory_param(identity, keys.ID_TYPE)
