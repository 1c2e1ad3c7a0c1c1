"""
Cross-field and cross-entity validation rules.

Covers checks that look at more than one field or list entry at a time:
- Duplicate external identities within one request
- The all-or-nothing external id triad
- Public/private visibility overlap
- Soft-delete handling of nested entity lists on update
"""

from typing import Any, Callable, Dict, List, Mapping

from . import keys
from .entities import validate_external_identity
from .errors import ValidationError
from .payload import get_bool, get_mapping_list, get_str
from .predicates import is_blank, is_not_blank
from .response_codes import ResponseCode, join_by_comma
from .types import ExternalIdsMode

TRIAD_FIELDS = (keys.EXTERNAL_ID, keys.EXTERNAL_ID_PROVIDER, keys.EXTERNAL_ID_TYPE)


def check_duplicate_external_ids(identities: List[Mapping[str, Any]]) -> None:
    """
    Reject two identities sharing (provider, idType), ignoring case.

    The error names the idType and provider of the earlier entry. Each entry
    is compared against all earlier ones.
    """
    checked: List[Mapping[str, Any]] = []
    for identity in identities:
        provider = identity[keys.PROVIDER].lower()
        id_type = identity[keys.ID_TYPE].lower()
        for earlier in checked:
            if (earlier[keys.PROVIDER].lower() == provider
                    and earlier[keys.ID_TYPE].lower() == id_type):
                raise ValidationError(
                    ResponseCode.DUPLICATE_EXTERNAL_IDS,
                    earlier[keys.ID_TYPE],
                    earlier[keys.PROVIDER]
                )
        checked.append(identity)


def validate_external_ids(request: Dict[str, Any], mode: ExternalIdsMode) -> None:
    """
    Validate the externalIds list of a create, update or bulk upload request.

    Every entry is validated before duplicates are looked for, so the
    duplicate scan only sees entries with non-blank provider and idType.
    Duplicates are rejected whenever users are being created.
    """
    identities = get_mapping_list(request, keys.EXTERNAL_IDS)
    if identities is None:
        return
    for identity in identities:
        validate_external_identity(identity, mode)
    if mode in (keys.CREATE, keys.BULK_USER_UPLOAD):
        check_duplicate_external_ids(identities)


def validate_external_id_triad(request: Dict[str, Any]) -> None:
    """externalId, externalIdProvider and externalIdType are sent together or not at all."""
    present = [is_not_blank(get_str(request, field)) for field in TRIAD_FIELDS]
    if all(present) or not any(present):
        return
    raise ValidationError(
        ResponseCode.DEPENDENT_PARAMS_MISSING,
        join_by_comma(keys.EXTERNAL_ID, keys.EXTERNAL_ID_TYPE, keys.EXTERNAL_ID_PROVIDER)
    )


def validate_visibility_disjoint(private: List[str], public: List[str]) -> None:
    """
    A field cannot be both private and public.

    Examples:
        >>> validate_visibility_disjoint(['email'], ['phone'])
        >>> validate_visibility_disjoint(['email'], ['email'])
        Traceback (most recent call last):
        ...
        users_validation.errors.ValidationError: Field cannot be both public and private.
    """
    shared = set(private) & set(public)
    if shared:
        error = ValidationError(ResponseCode.VISIBILITY_INVALID)
        error.details['field'] = next(field for field in private if field in shared)
        raise error


def _is_soft_deleted(entry: Mapping[str, Any]) -> bool:
    return get_bool(entry, keys.IS_DELETED) is True


def require_non_empty(request: Dict[str, Any], field: str, required_code: ResponseCode) -> None:
    """A nested entity list sent with an update must not be empty."""
    entries = get_mapping_list(request, field)
    if entries is not None and not entries:
        raise ValidationError(required_code)


def validate_update_entries(
    request: Dict[str, Any],
    field: str,
    validate_entry: Callable[[Mapping[str, Any]], None]
) -> None:
    """
    Validate a nested entity list sent with an update.

    Entries with isDeleted set to true only need an id; every other entry
    goes through validate_entry, the same validator used on create.

    Args:
        request: Update request
        field: List field name (address, education or jobProfile)
        validate_entry: Validator for a single live entry
    """
    entries = get_mapping_list(request, field)
    for entry in entries or []:
        if _is_soft_deleted(entry):
            if is_blank(get_str(entry, keys.ID)):
                raise ValidationError(ResponseCode.ID_REQUIRED)
            continue
        validate_entry(entry)
