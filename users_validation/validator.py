"""
Request validator for user lifecycle operations.

This module composes the field, entity and cross-entity rules into one
pipeline per operation. Each pipeline runs its checks in a fixed order and
raises ValidationError on the first violation.

Follows steering rules:
- Fail fast on invalid input
- No global mutable state
- Configuration read once at startup
- Log validation lifecycle with correlation ID
"""

from typing import Any, Callable, Dict, Optional

from . import keys
from .config import load_config
from .cross_entity import (
    require_non_empty,
    validate_external_id_triad,
    validate_external_ids,
    validate_update_entries,
    validate_visibility_disjoint,
)
from .entities import (
    validate_address,
    validate_address_list,
    validate_education,
    validate_education_list,
    validate_job_profile,
    validate_job_profile_list,
)
from .errors import ValidationError
from .field_rules import (
    COMPLETE_TRIAD_LABEL,
    CREATE_FORBIDDEN_FIELDS,
    fields_not_allowed,
    has_complete_triad,
    validate_create_basic,
    validate_phone,
    validate_root_org_id,
    validate_update_basic,
    validate_username_required,
    validate_web_pages,
)
from .logger import create_logger
from .metrics import create_metrics_client
from .payload import get_list, get_str, get_str_list
from .predicates import is_blank
from .response_codes import ResponseCode, join_by_and, join_by_or
from .types import OperationName, Request, ValidatorConfig


class RequestValidator:
    """
    Validator for user API requests.

    The validator holds only immutable configuration, so one instance can be
    shared by concurrent requests.

    Usage:
        validator = RequestValidator()
        validator.validate_create_user(request)   # raises ValidationError
        validator.validate('updateUser', request, correlation_id='req-1')
    """

    def __init__(self, config: Optional[ValidatorConfig] = None):
        """
        Initialize the RequestValidator with configuration.

        Args:
            config: Dictionary containing:
                - default_country_code: Calling code used for phones sent without one
                - metrics_enabled: Whether validate() publishes CloudWatch metrics
                - metrics_namespace: CloudWatch namespace
              Loaded from the environment when omitted.
        """
        self.config = config if config is not None else load_config()
        self._pipelines: Dict[str, Callable[[Request], None]] = {
            'createUser': self.validate_create_user,
            'updateUser': self.validate_update_user,
            'bulkUserUpload': self.validate_bulk_user_upload,
            'changePassword': self.validate_change_password,
            'verifyUser': self.validate_verify_user,
            'assignRole': self.validate_assign_role,
            'forgotPassword': self.validate_forgot_password,
            'profileVisibility': self.validate_profile_visibility,
        }

    @property
    def operations(self):
        return tuple(self._pipelines)

    def validate(
        self,
        operation: OperationName,
        request: Request,
        correlation_id: Optional[str] = None
    ) -> None:
        """
        Validate a request for a named operation.

        Request flow:
        1. Create structured logger with correlation ID
        2. Log validation start (field names only)
        3. Run the operation pipeline
        4. Log the outcome with latency and publish metrics

        Args:
            operation: Operation name, one of self.operations
            request: Request payload
            correlation_id: Caller's request ID (optional)

        Raises:
            ValidationError: On the first violation found
            ValueError: If the operation name is unknown
        """
        pipeline = self._pipelines.get(operation)
        if pipeline is None:
            raise ValueError(
                f"Unknown operation: {operation}. Valid operations are: {', '.join(self.operations)}"
            )

        metrics = create_metrics_client(
            operation,
            namespace=self.config['metrics_namespace'],
            enabled=self.config['metrics_enabled']
        )
        logger = create_logger(operation, correlation_id=correlation_id, metrics=metrics)
        logger.log_validation_start(fields=request.keys())

        try:
            pipeline(request)
        except ValidationError as error:
            logger.log_validation_error(
                error_code=error.code,
                error_message=error.message,
                details=error.details
            )
            raise
        else:
            logger.log_validation_passed()
        finally:
            logger.publish_metrics()

    def validate_create_user(self, request: Request) -> None:
        """
        Validate a create user request.

        Order: externalIds, forbidden fields, userName, basic fields, phone,
        address, education, jobProfile, webPages.
        """
        validate_external_ids(request, keys.CREATE)
        fields_not_allowed(CREATE_FORBIDDEN_FIELDS, request)
        validate_username_required(request)
        validate_create_basic(request)
        validate_phone(request, self.config['default_country_code'])
        validate_address_list(request)
        validate_education_list(request)
        validate_job_profile_list(request)
        validate_web_pages(request)

    def validate_update_user(self, request: Request) -> None:
        """
        Validate an update user request.

        Nested lists must be non-empty when sent; their entries are then
        validated one by one, skipping content checks for soft-deleted ones.
        """
        validate_external_ids(request, keys.UPDATE)
        validate_phone(request, self.config['default_country_code'])
        validate_update_basic(request)

        require_non_empty(request, keys.ADDRESS, ResponseCode.ADDRESS_REQUIRED)
        require_non_empty(request, keys.EDUCATION, ResponseCode.EDUCATION_REQUIRED)
        require_non_empty(request, keys.JOB_PROFILE, ResponseCode.JOB_DETAILS_REQUIRED)

        validate_update_entries(
            request, keys.ADDRESS, lambda entry: validate_address(entry, keys.ADDRESS)
        )
        validate_update_entries(request, keys.JOB_PROFILE, validate_job_profile)
        validate_update_entries(request, keys.EDUCATION, validate_education)

        validate_root_org_id(request)
        validate_external_id_triad(request)

    def validate_bulk_user_upload(self, request: Request) -> None:
        """Validate one user record of a bulk upload."""
        validate_external_ids(request, keys.BULK_USER_UPLOAD)
        validate_create_basic(request)
        validate_phone(request, self.config['default_country_code'])
        validate_web_pages(request)
        validate_external_id_triad(request)

        if is_blank(get_str(request, keys.USERNAME)) and not has_complete_triad(request):
            raise ValidationError(
                ResponseCode.MANDATORY_PARAMS_MISSING,
                join_by_or(keys.USERNAME, COMPLETE_TRIAD_LABEL)
            )

    def validate_change_password(self, request: Request) -> None:
        if is_blank(get_str(request, keys.PASSWORD)):
            raise ValidationError(ResponseCode.PASSWORD_REQUIRED)
        new_password = get_str(request, keys.NEW_PASSWORD)
        if new_password is None:
            raise ValidationError(ResponseCode.NEW_PASSWORD_REQUIRED)
        if is_blank(new_password):
            raise ValidationError(ResponseCode.NEW_PASSWORD_EMPTY)

    def validate_verify_user(self, request: Request) -> None:
        if is_blank(get_str(request, keys.LOGIN_ID)):
            raise ValidationError(ResponseCode.LOGIN_ID_REQUIRED)

    def validate_assign_role(self, request: Request) -> None:
        """
        Validate a role assignment request.

        The organisation is named either by organisationId or by externalId
        together with provider.
        """
        if is_blank(get_str(request, keys.USER_ID)):
            raise ValidationError(ResponseCode.USER_ID_REQUIRED)

        if get_list(request, keys.ROLES) is None:
            raise ValidationError(ResponseCode.DATA_TYPE_ERROR, keys.ROLES, keys.LIST)

        organisation_id = get_str(request, keys.ORGANISATION_ID)
        external_id = get_str(request, keys.EXTERNAL_ID)
        provider = get_str(request, keys.PROVIDER)
        if is_blank(organisation_id) and (is_blank(external_id) or is_blank(provider)):
            raise ValidationError(
                ResponseCode.MANDATORY_PARAMS_MISSING,
                join_by_or(keys.ORGANISATION_ID, join_by_and(keys.EXTERNAL_ID, keys.PROVIDER))
            )

    def validate_forgot_password(self, request: Request) -> None:
        if is_blank(get_str(request, keys.USERNAME)):
            raise ValidationError(ResponseCode.USERNAME_REQUIRED)

    def validate_profile_visibility(self, request: Request) -> None:
        """
        Validate a profile visibility request.

        At least one of private/public must be sent, each key sent must hold a
        list, userId is mandatory and no field may be in both lists.
        """
        if request.get(keys.PRIVATE) is None and request.get(keys.PUBLIC) is None:
            raise ValidationError(ResponseCode.INVALID_DATA)

        # A key sent with null is a type error here, not an omission
        for field in (keys.PRIVATE, keys.PUBLIC):
            if field in request and request[field] is None:
                raise ValidationError(ResponseCode.DATA_TYPE_ERROR, field, keys.LIST)
        private = get_str_list(request, keys.PRIVATE)
        public = get_str_list(request, keys.PUBLIC)

        if is_blank(get_str(request, keys.USER_ID)):
            raise ValidationError(ResponseCode.USERNAME_OR_USER_ID_ERROR)

        if private is not None and public is not None:
            validate_visibility_disjoint(private, public)
