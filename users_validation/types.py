"""
Shared type definitions for the users request validator.

This module defines TypedDict classes for the nested request entities and
literal types for the fixed value sets the validator checks against.
Requests themselves stay plain dictionaries; these types document their shape.
"""

from typing import TypedDict, Literal, List, Dict, Any, Optional

# Operation names accepted by RequestValidator.validate
OperationName = Literal[
    'createUser',
    'updateUser',
    'bulkUserUpload',
    'changePassword',
    'verifyUser',
    'assignRole',
    'forgotPassword',
    'profileVisibility'
]

# Operation carried by an individual external identity entry
ExternalIdOperation = Literal['add', 'remove', 'edit']

# Mode in which the externalIds list is validated
ExternalIdsMode = Literal['create', 'update', 'bulkUserUpload']

# Context label passed to the address validator
AddressContext = Literal['address', 'education', 'jobProfile']

Request = Dict[str, Any]


class ExternalIdentity(TypedDict, total=False):
    """External identity of a user at a provider."""
    id: str
    provider: str
    idType: str
    operation: Optional[ExternalIdOperation]


class AddressEntry(TypedDict, total=False):
    """Address entry, top-level or nested under education/job profile."""
    addressLine1: str
    city: str
    addType: Optional[str]
    id: Optional[str]
    isDeleted: Optional[bool]


class EducationEntry(TypedDict, total=False):
    """Education entry of a user profile."""
    name: str
    degree: str
    address: Optional[AddressEntry]
    id: Optional[str]
    isDeleted: Optional[bool]


class JobProfileEntry(TypedDict, total=False):
    """Job profile entry; dates use YYYY-MM-DD."""
    jobName: str
    orgName: str
    joiningDate: Optional[str]
    endDate: Optional[str]
    address: Optional[AddressEntry]
    id: Optional[str]
    isDeleted: Optional[bool]


class VisibilityRequest(TypedDict, total=False):
    """Request payload for profile visibility updates."""
    userId: str
    private: List[str]
    public: List[str]


class ValidatorConfig(TypedDict):
    """Configuration loaded once at startup."""
    default_country_code: str
    metrics_enabled: bool
    metrics_namespace: str


class ErrorResponse(TypedDict):
    """Standard client error response body."""
    code: str
    message: str
    responseStatus: str
    details: Dict[str, Any]
