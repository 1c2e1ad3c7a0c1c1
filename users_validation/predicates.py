"""
Primitive predicates used by the validation rules.

All predicates return booleans and never raise, whatever the input type.

Follows steering rules:
- Explicit over implicit
- Predicates decide, rules raise
"""

import re
from datetime import datetime
from typing import Any, Optional

import phonenumbers
from phonenumbers import NumberParseException

from .keys import YEAR_MONTH_DATE_FORMAT


# Email regex pattern (RFC 5322 simplified)
# Validates: local-part@domain.tld with an alphabetic top-level label
EMAIL_PATTERN = re.compile(
    r'^[a-zA-Z0-9.!#$%&\'*+/=?^_`{|}~-]+@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*\.[a-zA-Z]{2,}$'
)

# Year, month and day at full width
DATE_PATTERN = re.compile(r'[0-9]{4}-[0-9]{2}-[0-9]{2}')

# Calling code with optional leading plus, e.g. '91' or '+91'
COUNTRY_CODE_PATTERN = re.compile(r'^\+?[0-9]{1,3}$')


def is_blank(value: Any) -> bool:
    """True for None, empty strings and whitespace-only strings."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def is_not_blank(value: Any) -> bool:
    return not is_blank(value)


def is_list_type(value: Any) -> bool:
    """True when the value is present, non-null and a list."""
    return isinstance(value, list)


def is_valid_date(value: Any) -> bool:
    """
    Check that a string is a real calendar date in YYYY-MM-DD form.

    Parsing is strict: out-of-range dates fail, and every part must have its
    full width, so '2020-1-5' does not pass.

    Examples:
        >>> is_valid_date('2020-02-29')
        True
        >>> is_valid_date('2021-02-29')
        False
    """
    if not isinstance(value, str) or not DATE_PATTERN.fullmatch(value):
        return False
    try:
        datetime.strptime(value, YEAR_MONTH_DATE_FORMAT)
    except ValueError:
        return False
    return True


def is_valid_email(email: Any) -> bool:
    """
    Validate email format using regex.

    Examples:
        >>> is_valid_email('user@example.com')
        True
        >>> is_valid_email('user@localhost')
        False
    """
    if not isinstance(email, str):
        return False
    email = email.strip()
    if not email:
        return False
    return bool(EMAIL_PATTERN.match(email))


def _calling_code(country_code: Any) -> Optional[int]:
    if not isinstance(country_code, str):
        return None
    country_code = country_code.strip()
    if not COUNTRY_CODE_PATTERN.fullmatch(country_code):
        return None
    return int(country_code.lstrip('+'))


def is_valid_country_code(country_code: Any) -> bool:
    """
    Check a telephone calling code such as '+91' or '1'.

    The code must be well formed and known to the phone number metadata.
    """
    calling_code = _calling_code(country_code)
    if calling_code is None:
        return False
    region = phonenumbers.region_code_for_country_code(calling_code)
    return region != phonenumbers.UNKNOWN_REGION


def is_valid_phone(phone: Any, country_code: Any, default_country_code: str) -> bool:
    """
    Validate a national phone number for a calling code.

    A blank country code falls back to default_country_code. The number is
    parsed in the region owning the calling code and must be a valid number
    there. Unparseable input and malformed calling codes are reported as
    invalid.

    Args:
        phone: Phone number without country code
        country_code: Calling code sent with the request, may be blank
        default_country_code: Calling code used when none is sent

    Returns:
        True if the number is valid for the resolved region
    """
    if not isinstance(phone, str) or is_blank(phone):
        return False
    code = default_country_code if is_blank(country_code) else country_code
    calling_code = _calling_code(code)
    if calling_code is None:
        return False
    region = phonenumbers.region_code_for_country_code(calling_code)
    if region == phonenumbers.UNKNOWN_REGION:
        return False
    try:
        number = phonenumbers.parse(phone, region)
    except NumberParseException:
        return False
    return phonenumbers.is_valid_number(number)
