"""
Validator configuration.

Configuration is read once at startup from environment variables and
validated immediately, so a misconfigured deployment fails on boot instead of
on the first request.

Follows steering rules:
- Read once at startup, validate env vars on boot
- Explicit over implicit
"""

import os
from typing import Mapping, Optional

from .predicates import is_valid_country_code
from .types import ValidatorConfig


DEFAULT_COUNTRY_CODE_VAR = 'USERS_VALIDATION_DEFAULT_COUNTRY_CODE'
METRICS_ENABLED_VAR = 'USERS_VALIDATION_METRICS_ENABLED'
METRICS_NAMESPACE_VAR = 'USERS_VALIDATION_METRICS_NAMESPACE'

DEFAULTS = {
    DEFAULT_COUNTRY_CODE_VAR: '+91',
    METRICS_ENABLED_VAR: 'false',
    METRICS_NAMESPACE_VAR: 'UserManagement',
}

_TRUE_VALUES = {'true', '1', 'yes'}
_FALSE_VALUES = {'false', '0', 'no'}


def load_config(environ: Optional[Mapping[str, str]] = None) -> ValidatorConfig:
    """
    Load and validate configuration from environment variables.

    Args:
        environ: Variables to read, defaults to os.environ

    Returns:
        Configuration dictionary

    Raises:
        ValueError: If any variable holds an invalid value
    """
    if environ is None:
        environ = os.environ

    values = {
        var: environ.get(var) or default
        for var, default in DEFAULTS.items()
    }
    problems = []

    country_code = values[DEFAULT_COUNTRY_CODE_VAR].strip()
    if not is_valid_country_code(country_code):
        problems.append(f'{DEFAULT_COUNTRY_CODE_VAR} is not a valid country code: {country_code}')

    metrics_flag = values[METRICS_ENABLED_VAR].strip().lower()
    if metrics_flag not in _TRUE_VALUES | _FALSE_VALUES:
        problems.append(f'{METRICS_ENABLED_VAR} must be true or false: {metrics_flag}')

    namespace = values[METRICS_NAMESPACE_VAR].strip()
    if not namespace:
        problems.append(f'{METRICS_NAMESPACE_VAR} cannot be empty')

    if problems:
        raise ValueError(f"Invalid configuration: {'; '.join(problems)}")

    return {
        'default_country_code': country_code,
        'metrics_enabled': metrics_flag in _TRUE_VALUES,
        'metrics_namespace': namespace,
    }
