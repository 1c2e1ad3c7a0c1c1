"""Shared fixtures for request validation tests."""

import pytest

from users_validation import RequestValidator


@pytest.fixture
def config():
    return {
        'default_country_code': '+91',
        'metrics_enabled': False,
        'metrics_namespace': 'UserManagement',
    }


@pytest.fixture
def validator(config):
    return RequestValidator(config)


@pytest.fixture
def create_request():
    """A create user request that passes validation."""
    return {
        'userName': 'jdoe',
        'firstName': 'John',
        'email': 'john.doe@example.com',
        'phone': '9876543210',
        'phoneVerified': True,
        'countryCode': '+91',
        'dob': '1990-05-17',
        'roles': ['PUBLIC'],
        'language': ['English'],
        'address': [
            {'addressLine1': '12 Park Street', 'city': 'Pune', 'addType': 'permanent'}
        ],
        'education': [
            {
                'name': 'City College',
                'degree': 'B.Sc',
                'address': {'addressLine1': '1 College Road', 'city': 'Pune'}
            }
        ],
        'jobProfile': [
            {
                'jobName': 'Teacher',
                'orgName': 'City School',
                'joiningDate': '2015-06-01',
                'endDate': '2019-03-31'
            }
        ],
        'externalIds': [
            {'id': 'emp-1', 'provider': 'state-board', 'idType': 'employee'}
        ],
        'webPages': [{'type': 'blog', 'url': 'https://example.com/jdoe'}]
    }


@pytest.fixture
def update_request():
    """An update user request that passes validation."""
    return {
        'userId': 'user-123',
        'firstName': 'John',
        'email': 'john.doe@example.com',
        'address': [
            {'id': 'a1', 'addressLine1': '12 Park Street', 'city': 'Pune'}
        ]
    }
