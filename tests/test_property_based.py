"""
Property-based tests for request validation.
Uses Hypothesis to generate test cases and verify properties hold across all inputs.
"""

import copy

import pytest
from hypothesis import given, strategies as st, assume, settings
from hypothesis.strategies import composite

from users_validation import RequestValidator, ResponseCode, ValidationError
from users_validation.predicates import is_valid_date, is_valid_email


CONFIG = {
    'default_country_code': '+91',
    'metrics_enabled': False,
    'metrics_namespace': 'UserManagement',
}

VALIDATOR = RequestValidator(CONFIG)

WORDS = st.text(alphabet='abcdefghijklmnopqrstuvwxyz', min_size=1, max_size=12)
BLANKS = st.one_of(st.none(), st.text(alphabet=' \t\n', max_size=5))

FIELD_NAMES = st.sampled_from([
    'email', 'phone', 'dob', 'firstName', 'lastName', 'gender', 'location', 'grade', 'subject'
])

JSON_VALUES = st.recursive(
    st.one_of(st.none(), st.booleans(), st.integers(), st.text(max_size=20)),
    lambda children: st.one_of(
        st.lists(children, max_size=3),
        st.dictionaries(st.text(max_size=10), children, max_size=3)
    ),
    max_leaves=10
)

REQUEST_KEYS = st.sampled_from([
    'userName', 'firstName', 'email', 'dob', 'roles', 'language', 'address', 'education',
    'jobProfile', 'externalIds', 'webPages', 'userId', 'id', 'externalId', 'externalIdProvider',
    'externalIdType', 'rootOrgId', 'password', 'newPassword', 'loginId', 'organisationId',
    'provider', 'private', 'public', 'isDeleted'
])


def _rejection(pipeline, request):
    try:
        pipeline(request)
    except ValidationError as error:
        return error.kind
    return None


@composite
def create_request(draw):
    """Generate create requests that pass every check."""
    return {
        'userName': draw(WORDS),
        'firstName': draw(WORDS),
        'email': f"{draw(WORDS)}@{draw(WORDS)}.com",
        'roles': draw(st.lists(WORDS, max_size=3)),
        'language': draw(st.lists(WORDS, max_size=3)),
    }


@composite
def case_variant(draw, text):
    flags = draw(st.lists(st.booleans(), min_size=len(text), max_size=len(text)))
    return ''.join(c.upper() if flag else c for c, flag in zip(text, flags))


class TestCreateProperties:
    """Property-based tests for create user validation."""

    @given(create_request())
    @settings(max_examples=100)
    def test_valid_requests_pass_validation(self, request):
        """
        Property: Requests with every mandatory field pass create validation.
        """
        VALIDATOR.validate_create_user(request)

    @given(create_request(), BLANKS)
    @settings(max_examples=100)
    def test_blank_first_name_always_fails(self, request, first_name):
        """
        Property: A create request without a first name is rejected with FIRST_NAME_REQUIRED.
        """
        request['firstName'] = first_name
        assert _rejection(VALIDATOR.validate_create_user, request) is ResponseCode.FIRST_NAME_REQUIRED

    @given(create_request(), BLANKS, BLANKS)
    @settings(max_examples=100)
    def test_email_or_phone_required(self, request, email, phone):
        """
        Property: A create request with neither email nor phone is rejected.
        """
        request['email'] = email
        request['phone'] = phone
        assert _rejection(VALIDATOR.validate_create_user, request) is ResponseCode.EMAIL_OR_PHONE_REQUIRED

    @given(create_request(), WORDS, WORDS, st.data())
    @settings(max_examples=100)
    def test_duplicate_external_ids_always_detected(self, request, provider, id_type, data):
        """
        Property: Two identities sharing provider and idType, in any letter case, are duplicates.
        """
        request['externalIds'] = [
            {'id': 'first', 'provider': provider, 'idType': id_type},
            {
                'id': 'second',
                'provider': data.draw(case_variant(provider)),
                'idType': data.draw(case_variant(id_type))
            }
        ]
        assert _rejection(VALIDATOR.validate_create_user, request) is ResponseCode.DUPLICATE_EXTERNAL_IDS

    @given(create_request(), st.lists(st.tuples(WORDS, WORDS), min_size=1, max_size=5, unique=True))
    @settings(max_examples=50)
    def test_distinct_external_ids_pass(self, request, pairs):
        """
        Property: Identities with distinct (provider, idType) pairs are accepted.
        """
        request['externalIds'] = [
            {'id': f'id-{index}', 'provider': provider, 'idType': id_type}
            for index, (provider, id_type) in enumerate(pairs)
        ]
        VALIDATOR.validate_create_user(request)


class TestTriadProperties:
    """Property-based tests for the external id triad."""

    TRIAD = ('externalId', 'externalIdProvider', 'externalIdType')

    @given(st.sets(st.sampled_from(TRIAD), min_size=1, max_size=2), WORDS)
    @settings(max_examples=50)
    def test_partial_triad_always_fails(self, present, value):
        """
        Property: Sending one or two of the triad fields is a dependent-params error.
        """
        request = {'userId': 'user-123'}
        for field in present:
            request[field] = value
        assert _rejection(VALIDATOR.validate_update_user, request) is ResponseCode.DEPENDENT_PARAMS_MISSING

    @given(WORDS, WORDS, WORDS)
    @settings(max_examples=50)
    def test_complete_triad_passes(self, external_id, provider, id_type):
        """
        Property: The complete triad is accepted and anchors an update.
        """
        VALIDATOR.validate_update_user({
            'externalId': external_id,
            'externalIdProvider': provider,
            'externalIdType': id_type
        })


class TestVisibilityProperties:
    """Property-based tests for profile visibility."""

    @given(st.lists(FIELD_NAMES, max_size=5), st.lists(FIELD_NAMES, max_size=5), FIELD_NAMES)
    @settings(max_examples=100)
    def test_shared_field_always_fails(self, private, public, shared):
        """
        Property: A field listed as both private and public is rejected.
        """
        request = {'userId': 'user-123', 'private': private + [shared], 'public': [shared] + public}
        assert _rejection(VALIDATOR.validate_profile_visibility, request) is ResponseCode.VISIBILITY_INVALID

    @given(st.lists(FIELD_NAMES, max_size=5), st.lists(FIELD_NAMES, max_size=5))
    @settings(max_examples=100)
    def test_disjoint_lists_pass(self, private, public):
        """
        Property: Disjoint visibility lists are accepted.
        """
        public = [field for field in public if field not in private]
        VALIDATOR.validate_profile_visibility({'userId': 'user-123', 'private': private, 'public': public})


class TestPredicateProperties:
    """Property-based tests for primitive predicates."""

    @given(st.dates())
    @settings(max_examples=100)
    def test_iso_dates_are_valid(self, value):
        """
        Property: Every calendar date rendered as YYYY-MM-DD is valid.
        """
        assert is_valid_date(value.isoformat())

    @given(st.text(max_size=100))
    @settings(max_examples=100)
    def test_strings_without_at_are_invalid_emails(self, text):
        """
        Property: Strings without @ are never valid emails.
        """
        assume('@' not in text)
        assert not is_valid_email(text)


class TestValidationIdempotency:
    """Property-based tests for validation idempotency."""

    @given(st.sampled_from(sorted(VALIDATOR.operations)),
           st.dictionaries(REQUEST_KEYS, JSON_VALUES, max_size=8))
    @settings(max_examples=200)
    def test_validation_only_raises_validation_errors(self, operation, request):
        """
        Property: Arbitrary JSON payloads either pass or raise ValidationError.
        """
        try:
            VALIDATOR.validate(operation, request)
        except ValidationError:
            pass

    @given(st.sampled_from(sorted(VALIDATOR.operations)),
           st.dictionaries(REQUEST_KEYS, JSON_VALUES, max_size=8))
    @settings(max_examples=100)
    def test_validation_is_deterministic_and_pure(self, operation, request):
        """
        Property: Validating twice gives the same outcome and never modifies the request.
        """
        original = copy.deepcopy(request)

        first = _rejection(lambda data: VALIDATOR.validate(operation, data), request)
        second = _rejection(lambda data: VALIDATOR.validate(operation, data), request)

        assert first is second
        assert request == original


if __name__ == '__main__':
    pytest.main([__file__, '-v', '--hypothesis-show-statistics'])
