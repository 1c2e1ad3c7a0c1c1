"""
Request field names and fixed values used by the validation rules.

Field names are the camelCase JSON keys clients send to the user API.
"""

# Identity
ID = 'id'
USER_ID = 'userId'
USERNAME = 'userName'
LOGIN_ID = 'loginId'
CHANNEL = 'channel'
ORGANISATION_ID = 'organisationId'
REGISTERED_ORG_ID = 'registeredOrgId'
ROOT_ORG_ID = 'rootOrgId'

# Profile
FIRST_NAME = 'firstName'
EMAIL = 'email'
PHONE = 'phone'
PHONE_VERIFIED = 'phoneVerified'
COUNTRY_CODE = 'countryCode'
DOB = 'dob'
ROLES = 'roles'
LANGUAGE = 'language'
WEB_PAGES = 'webPages'

# Passwords
PASSWORD = 'password'
NEW_PASSWORD = 'newPassword'

# External identity
EXTERNAL_IDS = 'externalIds'
EXTERNAL_ID = 'externalId'
EXTERNAL_ID_PROVIDER = 'externalIdProvider'
EXTERNAL_ID_TYPE = 'externalIdType'
PROVIDER = 'provider'
ID_TYPE = 'idType'
OPERATION = 'operation'

# Nested entities
ADDRESS = 'address'
ADDRESS_LINE1 = 'addressLine1'
CITY = 'city'
ADD_TYPE = 'addType'
TYPE = 'type'
EDUCATION = 'education'
NAME = 'name'
DEGREE = 'degree'
JOB_PROFILE = 'jobProfile'
JOB_NAME = 'jobName'
ORG_NAME = 'orgName'
JOINING_DATE = 'joiningDate'
END_DATE = 'endDate'
IS_DELETED = 'isDeleted'

# Profile visibility
PRIVATE = 'private'
PUBLIC = 'public'

# Type names used in data type errors
LIST = 'List'
MAP = 'Map'
STRING = 'String'
BOOLEAN = 'Boolean'

# External id operations
ADD = 'add'
REMOVE = 'remove'
EDIT = 'edit'
EXTERNAL_ID_OPERATIONS = (ADD, REMOVE, EDIT)

# Pipeline modes for external id validation
CREATE = 'create'
UPDATE = 'update'
BULK_USER_UPLOAD = 'bulkUserUpload'

# Address types accepted on top-level addresses (case-sensitive)
ADDRESS_TYPES = frozenset({'permanent', 'current', 'residential'})

YEAR_MONTH_DATE_FORMAT = '%Y-%m-%d'
