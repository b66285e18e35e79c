ONFIDO_API_URL = 'https://api.onfido.com'
VENDOR_NAME = 'Onfido'

APPLICANTS_URL = '/v1/applicants'
APPLICANT_URL = '/v1/applicants/{applicant_id}'
CHECKS_URL = '/v1/applicants/{applicant_id}/checks'
CHECK_URL = '/v1/applicants/{applicant_id}/checks/{check_id}'
# Single report retrieval route, pending confirmation of the API contract.
REPORT_URL = '/v1/checks/{check_id}/checks/{report_id}'

EXPAND_REPORTS = 'expand=reports'

APPLICANT_FIELDS = [
    'title',
    'first_name',
    'last_name',
    'middle_name',
    'email',
    'gender',
    'dob',
    'telephone',
    'mobile',
    'country',
    'addresses',
    'id_numbers',
]

TITLES = ['Mr', 'Mrs', 'Ms', 'Miss']
GENDERS = ['male', 'Male', 'female', 'Female']

EXPRESS_CHECK = 'express'
IDENTITY_REPORT = 'identity'
DOCUMENT_REPORT = 'document'
WATCHLIST_REPORT = 'watchlist'
STREET_LEVEL_REPORT = 'street_level'

IDENTITY_CHECK_PAYLOAD = {
    'type': EXPRESS_CHECK,
    'reports': [{'name': IDENTITY_REPORT}],
}

VALIDATION_ERROR = 'validation_error'
DUPLICATE_APPLICANT_MESSAGE = (
    'applicant You have already entered this applicant into your Onfido system'
)
