# Error codes

NONE = '000'
OTHER = '001'
ARGUMENT_ERROR = '002'
INVALID_REQUEST = '003'
DUPLICATE_APPLICANT = '004'
RESOURCE_NOT_FOUND = '005'
MODEL_RETRIEVAL = '006'
UNKNOWN_REPORT_TYPE = '007'

ERROR_CODES = [
    (NONE, 'None'),
    (OTHER, 'Other'),
    (ARGUMENT_ERROR, 'Invalid argument supplied to the client'),
    (INVALID_REQUEST, 'The request failed the provider validation'),
    (DUPLICATE_APPLICANT, 'The applicant already exists'),
    (RESOURCE_NOT_FOUND, 'Resource not found'),
    (MODEL_RETRIEVAL, 'Error retrieving the remote resource'),
    (UNKNOWN_REPORT_TYPE, 'Report type is not supported'),
]
