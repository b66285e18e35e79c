from typing import Dict, List, Union

import onfido.error_codes as error_codes


class OnfidoError(Exception):
    """Intended to map all the errors the client can raise
    after translating a provider response or a bad argument."""

    error_code = error_codes.OTHER

    def __init__(
        self,
        error_message: Union[str, None] = None,
        error_response: Union[Dict, None] = None,
        status_code: Union[int, None] = None,
    ):
        if error_response is None:
            error_response = {}
        super().__init__(error_message)
        self.error_message = error_message
        self.error_response = error_response
        self.status_code = status_code

    def __str__(self):
        return self.error_message or ''

    @property
    def error_description(self) -> str:
        return dict(error_codes.ERROR_CODES).get(self.error_code, '')


class ArgumentError(OnfidoError, ValueError):
    """Intended to be used when a precondition is violated
    before any request is sent, or a setter gets an invalid value."""

    error_code = error_codes.ARGUMENT_ERROR


class InvalidRequest(OnfidoError):
    """The provider rejected the submitted fields,
    the flattened field messages are kept in `fields`."""

    error_code = error_codes.INVALID_REQUEST

    def __init__(self, fields: List[str], error_message: str, **kwargs):
        super().__init__(error_message, **kwargs)
        self.fields = fields

    @staticmethod
    def from_fields(fields: List[str], prefix: str, **kwargs):
        return InvalidRequest(fields, f'{prefix} {" ".join(fields)}', **kwargs)


class DuplicateApplicant(OnfidoError):
    error_code = error_codes.DUPLICATE_APPLICANT

    def __init__(self, error_message: Union[str, None] = None, **kwargs):
        if error_message is None:
            error_message = (
                'This applicant has already been saved to the Onfido system.'
            )
        super().__init__(error_message, **kwargs)


class ApplicantNotFound(OnfidoError):
    error_code = error_codes.RESOURCE_NOT_FOUND

    def __init__(self, applicant_id: str, **kwargs):
        super().__init__(f'Could not find user with ID: {applicant_id}', **kwargs)
        self.applicant_id = applicant_id


class ModelRetrieval(OnfidoError):
    error_code = error_codes.MODEL_RETRIEVAL

    def __init__(self, error_message: Union[str, None] = None, **kwargs):
        if error_message is None:
            error_message = 'An error occurred while retrieving the remote resource.'
        super().__init__(error_message, **kwargs)


class UnknownReportType(OnfidoError):
    error_code = error_codes.UNKNOWN_REPORT_TYPE

    def __init__(self, report_type, **kwargs):
        super().__init__(f'Unknown report type: {report_type}', **kwargs)
        self.report_type = report_type


# Class to hold the error body received from the provider
class ErrorResponse:
    def __init__(self, status=None, reason=None, response=None, headers=None):
        self.status = status
        self.reason = reason
        self.response = response
        self.headers = headers

    @property
    def error(self) -> Dict:
        if isinstance(self.response, dict):
            error = self.response.get('error')
            if isinstance(error, dict):
                return error
        return {}

    def is_validation_error(self, validation_type: str) -> bool:
        return self.error.get('type') == validation_type
