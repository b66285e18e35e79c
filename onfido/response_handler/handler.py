import logging
from typing import List, Optional

from onfido import requests
from onfido.constants import DUPLICATE_APPLICANT_MESSAGE, VALIDATION_ERROR
from onfido.exceptions import (
    ApplicantNotFound,
    DuplicateApplicant,
    ErrorResponse,
    InvalidRequest,
    ModelRetrieval,
)
from onfido.response_handler.field_errors import format_field_errors
from onfido.response_handler.utils import is_client_error, is_valid_json_response

logger = logging.getLogger(__name__)


def build_error_response(response: requests.Response) -> ErrorResponse:
    return ErrorResponse(
        status=response.status_code,
        reason=response.reason,
        response=is_valid_json_response(response),
        headers=response.headers,
    )


def validation_fields(error_response: ErrorResponse) -> Optional[List[str]]:
    if not is_client_error(error_response.status):
        return None
    if not error_response.is_validation_error(VALIDATION_ERROR):
        return None
    return format_field_errors(error_response.error.get('fields') or {})


# Translates provider validation errors, any other failure is raised
# unchanged as requests.HTTPError so the status and body stay available
def raise_client_exceptions(
    response: requests.Response,
    error_prefix: str,
    check_duplicate: bool = False,
) -> None:
    try:
        response.raise_for_status()
    except requests.HTTPError as http_error:
        error_response = build_error_response(response)
        fields = validation_fields(error_response)
        if fields is None:
            logger.warning(
                f'The http request status code is {error_response.status} and the '
                f'request response is: {error_response.response}'
            )
            raise

        logger.warning(f'{error_prefix} Validation errors: {fields}')
        error_kwargs = dict(
            error_response=error_response.response,
            status_code=error_response.status,
        )
        if check_duplicate and fields and fields[0] == DUPLICATE_APPLICANT_MESSAGE:
            raise DuplicateApplicant(**error_kwargs) from http_error
        raise InvalidRequest.from_fields(
            fields, error_prefix, **error_kwargs
        ) from http_error


def raise_retrieval_exceptions(response: requests.Response, applicant_id: str) -> None:
    try:
        response.raise_for_status()
    except requests.HTTPError as http_error:
        error_kwargs = dict(
            error_response=is_valid_json_response(response),
            status_code=response.status_code,
        )
        if is_client_error(response.status_code):
            raise ApplicantNotFound(applicant_id, **error_kwargs) from http_error
        raise ModelRetrieval(**error_kwargs) from http_error
