import pytest
import requests
from httmock import response

from onfido import error_codes
from onfido.exceptions import (
    ApplicantNotFound,
    DuplicateApplicant,
    ErrorResponse,
    InvalidRequest,
    ModelRetrieval,
)
from onfido.response_handler.handler import (
    build_error_response,
    raise_client_exceptions,
    raise_retrieval_exceptions,
    validation_fields,
)
from onfido.response_handler.utils import INVALID_JSON_MESSAGE

ERROR_PREFIX = 'Could not save applicant.'
ALREADY_ENTERED = 'You have already entered this applicant into your Onfido system'


def mock_response(code, content):
    return response(status_code=code, content=content)


def validation_error(fields):
    return {'error': {'type': 'validation_error', 'message': 'error', 'fields': fields}}


def test_success_response_is_not_raised():
    raise_client_exceptions(mock_response(201, {'id': '1'}), ERROR_PREFIX)
    raise_retrieval_exceptions(mock_response(200, {'id': '1'}), '1')


def test_validation_error_422():
    res = mock_response(422, validation_error({'last_name': ["can't be blank"]}))
    with pytest.raises(InvalidRequest) as e:
        raise_client_exceptions(res, ERROR_PREFIX)

    assert e.value.fields == ["last_name can't be blank"]
    assert e.value.error_code == error_codes.INVALID_REQUEST
    assert e.value.error_response['error']['type'] == 'validation_error'


def test_duplicate_applicant_only_when_requested():
    fields = {'applicant': [ALREADY_ENTERED]}
    with pytest.raises(DuplicateApplicant) as e:
        raise_client_exceptions(
            mock_response(422, validation_error(fields)),
            ERROR_PREFIX,
            check_duplicate=True,
        )
    assert e.value.error_code == error_codes.DUPLICATE_APPLICANT

    with pytest.raises(InvalidRequest):
        raise_client_exceptions(mock_response(422, validation_error(fields)), 'x')


def test_duplicate_applicant_must_be_first_field():
    fields = {
        'email': ['is invalid'],
        'applicant': [ALREADY_ENTERED],
    }
    with pytest.raises(InvalidRequest):
        raise_client_exceptions(
            mock_response(422, validation_error(fields)),
            ERROR_PREFIX,
            check_duplicate=True,
        )


@pytest.mark.parametrize(
    'code, content',
    [
        (401, {'error': {'type': 'authorization_error', 'message': 'denied'}}),
        (404, {'message': 'not found'}),
        (400, 'not json'),
        (500, validation_error({'first_name': ["can't be blank"]})),
    ],
)
def test_other_errors_are_not_translated(code, content):
    res = mock_response(code, content)
    with pytest.raises(requests.HTTPError) as e:
        raise_client_exceptions(res, ERROR_PREFIX)

    assert e.value.response is res
    assert e.value.response.status_code == code


def test_retrieval_not_found():
    with pytest.raises(ApplicantNotFound) as e:
        raise_retrieval_exceptions(mock_response(404, {'message': 'x'}), 'abc')

    assert e.value.applicant_id == 'abc'
    assert e.value.error_code == error_codes.RESOURCE_NOT_FOUND
    assert e.value.error_description == 'Resource not found'
    assert e.value.status_code == 404


def test_retrieval_server_error():
    with pytest.raises(ModelRetrieval) as e:
        raise_retrieval_exceptions(mock_response(503, 'unavailable'), 'abc')

    assert e.value.error_code == error_codes.MODEL_RETRIEVAL
    assert e.value.error_response == {'message': INVALID_JSON_MESSAGE}


def test_build_error_response():
    error_response = build_error_response(mock_response(422, validation_error({})))

    assert error_response.status == 422
    assert error_response.is_validation_error('validation_error')
    assert validation_fields(error_response) == []


def test_error_response_without_error_body():
    error_response = ErrorResponse(status=422, response={'message': 'x'})

    assert error_response.error == {}
    assert not error_response.is_validation_error('validation_error')
    assert validation_fields(error_response) is None
