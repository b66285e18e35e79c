import logging
from typing import Any, Dict, Mapping, Optional

from onfido import requests
from onfido.applicant import Address, Applicant
from onfido.check import Check
from onfido.config import ClientConfig
from onfido.constants import (
    APPLICANT_FIELDS,
    APPLICANT_URL,
    APPLICANTS_URL,
    CHECK_URL,
    CHECKS_URL,
    EXPAND_REPORTS,
    IDENTITY_CHECK_PAYLOAD,
    REPORT_URL,
    VENDOR_NAME,
)
from onfido.exceptions import ArgumentError, ModelRetrieval
from onfido.log_utils import log_action, log_request
from onfido.mapper import map_applicant_response, map_check_response
from onfido.query import encode_payload
from onfido.report_factory import create_report
from onfido.reports import Report
from onfido.response_handler.handler import (
    raise_client_exceptions,
    raise_retrieval_exceptions,
)

logger_name = __name__
logger = logging.getLogger(logger_name)


def _log_values():
    return dict(vendor_name=VENDOR_NAME, logger_name=logger_name)


def get_headers(auth_token: str) -> Dict[str, str]:
    return {'Authorization': f'Token token={auth_token}'}


def build_applicant_payload(params: Mapping[str, Any]) -> Dict[str, Any]:
    payload = {key: params[key] for key in APPLICANT_FIELDS if key in params}
    if payload.get('addresses'):
        payload['addresses'] = [
            address.to_dict() if isinstance(address, Address) else address
            for address in payload['addresses']
        ]
    return payload


class Client:
    """Onfido API client.

    Holds the auth token and the transport config for its whole life, every
    call is a single blocking request with no retries.
    """

    def __init__(
        self,
        auth_token: str,
        verify_certs: bool = True,
        config: Optional[ClientConfig] = None,
    ):
        self._auth_token = auth_token
        self.config = config or ClientConfig(verify=verify_certs)

    def __repr__(self):
        return f'Client(base_url={self.config.base_url!r})'

    def _request_kwargs(self, **kwargs) -> Dict[str, Any]:
        return dict(
            headers=get_headers(self._auth_token),
            verify=self.config.verify,
            timeout=self.config.timeout,
            **kwargs,
        )

    @log_action(**_log_values())
    def create_applicant(self, params: Mapping[str, Any]) -> Applicant:
        """Creates an applicant record in Onfido.

        Only the known applicant fields are sent, anything else in `params`
        is dropped.

        Raises DuplicateApplicant when an applicant with the same data
        exists and InvalidRequest when the data fails validation.
        """
        query_string = encode_payload(build_applicant_payload(params))
        url = self.config.url(APPLICANTS_URL)
        log_request(url, 'create_applicant', logger_name)
        response = requests.post(url, **self._request_kwargs(params=query_string))
        raise_client_exceptions(
            response, 'Could not save applicant.', check_duplicate=True
        )
        return map_applicant_response(response.json())

    @log_action(**_log_values())
    def retrieve_applicant(self, applicant_id: str) -> Applicant:
        """Loads an applicant by ID.

        Raises ApplicantNotFound on a 4xx answer and ModelRetrieval on any
        other failure.
        """
        url = self.config.url(APPLICANT_URL.format(applicant_id=applicant_id))
        log_request(url, 'retrieve_applicant', logger_name)
        try:
            response = requests.get(url, **self._request_kwargs())
        except requests.RequestException as e:
            logger.warning(f'Error retrieving applicant {applicant_id}: {e}')
            raise ModelRetrieval() from e
        raise_retrieval_exceptions(response, applicant_id)
        return map_applicant_response(response.json())

    @log_action(**_log_values())
    def run_identity_check(self, applicant_id: Optional[str]) -> Report:
        """Runs an express identity check and returns its identity report."""
        if not applicant_id:
            raise ArgumentError('Applicant\'s ID cannot be null.')

        query_string = encode_payload(IDENTITY_CHECK_PAYLOAD)
        url = self.config.url(CHECKS_URL.format(applicant_id=applicant_id))
        log_request(url, 'run_identity_check', logger_name)
        response = requests.post(url, **self._request_kwargs(params=query_string))
        raise_client_exceptions(response, 'Could not run identity check.')
        check_json = response.json()
        return create_report(check_json['reports'][0])

    @log_action(**_log_values())
    def retrieve_check(
        self, applicant_id: str, check_id: str, load_reports: bool = True
    ) -> Check:
        url = self.config.url(
            CHECK_URL.format(applicant_id=applicant_id, check_id=check_id)
        )
        params = EXPAND_REPORTS if load_reports else None
        log_request(url, 'retrieve_check', logger_name)
        response = requests.get(url, **self._request_kwargs(params=params))
        response.raise_for_status()
        return map_check_response(response.json(), load_reports)

    @log_action(**_log_values())
    def retrieve_report(self, check_id: str, report_id: str) -> Report:
        url = self.config.url(REPORT_URL.format(check_id=check_id, report_id=report_id))
        log_request(url, 'retrieve_report', logger_name)
        response = requests.get(url, **self._request_kwargs())
        response.raise_for_status()
        return create_report(response.json())
