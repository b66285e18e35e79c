from typing import Dict

from onfido.applicant import Address, Applicant
from onfido.check import Check
from onfido.dates import str_date_to_timestamp
from onfido.exceptions import ArgumentError, ModelRetrieval
from onfido.onfido_types import AddressDict, ApplicantDict, CheckDict
from onfido.report_factory import create_report
from onfido.reports import Report


def map_address_response(address_info: AddressDict) -> Address:
    address = Address()
    address.flat_number = address_info.get('flat_number')
    address.building_name = address_info.get('building_name')
    address.building_number = address_info.get('building_number')
    address.street = address_info.get('street')
    address.sub_street = address_info.get('sub_street')
    address.town = address_info.get('town')
    address.state = address_info.get('state')
    address.postcode = address_info.get('postcode')
    address.country = address_info.get('country')
    address.start_date = address_info.get('start_date')
    address.end_date = address_info.get('end_date')
    return address


def _response_timestamp(params: ApplicantDict, field: str):
    try:
        return str_date_to_timestamp(params.get(field))
    except ArgumentError as e:
        raise ModelRetrieval(
            f'Could not read applicant {field}: {e}', error_response=dict(params)
        ) from e


def map_applicant_response(params: ApplicantDict) -> Applicant:
    applicant = Applicant()
    applicant.id = params.get('id')
    applicant.href = params.get('href')
    created_at = _response_timestamp(params, 'created_at')
    if created_at is not None:
        applicant.created_at = created_at
    applicant.first_name = params.get('first_name')
    applicant.last_name = params.get('last_name')
    dob = _response_timestamp(params, 'dob')
    if dob is not None:
        applicant.dob = dob
    applicant.email = params.get('email')
    applicant.title = params.get('title')
    applicant.middle_name = params.get('middle_name')
    applicant.gender = params.get('gender')
    applicant.telephone = params.get('telephone')
    applicant.mobile = params.get('mobile')
    applicant.country = params.get('country')
    applicant.id_numbers = params.get('id_numbers') or []

    for address_info in params.get('addresses') or []:
        applicant.add_address(map_address_response(address_info))

    return applicant


def map_reports(check_json: CheckDict) -> Dict[str, Report]:
    reports = {}
    for report_data in check_json.get('reports') or []:
        report = create_report(report_data)
        reports[report.id] = report
    return reports


def map_check_response(check_json: CheckDict, load_reports: bool = True) -> Check:
    reports = map_reports(check_json) if load_reports else {}
    return Check(
        id=check_json['id'],
        created_at=check_json.get('created_at'),
        href=check_json.get('href'),
        type=check_json.get('type'),
        status=check_json.get('status'),
        result=check_json.get('result'),
        reports=reports,
    )
