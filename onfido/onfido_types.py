from typing import Any, Dict, List, Literal, TypedDict, Union


class IdNumber(TypedDict):
    type: str
    value: str


class AddressDict(TypedDict, total=False):
    flat_number: Union[str, int, None]
    building_name: Union[str, None]
    building_number: Union[str, int, None]
    street: Union[str, None]
    sub_street: Union[str, None]
    town: Union[str, None]
    state: Union[str, None]
    postcode: Union[str, int, None]
    country: Union[str, None]
    start_date: Union[str, None]
    end_date: Union[str, None]


class ApplicantDict(TypedDict, total=False):
    id: str
    href: str
    created_at: str
    title: Literal['Mr', 'Mrs', 'Ms', 'Miss', None]
    first_name: str
    middle_name: str
    last_name: str
    email: str
    gender: Literal['male', 'Male', 'female', 'Female', None]
    dob: str
    telephone: str
    mobile: str
    country: str
    id_numbers: List[IdNumber]
    addresses: List[AddressDict]


class ReportDict(TypedDict, total=False):
    id: str
    name: str
    created_at: str
    status: str
    result: str
    sub_result: str
    variant: str
    href: str
    breakdown: Dict[str, Any]
    properties: Dict[str, Any]


class CheckDict(TypedDict, total=False):
    id: str
    created_at: str
    href: str
    type: str
    status: str
    result: str
    reports: List[Union[ReportDict, str]]

