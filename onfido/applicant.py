from typing import Any, Dict, List, Optional

from onfido.constants import GENDERS, TITLES
from onfido.dates import (
    ISO_8601_FORMAT,
    YYYY_MM_DD,
    format_timestamp,
    is_epoch_timestamp,
    timestamp_to_datetime,
)
from onfido.exceptions import ArgumentError
from onfido.onfido_types import IdNumber


class OnfidoObject:
    """Base for the value objects sent to and read from the API.

    `FIELDS` lists the JSON keys projected by `to_dict`, in order, and each
    one is read through the attribute of the same name.
    """

    FIELDS: List[str] = []

    def to_dict(self) -> Dict[str, Any]:
        return {field: _serialize(getattr(self, field)) for field in self.FIELDS}

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return f'{type(self).__name__}({self.to_dict()!r})'


def _serialize(value):
    if isinstance(value, OnfidoObject):
        return value.to_dict()
    if isinstance(value, list):
        return [_serialize(item) for item in value]
    if isinstance(value, dict):
        return {key: _serialize(item) for key, item in value.items()}
    return value


class Address(OnfidoObject):
    FIELDS = [
        'flat_number',
        'building_name',
        'building_number',
        'street',
        'sub_street',
        'state',
        'town',
        'postcode',
        'country',
        'start_date',
        'end_date',
    ]

    def __init__(self, **kwargs):
        self.flat_number = None
        self.building_name = None
        self.building_number = None
        self.street = None
        self.sub_street = None
        self.town = None
        self.state = None
        self.postcode = None
        self.country = None
        self.start_date = None
        self.end_date = None
        for field, value in kwargs.items():
            if field not in self.FIELDS:
                raise ArgumentError(f'Unknown address field: {field}')
            setattr(self, field, value)


class Applicant(OnfidoObject):
    """The person being verified.

    `created_at` and `dob` are kept as epoch seconds and read back formatted,
    `title` and `gender` only accept the values the API knows about. A
    rejected value raises ArgumentError and the field keeps its old value.
    """

    FIELDS = [
        'id',
        'created_at',
        'href',
        'title',
        'first_name',
        'middle_name',
        'last_name',
        'gender',
        'dob',
        'telephone',
        'mobile',
        'country',
        'id_numbers',
        'addresses',
    ]

    def __init__(self):
        self._id = None
        self._created_at = None
        self._title = None
        self._gender = None
        self._dob = None
        self._id_numbers: List[IdNumber] = []
        self._addresses: List[Address] = []
        self.href = None
        self.first_name = None
        self.middle_name = None
        self.last_name = None
        self.email = None
        self.telephone = None
        self.mobile = None
        self.country = None

    @property
    def id(self) -> Optional[str]:
        return self._id

    @id.setter
    def id(self, value):
        if self._id is not None and value != self._id:
            raise ArgumentError(f'Applicant ID is already set to {self._id}.')
        self._id = value

    @property
    def created_at(self) -> Optional[str]:
        return format_timestamp(self._created_at, ISO_8601_FORMAT)

    @created_at.setter
    def created_at(self, value):
        self._created_at = _epoch_timestamp(value, 'creation date')

    @property
    def title(self) -> Optional[str]:
        return self._title

    @title.setter
    def title(self, value):
        self._title = _one_of(value, TITLES, 'title')

    @property
    def gender(self) -> Optional[str]:
        return self._gender

    @gender.setter
    def gender(self, value):
        self._gender = _one_of(value, GENDERS, 'gender')

    @property
    def dob(self) -> Optional[str]:
        return format_timestamp(self._dob, YYYY_MM_DD)

    @dob.setter
    def dob(self, value):
        self._dob = _epoch_timestamp(value, 'date of birth')

    @property
    def id_numbers(self) -> List[IdNumber]:
        return list(self._id_numbers)

    @id_numbers.setter
    def id_numbers(self, value):
        self._id_numbers = list(value or [])

    @property
    def addresses(self) -> List[Address]:
        return list(self._addresses)

    def add_address(self, address: Address) -> None:
        if not isinstance(address, Address):
            raise ArgumentError('Only Address instances can be added.')
        self._addresses.append(address)


def _one_of(value, allowed: List[str], field_name: str):
    if value is not None and value not in allowed:
        raise ArgumentError(
            f'Invalid {field_name}: {value!r}, expected one of {", ".join(allowed)}.'
        )
    return value


def _epoch_timestamp(value, field_name: str) -> int:
    if not is_epoch_timestamp(value):
        raise ArgumentError(
            f'Invalid {field_name}: {value!r}, expected a unix timestamp.'
        )
    try:
        timestamp_to_datetime(value)
    except (OverflowError, OSError, ValueError) as e:
        raise ArgumentError(
            f'Invalid {field_name}: {value!r}, timestamp out of range.'
        ) from e
    return int(value)
