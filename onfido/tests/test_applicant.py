import pytest

from onfido.applicant import Address, Applicant
from onfido.exceptions import ArgumentError

TIMESTAMP = 1441923403


def test_id_getter_setter():
    applicant = Applicant()
    assert applicant.id is None
    applicant.id = 'test-id-1234'
    assert applicant.id == 'test-id-1234'


def test_id_cannot_be_replaced():
    applicant = Applicant()
    applicant.id = 'test-id-1234'
    with pytest.raises(ArgumentError):
        applicant.id = 'another-id'
    assert applicant.id == 'test-id-1234'


def test_created_at_getter_setter():
    applicant = Applicant()
    assert applicant.created_at is None
    applicant.created_at = TIMESTAMP
    assert applicant.created_at == '2015-09-10T17:16:43Z'


@pytest.mark.parametrize(
    'date', ['2015/09/10', '2015-09-10', None, '', 1.5, True, 10**20, str(-(10**20))]
)
def test_invalid_created_at_dates(date):
    applicant = Applicant()
    with pytest.raises(ArgumentError):
        applicant.created_at = date
    assert applicant.created_at is None


def test_invalid_created_at_keeps_previous_value():
    applicant = Applicant()
    applicant.created_at = TIMESTAMP
    with pytest.raises(ArgumentError):
        applicant.created_at = '2015-09-10'
    assert applicant.created_at == '2015-09-10T17:16:43Z'


def test_date_of_birth_getter_setter():
    applicant = Applicant()
    assert applicant.dob is None
    applicant.dob = TIMESTAMP
    assert applicant.dob == '2015-09-10'


def test_date_of_birth_accepts_numeric_strings():
    applicant = Applicant()
    applicant.dob = str(TIMESTAMP)
    assert applicant.dob == '2015-09-10'


def test_out_of_range_date_of_birth_keeps_previous_value():
    applicant = Applicant()
    applicant.dob = TIMESTAMP
    with pytest.raises(ArgumentError):
        applicant.dob = 10**20
    assert applicant.dob == '2015-09-10'
    assert applicant.to_dict()['dob'] == '2015-09-10'


def test_date_of_birth_before_epoch():
    applicant = Applicant()
    applicant.dob = -64800
    assert applicant.dob == '1969-12-31'


@pytest.mark.parametrize('dob', ['2015/09/10', '2015-09-10', None, ''])
def test_invalid_dates_of_birth(dob):
    applicant = Applicant()
    with pytest.raises(ArgumentError):
        applicant.dob = dob
    assert applicant.dob is None


@pytest.mark.parametrize('title', ['Mr', 'Ms', 'Mrs', 'Miss'])
def test_valid_titles(title):
    applicant = Applicant()
    assert applicant.title is None
    applicant.title = title
    assert applicant.title == title


@pytest.mark.parametrize('title', ['Mr.', 'Ms.', 'Mrs.', 'mr', 'MISS', ''])
def test_invalid_titles(title):
    applicant = Applicant()
    with pytest.raises(ArgumentError):
        applicant.title = title
    assert applicant.title is None


def test_invalid_title_keeps_previous_value():
    applicant = Applicant()
    applicant.title = 'Mrs'
    with pytest.raises(ArgumentError):
        applicant.title = 'Dr'
    assert applicant.title == 'Mrs'


@pytest.mark.parametrize('gender', ['male', 'Male', 'female', 'Female'])
def test_valid_genders(gender):
    applicant = Applicant()
    assert applicant.gender is None
    applicant.gender = gender
    assert applicant.gender == gender


@pytest.mark.parametrize('gender', ['m', 'M', 'f', 'F', 'MALE', ''])
def test_invalid_genders(gender):
    applicant = Applicant()
    with pytest.raises(ArgumentError):
        applicant.gender = gender
    assert applicant.gender is None


def test_argument_error_is_value_error():
    applicant = Applicant()
    with pytest.raises(ValueError):
        applicant.gender = 'm'


@pytest.mark.parametrize(
    'phone_number',
    [
        '1234567890',
        '123-456-7890',
        '(123) 456-7890',
        '+1 123 456 7890',
        None,
        '',
        '12345',
    ],
)
def test_phone_numbers_are_not_validated(phone_number):
    applicant = Applicant()
    applicant.telephone = phone_number
    applicant.mobile = phone_number
    assert applicant.telephone == phone_number
    assert applicant.mobile == phone_number


def test_id_numbers_are_replaced():
    applicant = Applicant()
    applicant.id_numbers = [{'type': 'ssn', 'value': '123-45-6789'}]
    applicant.id_numbers = [{'type': 'passport', 'value': 'A1234'}]
    assert applicant.id_numbers == [{'type': 'passport', 'value': 'A1234'}]


def test_addresses_keep_insertion_order():
    applicant = Applicant()
    applicant.add_address(Address(street='First Street'))
    applicant.add_address(Address(street='Second Street'))
    assert [a.street for a in applicant.addresses] == ['First Street', 'Second Street']


def test_add_address_rejects_other_types():
    applicant = Applicant()
    with pytest.raises(ArgumentError):
        applicant.add_address({'street': 'Main Street'})
    assert applicant.addresses == []


def test_json_serialization():
    applicant = Applicant()
    applicant.title = 'Mr'
    applicant.first_name = 'John'
    applicant.middle_name = 'Adam'
    applicant.last_name = 'Smith'
    applicant.id_numbers = [{'type': 'ssn', 'value': '123-45-6789'}]
    address = Address()
    address.building_number = 100
    address.street = 'Main Street'
    address.town = 'Springfield'
    address.state = 'IL'
    address.postcode = 12345
    address.start_date = '2013-01-01'
    applicant.add_address(address)

    assert applicant.to_dict() == {
        'id': None,
        'created_at': None,
        'href': None,
        'title': 'Mr',
        'first_name': 'John',
        'middle_name': 'Adam',
        'last_name': 'Smith',
        'gender': None,
        'dob': None,
        'telephone': None,
        'mobile': None,
        'country': None,
        'id_numbers': [{'type': 'ssn', 'value': '123-45-6789'}],
        'addresses': [
            {
                'flat_number': None,
                'building_name': None,
                'building_number': 100,
                'street': 'Main Street',
                'sub_street': None,
                'state': 'IL',
                'town': 'Springfield',
                'postcode': 12345,
                'country': None,
                'start_date': '2013-01-01',
                'end_date': None,
            }
        ],
    }


def test_json_serialization_formats_dates():
    applicant = Applicant()
    applicant.created_at = TIMESTAMP
    applicant.dob = TIMESTAMP
    data = applicant.to_dict()
    assert data['created_at'] == '2015-09-10T17:16:43Z'
    assert data['dob'] == '2015-09-10'
