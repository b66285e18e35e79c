from typing import Any, Dict, List, Optional

from onfido.constants import (
    DOCUMENT_REPORT,
    IDENTITY_REPORT,
    STREET_LEVEL_REPORT,
    WATCHLIST_REPORT,
)
from onfido.onfido_types import ReportDict

CLEAR = 'clear'


class Report:
    """Result of a single verification belonging to a check.

    Subclasses set `report_type` to the API report name and add accessors
    over their own `breakdown` and `properties`.
    """

    report_type: Optional[str] = None

    def __init__(self, payload: ReportDict):
        self.raw: Dict[str, Any] = dict(payload)
        self.id = payload.get('id')
        self.name = payload.get('name', self.report_type)
        self.created_at = payload.get('created_at')
        self.status = payload.get('status')
        self.result = payload.get('result')
        self.sub_result = payload.get('sub_result')
        self.variant = payload.get('variant')
        self.href = payload.get('href')
        self.breakdown: Dict[str, Any] = payload.get('breakdown') or {}
        self.properties: Dict[str, Any] = payload.get('properties') or {}

    @property
    def is_clear(self) -> bool:
        return self.result == CLEAR

    def breakdown_result(self, key: str) -> Optional[str]:
        return (self.breakdown.get(key) or {}).get('result')

    def __repr__(self):
        return (
            f'{type(self).__name__}(id={self.id!r}, status={self.status!r}, '
            f'result={self.result!r})'
        )


class IdentityReport(Report):
    report_type = IDENTITY_REPORT

    @property
    def address_result(self) -> Optional[str]:
        return self.breakdown_result('address')

    @property
    def date_of_birth_result(self) -> Optional[str]:
        return self.breakdown_result('date_of_birth')

    @property
    def mortality_result(self) -> Optional[str]:
        return self.breakdown_result('mortality')

    @property
    def matched_addresses(self) -> List[Dict[str, Any]]:
        return self.properties.get('matched_addresses') or []


class DocumentReport(Report):
    report_type = DOCUMENT_REPORT

    @property
    def document_type(self) -> Optional[str]:
        return self.properties.get('document_type')

    @property
    def issuing_country(self) -> Optional[str]:
        return self.properties.get('issuing_country')

    @property
    def date_of_expiry(self) -> Optional[str]:
        return self.properties.get('date_of_expiry')

    @property
    def image_integrity_result(self) -> Optional[str]:
        return self.breakdown_result('image_integrity')


class WatchlistReport(Report):
    report_type = WATCHLIST_REPORT

    @property
    def records(self) -> List[Dict[str, Any]]:
        return self.properties.get('records') or []

    @property
    def sanction_result(self) -> Optional[str]:
        return self.breakdown_result('sanction')

    @property
    def politically_exposed_person_result(self) -> Optional[str]:
        return self.breakdown_result('politically_exposed_person')


class StreetLevelReport(Report):
    report_type = STREET_LEVEL_REPORT

    @property
    def verification_address(self) -> Dict[str, Any]:
        return self.properties.get('verification_address') or {}

    @property
    def letter_status(self) -> Optional[str]:
        return self.properties.get('verification_letter_status')
