from .applicant import Address, Applicant
from .check import Check
from .config import ClientConfig
from .exceptions import (
    ApplicantNotFound,
    ArgumentError,
    DuplicateApplicant,
    InvalidRequest,
    ModelRetrieval,
    OnfidoError,
    UnknownReportType,
)
from .report_factory import create_report
from .reports import (
    DocumentReport,
    IdentityReport,
    Report,
    StreetLevelReport,
    WatchlistReport,
)
from .rest_client import Client

__all__ = [
    'Address',
    'Applicant',
    'ApplicantNotFound',
    'ArgumentError',
    'Check',
    'Client',
    'ClientConfig',
    'DocumentReport',
    'DuplicateApplicant',
    'IdentityReport',
    'InvalidRequest',
    'ModelRetrieval',
    'OnfidoError',
    'Report',
    'StreetLevelReport',
    'UnknownReportType',
    'WatchlistReport',
    'create_report',
]
