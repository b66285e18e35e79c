import logging
from typing import Dict, Type

from onfido.exceptions import UnknownReportType
from onfido.onfido_types import ReportDict
from onfido.reports import (
    DocumentReport,
    IdentityReport,
    Report,
    StreetLevelReport,
    WatchlistReport,
)

logger = logging.getLogger(__name__)


def report_types() -> Dict[str, Type[Report]]:
    return {
        report.report_type: report
        for report in [
            IdentityReport,
            DocumentReport,
            WatchlistReport,
            StreetLevelReport,
        ]
    }


def report_type_of(payload: ReportDict):
    return payload.get('name') or payload.get('type')


def create_report(payload: ReportDict) -> Report:
    report_type = report_type_of(payload)
    report_class = report_types().get(report_type)
    if report_class is None:
        logger.warning(f'Report {payload.get("id")} has an unknown type {report_type}')
        raise UnknownReportType(report_type, error_response=dict(payload))
    return report_class(payload)
