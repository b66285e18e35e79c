import dataclasses
from types import MappingProxyType
from typing import Mapping, Optional

from onfido.reports import Report


@dataclasses.dataclass(frozen=True)
class Check:
    id: str
    created_at: Optional[str] = None
    href: Optional[str] = None
    type: Optional[str] = None
    status: Optional[str] = None
    result: Optional[str] = None
    reports: Mapping[str, Report] = dataclasses.field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, 'reports', MappingProxyType(dict(self.reports)))

    def report(self, report_id: str) -> Optional[Report]:
        return self.reports.get(report_id)
