from __future__ import annotations

from dataclasses import dataclass

from student_dashboard.config import BackendSettings
from student_dashboard.data.filters import DEFAULT_FILTERS, RosterFilters


@dataclass
class PageContext:
    settings: BackendSettings
    filters: RosterFilters = DEFAULT_FILTERS
