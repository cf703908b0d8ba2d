"""Report pipeline data types (pure data, no business logic)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from . import constants


class ReportKind(Enum):
    """Which analysis a report runs over the tree."""

    TYPES = constants.REPORT_TYPES
    SCOPES = constants.REPORT_SCOPES
    GLOBALS = constants.REPORT_GLOBALS


@dataclass(frozen=True)
class ReportConfig:
    """Groups report configuration."""

    report: ReportKind = ReportKind.TYPES
    known_globals: frozenset[str] = frozenset()
