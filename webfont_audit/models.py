# webfont_audit/models.py
"""
Data models shared by the scanner, the correlator and the report layer.
"""
from __future__ import annotations

from dataclasses import dataclass

#: Absolute font URLs declared with a passing ``font-display`` value.
PassingURLSet = frozenset[str]

#: ``resourceType`` value the browser assigns to webfont fetches.
FONT_RESOURCE_TYPE = "Font"


@dataclass(slots=True, frozen=True)
class StylesheetSource:
    """Raw CSS text of one stylesheet."""

    content: str


@dataclass(slots=True, frozen=True)
class NetworkRecord:
    """One network request; times are seconds since navigation start."""

    url: str
    resource_type: str
    start_time: float
    end_time: float

    @property
    def is_font(self) -> bool:
        return self.resource_type == FONT_RESOURCE_TYPE


@dataclass(slots=True, frozen=True)
class FontDisplayFinding:
    """A font fetch that was not covered by a passing ``font-display``."""

    url: str
    wasted_ms: float

    def to_item(self) -> dict[str, object]:
        """Table row in the ``{url, wastedMs}`` shape used by reports."""
        return {"url": self.url, "wastedMs": self.wasted_ms}


@dataclass(slots=True, frozen=True)
class AuditResult:
    """Outcome of one audit run. ``passed`` is derived from ``findings``."""

    findings: tuple[FontDisplayFinding, ...] = ()

    @property
    def passed(self) -> bool:
        return not self.findings

    @property
    def score(self) -> int:
        return int(self.passed)
