# webfont_audit/correlator.py
"""
Correlate font fetches with passing ``font-display`` declarations.
"""
from __future__ import annotations

from collections.abc import Collection, Iterable

from webfont_audit.logger import logger
from webfont_audit.models import AuditResult, FontDisplayFinding, NetworkRecord

__all__ = ["MAX_WASTED_MS", "wasted_ms", "audit"]

#: Browsers stop hiding text after ~3s of a pending webfont load.
MAX_WASTED_MS: int = 3000


def wasted_ms(record: NetworkRecord, max_wasted_ms: float = MAX_WASTED_MS) -> float:
    """Time text was likely invisible while *record* loaded, in ``[0, max_wasted_ms]``."""
    # paint time is not modelled; the fetch duration is an upper bound
    duration_ms = (record.end_time - record.start_time) * 1000
    wasted = max(0, min(duration_ms, max_wasted_ms))
    # whole milliseconds serialise as 2000, not 2000.0
    return int(wasted) if float(wasted).is_integer() else wasted


def audit(
    network_records: Iterable[NetworkRecord],
    passing_urls: Collection[str],
    *,
    max_wasted_ms: float = MAX_WASTED_MS,
) -> AuditResult:
    """
    Build one finding per font fetch whose URL is not in *passing_urls*.

    Findings keep the order of *network_records*. URL membership is a literal
    string comparison, so records must carry URLs normalised like the scanner's.
    """
    findings = tuple(
        FontDisplayFinding(url=record.url, wasted_ms=wasted_ms(record, max_wasted_ms))
        for record in network_records
        if record.is_font and record.url not in passing_urls
    )
    for finding in findings:
        logger.debug("Font %s blocks text for up to %.0f ms", finding.url, finding.wasted_ms)
    return AuditResult(findings=findings)
