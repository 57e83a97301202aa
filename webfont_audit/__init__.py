# webfont_audit/__init__.py
"""
webfont_audit package initializer.
Defines package version and exposes the core audit functions.
"""
__version__ = "0.1.0"

from webfont_audit.correlator import audit
from webfont_audit.models import AuditResult, FontDisplayFinding, NetworkRecord, StylesheetSource
from webfont_audit.scanner import scan_passing_font_urls

__all__ = [
    "__version__",
    "audit",
    "scan_passing_font_urls",
    "AuditResult",
    "FontDisplayFinding",
    "NetworkRecord",
    "StylesheetSource",
]
