# File: webfont_audit/report/__init__.py
"""webfont_audit.report: табличные details и генерация отчётов (JSON и HTML) для CLI и тестов."""

from webfont_audit.report.details import (
    AUDIT_META,
    TABLE_HEADINGS,
    build_product,
    make_table_details,
)
from webfont_audit.report.html_report import render_html
from webfont_audit.report.json_report import render_json

__all__ = [
    "AUDIT_META",
    "TABLE_HEADINGS",
    "build_product",
    "make_table_details",
    "render_json",
    "render_html",
]
