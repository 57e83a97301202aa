# File: webfont_audit/report/details.py
"""webfont_audit.report.details: метаданные аудита и табличное представление результата."""

from __future__ import annotations

from typing import Any, Dict, List, Sequence, TypedDict

from webfont_audit.models import AuditResult


class TableHeading(TypedDict):
    """Описание колонки таблицы результата."""

    key: str
    itemType: str
    text: str


AUDIT_META: Dict[str, str] = {
    "id": "font-display",
    "title": "All text remains visible during webfont loads",
    "failureTitle": "Ensure text remains visible during webfont load",
    "description": (
        "Leverage the font-display CSS feature to ensure text is user-visible while "
        "webfonts are loading. "
        "[Learn more](https://developers.google.com/web/updates/2016/02/font-display)."
    ),
}

TABLE_HEADINGS: List[TableHeading] = [
    {"key": "url", "itemType": "url", "text": "URL"},
    {"key": "wastedMs", "itemType": "ms", "text": "Potential Savings"},
]


def make_table_details(
    headings: Sequence[TableHeading], items: Sequence[Dict[str, Any]]
) -> Dict[str, Any]:
    """Собирает блок details типа table."""
    return {"type": "table", "headings": list(headings), "items": list(items)}


def build_product(result: AuditResult) -> Dict[str, Any]:
    """Превращает AuditResult в словарь отчёта: заголовок, score, rawValue и таблица находок."""
    return {
        "id": AUDIT_META["id"],
        "title": AUDIT_META["title"] if result.passed else AUDIT_META["failureTitle"],
        "description": AUDIT_META["description"],
        "score": result.score,
        "rawValue": result.passed,
        "details": make_table_details(
            TABLE_HEADINGS, [finding.to_item() for finding in result.findings]
        ),
    }
