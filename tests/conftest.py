# File: tests/conftest.py
import json
from pathlib import Path
from typing import Any, Dict, List

import pytest

from webfont_audit.artifacts import Artifacts
from webfont_audit.models import NetworkRecord, StylesheetSource

PAGE_URL = "https://example.com/foo/bar/page"

FONT_FACES_WITHOUT_DISPLAY = """
  @font-face {
    src: url("./font-a.woff");
  }

  @font-face {
    src: url('../font-b.woff');
  }

  @font-face {
    src: url(font.woff);
  }
"""

FONT_FACES_WITH_DISPLAY = """
  @font-face {
    font-display: 'block';
    src: url("./font-a.woff");
  }

  @font-face {
    font-display: 'fallback';
    src: url('../font-b.woff');
  }

  @font-face {
    font-display: 'optional';
    src: url(font.woff);
  }
"""


def font_record(url: str, start: float, end: float, resource_type: str = "Font") -> NetworkRecord:
    return NetworkRecord(url=url, resource_type=resource_type, start_time=start, end_time=end)


@pytest.fixture()
def page_url() -> str:
    """
    Final page URL every relative font URL is resolved against.
    """
    return PAGE_URL


@pytest.fixture()
def css_without_display() -> str:
    """
    Three @font-face blocks without font-display.
    """
    return FONT_FACES_WITHOUT_DISPLAY


@pytest.fixture()
def css_with_display() -> str:
    """
    The same three blocks with block/fallback/optional font-display.
    """
    return FONT_FACES_WITH_DISPLAY


@pytest.fixture()
def make_record():
    """
    Factory for NetworkRecord: make_record(url, start, end, resource_type="Font").
    """
    return font_record


@pytest.fixture()
def font_records() -> List[NetworkRecord]:
    """
    Three font fetches lasting 2s, 4s and 1s.
    """
    return [
        font_record("https://example.com/foo/bar/font-a.woff", 1, 3),
        font_record("https://example.com/foo/font-b.woff", 1, 5),
        font_record("https://example.com/foo/bar/font.woff", 1, 2),
    ]


@pytest.fixture()
def make_artifacts(font_records):
    """
    Build Artifacts for PAGE_URL from CSS text; records default to font_records.
    """

    def _make(css: str, records=None) -> Artifacts:
        return Artifacts(
            final_url=PAGE_URL,
            stylesheets=[StylesheetSource(css)],
            network_logs={"defaultPass": font_records if records is None else records},
        )

    return _make


@pytest.fixture()
def bundle_data() -> Dict[str, Any]:
    """
    Artifact bundle in the gatherer's on-disk format.
    """
    return {
        "URL": {"finalUrl": PAGE_URL},
        "CSSUsage": {
            "stylesheets": [
                {"header": {"styleSheetId": "1"}, "content": FONT_FACES_WITHOUT_DISPLAY},
            ]
        },
        "networkRecords": {
            "defaultPass": [
                {
                    "url": "https://example.com/foo/bar/font-a.woff",
                    "resourceType": "Font",
                    "startTime": 1,
                    "endTime": 3,
                },
                {
                    "url": "https://example.com/foo/bar/page",
                    "resourceType": "Document",
                    "startTime": 0,
                    "endTime": 1,
                },
            ]
        },
    }


@pytest.fixture()
def bundle_file(tmp_path, bundle_data) -> Path:
    path = tmp_path / "artifacts.json"
    path.write_text(json.dumps(bundle_data), encoding="utf-8")
    return path
