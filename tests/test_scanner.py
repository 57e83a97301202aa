# File: tests/test_scanner.py
"""Тесты для извлечения проходных @font-face URL (webfont_audit.scanner)."""
import pytest

from webfont_audit.models import StylesheetSource
from webfont_audit.scanner import canonical_url, scan_passing_font_urls


@pytest.fixture()
def scan(page_url):
    """
    scan(*css) -> passing URL set for the given stylesheet texts against page_url.
    """

    def _scan(*contents: str) -> frozenset:
        return scan_passing_font_urls([StylesheetSource(c) for c in contents], page_url)

    return _scan


def test_no_font_face_blocks(scan):
    assert scan("body { font-family: serif; }") == frozenset()


def test_no_stylesheets(page_url):
    assert scan_passing_font_urls([], page_url) == frozenset()


def test_missing_font_display_contributes_nothing(scan, css_without_display):
    assert scan(css_without_display) == frozenset()


def test_passing_font_display_resolves_relative_urls(scan, css_with_display):
    assert scan(css_with_display) == {
        "https://example.com/foo/bar/font-a.woff",
        "https://example.com/foo/font-b.woff",
        "https://example.com/foo/bar/font.woff",
    }


@pytest.mark.parametrize("value", ["block", "fallback", "optional", "swap", " swap ", '"swap"'])
def test_passing_values(scan, value):
    css = f"@font-face {{ font-display:{value}; src: url(a.woff2); }}"
    assert scan(css) == {"https://example.com/foo/bar/a.woff2"}


@pytest.mark.parametrize("value", ["auto", "", "inherit"])
def test_failing_values(scan, value):
    css = f"@font-face {{ font-display:{value}; src: url(a.woff2); }}"
    assert scan(css) == frozenset()


def test_substring_keyword_match_is_kept(scan):
    css = "@font-face { font-display: nonswap; src: url(a.woff2); }"
    assert scan(css) == {"https://example.com/foo/bar/a.woff2"}


def test_failing_block_does_not_borrow_from_passing_one(scan):
    css = """
      @font-face { font-display: swap; src: url(good.woff2); }
      @font-face { font-display: auto; src: url(bad.woff2); }
      @font-face { src: url(missing.woff2); }
    """
    assert scan(css) == {"https://example.com/foo/bar/good.woff2"}


@pytest.mark.parametrize(
    "literal",
    ['"fonts/a.woff2"', "'fonts/a.woff2'", "fonts/a.woff2", "  'fonts/a.woff2'  "],
)
def test_quoted_and_unquoted_urls_match(scan, literal):
    css = f"@font-face {{ font-display: swap; src: url({literal}) format('woff2'); }}"
    assert scan(css) == {"https://example.com/foo/bar/fonts/a.woff2"}


def test_mismatched_quotes_are_kept(scan):
    css = "@font-face { font-display: swap; src: url(\"a.woff2'); }"
    assert scan(css) == {"https://example.com/foo/bar/%22a.woff2'"}


def test_all_src_urls_are_collected(scan):
    css = (
        "@font-face { font-display: swap; "
        "src: url(/static/a.woff2) format('woff2'), url(https://cdn.example.org/a.woff) format('woff'); }"
    )
    assert scan(css) == {
        "https://example.com/static/a.woff2",
        "https://cdn.example.org/a.woff",
    }


def test_passing_display_without_src_contributes_nothing(scan):
    css = "@font-face { font-family: Foo; font-display: swap; }"
    assert scan(css) == frozenset()


def test_declaration_spanning_lines(scan):
    css = "@font-face {\r\n  font-display:\n swap;\r  src:\n url(a.woff2);\n}"
    assert scan(css) == {"https://example.com/foo/bar/a.woff2"}


def test_lazy_body_stops_at_first_closing_brace(scan):
    # font-display sits in the second block and must not leak into the first
    css = "@font-face { src: url(a.woff2); } .x { font-display: swap; }"
    assert scan(css) == frozenset()


def test_multiple_stylesheets_accumulate(scan):
    first = "@font-face { font-display: swap; src: url(a.woff2); }"
    second = "@font-face { font-display: optional; src: url(/b.woff2); }"
    assert scan(first, second) == {
        "https://example.com/foo/bar/a.woff2",
        "https://example.com/b.woff2",
    }


def test_malformed_css_is_tolerated(scan):
    css = "@font-face { font-display: swap; src: url(a.woff2 } @font-face {{{ ;;; url("
    assert scan(css) == frozenset()


def test_unresolvable_url_is_skipped(scan):
    css = "@font-face { font-display: swap; src: url(http://[::1/a.woff2), url(b.woff2); }"
    assert scan(css) == {"https://example.com/foo/bar/b.woff2"}


def test_accepts_mappings_and_missing_content(page_url):
    css = "@font-face { font-display: swap; src: url(a.woff2); }"
    result = scan_passing_font_urls([{"content": css}, {"content": None}, {}], page_url)
    assert result == {"https://example.com/foo/bar/a.woff2"}


def test_custom_passing_values(page_url):
    css = "@font-face { font-display: block; src: url(a.woff2); }"
    sheets = [StylesheetSource(css)]
    assert scan_passing_font_urls(sheets, page_url, passing_values=("swap",)) == frozenset()
    assert scan_passing_font_urls(sheets, page_url, passing_values=("block",)) == {
        "https://example.com/foo/bar/a.woff2"
    }


def test_data_url_passes_through(scan):
    css = "@font-face { font-display: swap; src: url(data:font/woff2;base64,AAAA); }"
    assert scan(css) == {"data:font/woff2;base64,AAAA"}


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("HTTPS://Example.COM", "https://example.com/"),
        ("https://example.com/Fonts/A.woff2", "https://example.com/Fonts/A.woff2"),
        ("https://User@Example.com:8443/a", "https://User@example.com:8443/a"),
        ("https://example.com:443/a.woff2", "https://example.com/a.woff2"),
        ("http://example.com:80/a.woff2", "http://example.com/a.woff2"),
        ("http://example.com:443/a.woff2", "http://example.com:443/a.woff2"),
        ("https://example.com:/a.woff2", "https://example.com/a.woff2"),
        ("https://[::1]:443/a.woff2", "https://[::1]/a.woff2"),
        ("https://[::1]/a.woff2", "https://[::1]/a.woff2"),
        ("https://example.com/my font.woff2", "https://example.com/my%20font.woff2"),
        ("https://example.com/fonts/ü.woff2", "https://example.com/fonts/%C3%BC.woff2"),
        ("https://example.com/my%20font.woff2", "https://example.com/my%20font.woff2"),
        ("https://example.com/a.woff2?v=1 2&x=é", "https://example.com/a.woff2?v=1%202&x=%C3%A9"),
    ],
)
def test_canonical_url(raw, expected):
    assert canonical_url(raw) == expected


@pytest.mark.parametrize(
    "literal,expected",
    [
        ("'my font.woff2'", "https://example.com/foo/bar/my%20font.woff2"),
        ("https://example.com:443/a.woff2", "https://example.com/a.woff2"),
        ("/fonts/ü.woff2", "https://example.com/fonts/%C3%BC.woff2"),
    ],
)
def test_declared_urls_use_browser_href_form(scan, literal, expected):
    css = f"@font-face {{ font-display: swap; src: url({literal}); }}"
    assert scan(css) == {expected}


def test_scan_is_idempotent(scan, css_with_display):
    assert scan(css_with_display) == scan(css_with_display)
