# === FILE: webfont_audit/scanner.py ===
"""Extract ``@font-face`` sources that declare a passing ``font-display``.

This is **not** a CSS parser. A handful of regular expressions pull out every
``@font-face { ... }`` block, the ``font-display`` value and the ``url(...)``
references of its ``src``. Anything that does not match is ignored, so messy
stylesheets never abort an audit.

The result is a frozen set of absolute, canonical URLs.  The correlator
compares it against network record URLs by plain string equality, so both
sides have to be normalised the same way (see :func:`canonical_url`).
"""
from __future__ import annotations

import re
from collections.abc import Iterable, Mapping, Sequence
from functools import lru_cache
from typing import Any
from urllib.parse import quote, urljoin, urlsplit, urlunsplit

from webfont_audit.logger import logger
from webfont_audit.models import PassingURLSet

__all__: Sequence[str] = (
    "PASSING_FONT_DISPLAY",
    "scan_passing_font_urls",
    "canonical_url",
)

#: ``font-display`` keywords that avoid indefinitely invisible text.
PASSING_FONT_DISPLAY: tuple[str, ...] = ("block", "fallback", "optional", "swap")

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")
_FONT_FACE_RE = re.compile(r"@font-face\s*{(.*?)}")
_FONT_DISPLAY_RE = re.compile(r"font-display:(.*?);")
_CSS_URL_RE = re.compile(r"url\((.*?)\)")
_QUOTES = ('"', "'")
_DEFAULT_PORTS = {"http": "80", "https": "443", "ws": "80", "wss": "443", "ftp": "21"}
# characters browsers leave unescaped in http(s) paths and queries
_PATH_SAFE = "/%:@!$&'()*+,;=~[]|^"
_QUERY_SAFE = "/%:@!$&()*+,;=~[]|^`{}?"


@lru_cache(maxsize=16)
def _keyword_pattern(keywords: tuple[str, ...]) -> re.Pattern[str]:
    return re.compile("|".join(re.escape(k) for k in keywords))


def _content_of(stylesheet: Any) -> str:
    """Accept ``StylesheetSource``, ``{"content": ...}`` or anything with ``.content``."""
    if isinstance(stylesheet, Mapping):
        content = stylesheet.get("content")
    else:
        content = getattr(stylesheet, "content", None)
    return content if isinstance(content, str) else ""


def _strip_quotes(raw: str) -> str:
    """Trim whitespace and drop one matching pair of surrounding quotes."""
    value = raw.strip()
    first = value[:1]
    if first in _QUOTES and first == value[-1:]:
        return value[1:-1]
    return value


def _strip_default_port(scheme: str, hostport: str) -> str:
    host, sep, port = hostport.rpartition(":")
    if not sep or host.endswith(":") or "]" in port:
        # no port, or a bare IPv6 literal
        return hostport
    if not port or _DEFAULT_PORTS.get(scheme) == port:
        return host
    return hostport


def canonical_url(url: str) -> str:
    """Browser ``href`` form of an absolute URL.

    Scheme and host are lower-cased, the scheme's default port is dropped, an
    empty http(s) path becomes ``/`` and path/query are percent-encoded
    (UTF-8), leaving existing escapes alone.  URLs without an authority
    (``data:``, ``blob:``) keep their opaque path as is.
    """
    parts = urlsplit(url)
    scheme = parts.scheme.lower()
    if not parts.netloc:
        return urlunsplit((scheme, "", parts.path, parts.query, parts.fragment))

    userinfo, at, hostport = parts.netloc.rpartition("@")
    netloc = f"{userinfo}{at}{_strip_default_port(scheme, hostport.lower())}"
    path = quote(parts.path, safe=_PATH_SAFE)
    if scheme in ("http", "https") and not path:
        path = "/"
    query = quote(parts.query, safe=_QUERY_SAFE)
    return urlunsplit((scheme, netloc, path, query, parts.fragment))


def _passing_declarations(css: str, keywords: re.Pattern[str]) -> Iterable[str]:
    """Yield every ``@font-face`` block of *css* whose ``font-display`` passes."""
    flattened = _LINE_BREAK_RE.sub(" ", css)
    for match in _FONT_FACE_RE.finditer(flattened):
        declaration = match.group(0)
        font_display = _FONT_DISPLAY_RE.search(declaration)
        if font_display is None:
            continue
        if not keywords.search(font_display.group(1)):
            continue
        yield declaration


def _resolve(raw_url: str, base_url: str) -> str | None:
    try:
        return canonical_url(urljoin(base_url, _strip_quotes(raw_url)))
    except ValueError as exc:
        logger.debug("Skipping unresolvable font URL %r: %s", raw_url, exc)
        return None


def scan_passing_font_urls(
    stylesheets: Iterable[Any],
    base_url: str,
    *,
    passing_values: Sequence[str] = PASSING_FONT_DISPLAY,
) -> PassingURLSet:
    """Collect absolute URLs of fonts declared with a passing ``font-display``.

    Parameters
    ----------
    stylesheets
        Stylesheet sources, each exposing the raw CSS as ``content``.
    base_url
        Final page URL; relative ``src`` URLs are resolved against it.
    passing_values
        Keywords accepted as passing.  A ``font-display`` value passes when it
        *contains* one of them, so quoting and stray whitespace do not matter.

    A block without ``font-display``, with a failing value, or without any
    ``url(...)`` contributes nothing.
    """
    keywords = _keyword_pattern(tuple(passing_values))
    passing: set[str] = set()

    for stylesheet in stylesheets:
        for declaration in _passing_declarations(_content_of(stylesheet), keywords):
            for raw_url in _CSS_URL_RE.findall(declaration):
                resolved = _resolve(raw_url, base_url)
                if resolved is not None:
                    passing.add(resolved)

    logger.debug("Found %d font URL(s) with a passing font-display", len(passing))
    return frozenset(passing)
