# File: webfont_audit/engine.py
"""webfont_audit.engine: orchestration of one font-display audit run."""

from __future__ import annotations

from typing import Optional

from webfont_audit.artifacts import Artifacts
from webfont_audit.config import AuditConfig
from webfont_audit.correlator import audit
from webfont_audit.logger import logger
from webfont_audit.models import AuditResult
from webfont_audit.scanner import scan_passing_font_urls

__all__ = ["run_audit"]


async def run_audit(artifacts: Artifacts, config: Optional[AuditConfig] = None) -> AuditResult:
    """
    Run the audit over *artifacts*.

    Network records for ``config.default_pass`` come from the artifacts'
    asynchronous provider; its errors propagate unchanged. A pass without a
    log is audited as a page without requests.
    """
    config = config or AuditConfig()

    network_log = artifacts.network_logs.get(config.default_pass, [])
    network_records = await artifacts.request_network_records(network_log)
    passing_urls = scan_passing_font_urls(
        artifacts.stylesheets,
        artifacts.final_url,
        passing_values=config.passing_font_display,
    )

    result = audit(network_records, passing_urls, max_wasted_ms=config.max_wasted_ms)
    logger.info(
        "font-display audit for %s: %d passing font URL(s), %d finding(s)",
        artifacts.final_url,
        len(passing_urls),
        len(result.findings),
    )
    return result
