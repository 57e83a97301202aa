# webfont_audit/artifacts.py
"""
Artifacts consumed by the audit and a loader for artifact bundles on disk.

Gathering the artifacts (stylesheet contents, network records, final URL) is
the browser-side gatherer's job; this module only reads what it saved.
"""
from __future__ import annotations

import errno
import os
from collections.abc import Awaitable, Callable, Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Union
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field, field_validator

from webfont_audit.config import read_mapping
from webfont_audit.logger import logger
from webfont_audit.models import NetworkRecord, StylesheetSource

__all__ = ["Artifacts", "ArtifactBundle", "load_artifacts", "replay_network_records"]

NetworkRecordsProvider = Callable[[Any], Awaitable[Sequence[NetworkRecord]]]


async def replay_network_records(log: Any) -> list[NetworkRecord]:
    """Provider for logs that already hold parsed network records."""
    return list(log or [])


@dataclass(slots=True)
class Artifacts:
    """Everything one audit run reads. ``network_logs`` is keyed by pass name."""

    final_url: str
    stylesheets: Sequence[StylesheetSource] = field(default_factory=list)
    network_logs: Mapping[str, Any] = field(default_factory=dict)
    request_network_records: NetworkRecordsProvider = replay_network_records


# --------------------------------------------------------------------------- #
# On-disk bundle schema                                                       #
# --------------------------------------------------------------------------- #


class _RecordModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    url: str
    resource_type: str = Field("", alias="resourceType")
    start_time: float = Field(0.0, alias="startTime")
    end_time: float = Field(0.0, alias="endTime")

    def to_record(self) -> NetworkRecord:
        return NetworkRecord(
            url=self.url,
            resource_type=self.resource_type,
            start_time=self.start_time,
            end_time=self.end_time,
        )


class _StylesheetModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    content: str = ""


class _CSSUsageModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    stylesheets: list[_StylesheetModel] = Field(default_factory=list)


class _URLModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    final_url: str = Field(..., alias="finalUrl")

    @field_validator("final_url")
    def _require_absolute(cls, v: str) -> str:
        if not urlsplit(v).scheme:
            raise ValueError(f"finalUrl must be an absolute URL, got {v!r}")
        return v


class ArtifactBundle(BaseModel):
    """Artifacts as saved by the gatherer (Lighthouse-style key names)."""

    model_config = ConfigDict(extra="ignore")

    url: _URLModel = Field(..., alias="URL")
    css_usage: _CSSUsageModel = Field(default_factory=_CSSUsageModel, alias="CSSUsage")
    network_records: dict[str, list[_RecordModel]] = Field(
        default_factory=dict, alias="networkRecords"
    )

    def to_artifacts(self) -> Artifacts:
        return Artifacts(
            final_url=self.url.final_url,
            stylesheets=[StylesheetSource(s.content) for s in self.css_usage.stylesheets],
            network_logs={
                pass_name: [r.to_record() for r in records]
                for pass_name, records in self.network_records.items()
            },
            request_network_records=replay_network_records,
        )


def load_artifacts(path: Union[str, Path]) -> Artifacts:
    """Read a JSON/YAML artifact bundle and return validated :class:`Artifacts`."""
    path_obj = Path(path).expanduser().resolve()
    if not path_obj.is_file():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    bundle = ArtifactBundle.model_validate(read_mapping(path_obj))
    logger.info(
        "Loaded artifacts for %s: %d stylesheet(s), pass(es) %s",
        bundle.url.final_url,
        len(bundle.css_usage.stylesheets),
        ", ".join(bundle.network_records) or "-",
    )
    return bundle.to_artifacts()
