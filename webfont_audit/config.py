# === FILE: webfont_audit/config.py ===
"""
Загрузка и валидация конфигурации аудита webfont_audit.
Pydantic описывает схему, YAML/JSON читаются как в остальных наших утилитах.
"""
from __future__ import annotations

import json
import os
import errno
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)

from webfont_audit.correlator import MAX_WASTED_MS
from webfont_audit.scanner import PASSING_FONT_DISPLAY


class AuditConfig(BaseModel):
    """Настройки одного запуска аудита font-display."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    default_pass: str = Field(
        "defaultPass", min_length=1, description="Проход, чьи сетевые записи анализируются."
    )
    max_wasted_ms: int = Field(
        MAX_WASTED_MS, gt=0, description="Верхняя граница потерянного времени на шрифт (мс)."
    )
    passing_font_display: tuple[str, ...] = Field(
        PASSING_FONT_DISPLAY, min_length=1, description="Проходные значения font-display."
    )
    template_dir: Optional[Path] = Field(None, description="Папка с Jinja2-шаблонами отчёта.")

    @field_validator("passing_font_display", mode="after")
    def _normalize_keywords(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        keywords = tuple(k.strip().lower() for k in v)
        if not all(keywords):
            raise ValueError("Пустое значение в passing_font_display")
        return keywords


_DEFAULT_CFG = Path("configs/default.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Неправильный YAML в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень YAML должен быть mapping, получено {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Неправильный JSON в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень JSON должен быть mapping, получено {type(data).__name__}")
    return data


def read_mapping(path: Path) -> dict[str, Any]:
    """Читает YAML или JSON по расширению файла; общий код для конфига и артефактов."""
    suffix = path.suffix.lower()
    if suffix in (".yaml", ".yml"):
        return _read_yaml(path)
    if suffix == ".json":
        return _read_json(path)
    raise ValueError(f"Неподдерживаемый формат файла: {suffix}")


def load_config(path: Union[str, Path, None]) -> AuditConfig:
    """
    Читает YAML или JSON и возвращает проверенный объект AuditConfig.
    Без пути берёт configs/default.yaml, а если его нет, то значения по умолчанию.
    """
    if path is None:
        if not _DEFAULT_CFG.exists():
            return AuditConfig()
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    return AuditConfig(**read_mapping(path_obj))
