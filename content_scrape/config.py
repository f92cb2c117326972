# === FILE: content_scrape/config.py ===
"""
Модуль для загрузки и валидации конфигурации выгрузки content_scrape.
Используется Pydantic для описания схемы и проверки данных.

Параметры берутся из YAML/JSON-файла (необязательно) и из командной строки;
значения командной строки имеют приоритет.
"""
from __future__ import annotations

import errno
import json
import os
from enum import Enum
from pathlib import Path
from typing import Any, NamedTuple, Optional, Union

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

__all__ = (
    "DEFAULT_USER_AGENT",
    "ConfigurationError",
    "ExportConfig",
    "SourceKind",
    "UrlSource",
    "load_config",
)

DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; ContentMigrationBot/1.0; +https://example.com/bot)"


class ConfigurationError(Exception):
    """Не задан источник URL (ни sitemap, ни файл со списком)."""


class SourceKind(str, Enum):
    SITEMAP = "sitemap"
    FILE = "file"


class UrlSource(NamedTuple):
    """Откуда брать URL страниц: sitemap (URL) или локальный файл."""

    kind: SourceKind
    location: str


class ExportConfig(BaseModel):
    """Конфигурация одного запуска выгрузки."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    sitemap: Optional[str] = Field(None, description="URL sitemap.xml или sitemap index.")
    urls_file: Optional[Path] = Field(None, description="Файл со списком URL, по одному в строке.")
    output_path: Path = Field(Path("export.csv"), description="Итоговый CSV-файл.")
    concurrency: int = Field(5, ge=1, description="Максимум одновременных загрузок.")
    timeout_ms: int = Field(20000, gt=0, description="Таймаут на один запрос (миллисекунды).")
    user_agent: str = Field(DEFAULT_USER_AGENT, min_length=1, description="Заголовок User-Agent.")

    @field_validator("sitemap", mode="before")
    def _blank_sitemap_is_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v.strip() if isinstance(v, str) else v

    @model_validator(mode="after")
    def _check_source(self) -> ExportConfig:
        if self.sitemap is None and self.urls_file is None:
            raise ConfigurationError("Provide --sitemap <url> or --urls <file>.")
        return self

    @property
    def source(self) -> UrlSource:
        """Sitemap takes precedence when both sources are set."""
        if self.sitemap is not None:
            return UrlSource(SourceKind.SITEMAP, self.sitemap)
        return UrlSource(SourceKind.FILE, str(self.urls_file))

    @property
    def timeout(self) -> float:
        """Per-request timeout in seconds."""
        return self.timeout_ms / 1000


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


def read_config_file(path: Union[str, Path]) -> dict[str, Any]:
    """Читает YAML или JSON и возвращает словарь без валидации."""
    path_obj = Path(path).expanduser().resolve()
    if not path_obj.is_file():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        return _read_yaml(path_obj)
    if suffix == ".json":
        return _read_json(path_obj)
    raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")


def load_config(path: Union[str, Path, None] = None, **overrides: Any) -> ExportConfig:
    """
    Собирает ExportConfig из файла (если указан) и переопределений.

    Переопределения со значением None игнорируются, поэтому CLI может
    передавать все свои опции как есть. Если источник URL не задан ни в
    файле, ни в переопределениях, бросает ConfigurationError.
    """
    data: dict[str, Any] = read_config_file(path) if path is not None else {}
    data.update({key: value for key, value in overrides.items() if value is not None})
    return ExportConfig(**data)
