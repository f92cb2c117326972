# File: content_scrape/utils.py
"""content_scrape.utils: Утилиты для очистки текста, работы с URL и списками URL."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union
from urllib.parse import urljoin, urlparse

from content_scrape.logger import logger

__all__: Sequence[str] = (
    "clean_text",
    "absolutize_url",
    "read_url_list",
    "remove_duplicates",
)

_WS_RE = re.compile(r"[\s\u00a0]+")


def clean_text(value: Optional[str]) -> str:
    """Схлопывает любые пробельные символы (включая NBSP) в один пробел и обрезает края."""
    if not value:
        return ""
    return _WS_RE.sub(" ", str(value)).strip()


def absolutize_url(value: Optional[str], page_url: str) -> str:
    """Превращает относительную ссылку в абсолютную относительно page_url.

    Пустое значение даёт "". Если разрешить ссылку нельзя (битый URL,
    страница без схемы), значение возвращается как есть.
    """
    if not value:
        return ""
    raw = value.strip()
    if not raw:
        return ""
    try:
        if urlparse(raw).scheme:
            return raw
        base = urlparse(page_url)
        if not (base.scheme and base.netloc):
            return raw
        return urljoin(page_url, raw)
    except ValueError:
        logger.debug("Cannot resolve %r against %s", raw, page_url)
        return raw


def read_url_list(path: Union[str, Path]) -> List[str]:
    """Читает файл со списком URL: по одному в строке, без пустых строк и комментариев (#)."""
    p = Path(path).expanduser()
    if not p.exists():
        logger.error("URL list not found: %s", p)
        raise FileNotFoundError(f"URL list file not found: {p}")
    urls = []
    for line in p.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if line and not line.startswith("#"):
            urls.append(line)
    logger.debug("Loaded %d entries from URL list %s", len(urls), p)
    return urls


def remove_duplicates(urls: Iterable[str]) -> List[str]:
    """Удаляет дубликаты и пустые значения, сохраняя порядок первого появления."""
    items = [u.strip() for u in urls if u is not None]
    unique = [u for u in dict.fromkeys(items) if u]
    removed = len(items) - len(unique)
    if removed:
        logger.debug("Removed %d duplicate or empty URLs", removed)
    return unique
