# File: content_scrape/parser/sitemap_parser.py
"""content_scrape.parser.sitemap_parser: Разбор sitemap.xml (urlset) и sitemap index."""

from __future__ import annotations

import gzip
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Union

from lxml import etree

__all__ = ("MalformedSitemap", "SitemapKind", "SitemapDocument", "parse_sitemap", "maybe_decompress")

_GZIP_MAGIC = b"\x1f\x8b"


class MalformedSitemap(Exception):
    """Документ не является ни <urlset>, ни <sitemapindex>."""


class SitemapKind(str, Enum):
    URLSET = "urlset"
    INDEX = "sitemapindex"


@dataclass(slots=True)
class SitemapDocument:
    """Разобранный sitemap: тип документа и значения <loc> в порядке документа."""

    kind: SitemapKind
    locations: List[str] = field(default_factory=list)


def maybe_decompress(url: str, content: bytes) -> bytes:
    """Распаковывает gzip-sitemap (.xml.gz); прочие документы возвращает без изменений.

    Решение принимается по сигнатуре gzip, а не по расширению: сервер мог уже
    распаковать тело через Content-Encoding.
    """
    if content.startswith(_GZIP_MAGIC):
        try:
            return gzip.decompress(content)
        except (OSError, EOFError) as exc:
            raise MalformedSitemap(f"Cannot decompress sitemap {url}: {exc}") from exc
    return content


def _local_name(tag: object) -> str:
    if not isinstance(tag, str):
        return ""
    return etree.QName(tag).localname.lower()


def parse_sitemap(xml_content: Union[str, bytes]) -> SitemapDocument:
    """Разбирает XML sitemap и возвращает SitemapDocument.

    Args:
        xml_content: содержимое sitemap.xml (str или bytes).

    Returns:
        SitemapDocument с kind=URLSET (адреса страниц из url/loc) или
        kind=INDEX (адреса дочерних sitemap из sitemap/loc).

    Raises:
        MalformedSitemap: если документ не XML или корневой элемент не
        urlset / sitemapindex.

    Пример:
    ```python
    from content_scrape.parser.sitemap_parser import parse_sitemap

    with open('sitemap.xml', 'rb') as f:
        doc = parse_sitemap(f.read())
    print(doc.kind, doc.locations)
    ```
    """
    data = xml_content.encode("utf-8") if isinstance(xml_content, str) else xml_content
    if not data.strip():
        raise MalformedSitemap("Empty sitemap document")

    parser = etree.XMLParser(ns_clean=True, recover=True, resolve_entities=False, no_network=True)
    try:
        root = etree.fromstring(data, parser=parser)
    except etree.XMLSyntaxError as exc:
        raise MalformedSitemap(f"Sitemap is not valid XML: {exc}") from exc
    if root is None:
        raise MalformedSitemap("Sitemap is not valid XML")

    root_name = _local_name(root.tag)
    if root_name == "urlset":
        kind, entry = SitemapKind.URLSET, "{*}url"
    elif root_name == "sitemapindex":
        kind, entry = SitemapKind.INDEX, "{*}sitemap"
    else:
        raise MalformedSitemap(
            f"Unknown sitemap format <{root_name or '?'}> (expected urlset or sitemapindex)."
        )

    locations: List[str] = []
    for node in root.findall(entry):
        loc = node.find("{*}loc")
        if loc is not None and loc.text and loc.text.strip():
            locations.append(loc.text.strip())
    return SitemapDocument(kind=kind, locations=locations)
