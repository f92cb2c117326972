"""
URL source resolution: sitemap (recursive through sitemap indexes) or a local
list file, reduced to an ordered list of unique page URLs.
"""
from __future__ import annotations

from typing import List, Optional, Set

from content_scrape.config import SourceKind, UrlSource
from content_scrape.crawler.fetcher import Fetcher
from content_scrape.logger import logger
from content_scrape.parser.sitemap_parser import SitemapKind, maybe_decompress, parse_sitemap
from content_scrape.utils import read_url_list, remove_duplicates

__all__ = ("UrlResolver",)


class UrlResolver:
    """Turns a :class:`UrlSource` into the list of pages to export."""

    def __init__(self, fetcher: Optional[Fetcher] = None) -> None:
        self.fetcher = fetcher

    async def resolve(self, source: UrlSource) -> List[str]:
        if source.kind is SourceKind.SITEMAP:
            urls = await self.resolve_sitemap(source.location)
        else:
            urls = read_url_list(source.location)
        return remove_duplicates(urls)

    async def resolve_sitemap(self, sitemap_url: str, _seen: Optional[Set[str]] = None) -> List[str]:
        """
        Fetch *sitemap_url* and return page URLs in document order.

        A sitemap index is expanded depth-first; children's results are
        concatenated in the order the index lists them. MalformedSitemap and
        FetchError propagate to the caller.
        """
        if self.fetcher is None:
            raise RuntimeError("Sitemap resolution requires a Fetcher")
        seen = _seen if _seen is not None else set()
        if sitemap_url in seen:
            logger.warning("Sitemap %s already expanded, skipping", sitemap_url)
            return []
        seen.add(sitemap_url)

        logger.debug("Expanding sitemap %s", sitemap_url)
        raw = await self.fetcher.fetch_bytes(sitemap_url)
        doc = parse_sitemap(maybe_decompress(sitemap_url, raw))

        if doc.kind is SitemapKind.URLSET:
            logger.debug("Sitemap %s: %d URLs", sitemap_url, len(doc.locations))
            return list(doc.locations)

        urls: List[str] = []
        for child in doc.locations:
            urls.extend(await self.resolve_sitemap(child, seen))
        return urls
