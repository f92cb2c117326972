# === FILE: content_scrape/crawler/crawler.py ===
from __future__ import annotations

import asyncio
import time
from typing import Callable, Dict, List, Sequence

from content_scrape.crawler.fetcher import FetchError, Fetcher
from content_scrape.crawler.models import ExportRecord, FailedPage, FetchOutcome, PageRecord
from content_scrape.logger import logger
from content_scrape.parser.html_parser import extract_page

__all__ = ("ExportCrawler",)

Extractor = Callable[[str, str], PageRecord]


class ExportCrawler:
    """Загружает и разбирает страницы параллельно (не более `concurrency` одновременно).

    Результаты собираются в словарь по URL в порядке завершения и затем
    выстраиваются в исходном порядке входного списка.
    """

    def __init__(self, fetcher: Fetcher, concurrency: int = 5, extractor: Extractor = extract_page) -> None:
        if concurrency < 1:
            raise ValueError("concurrency must be >= 1")
        self.fetcher = fetcher
        self.concurrency = concurrency
        self.extractor = extractor
        self.logger = logger

    async def crawl(self, urls: Sequence[str]) -> List[ExportRecord]:
        urls = list(dict.fromkeys(urls))
        total = len(urls)
        self.logger.info("Старт выгрузки: %d URL, параллельность %d", total, self.concurrency)
        start = time.monotonic()
        semaphore = asyncio.Semaphore(self.concurrency)
        results: Dict[str, ExportRecord] = {}

        async def _run(position: int, url: str) -> None:
            async with semaphore:
                outcome = await self._fetch_outcome(url)
                record = self._to_record(outcome)
            results[url] = record
            if isinstance(record, FailedPage):
                self.logger.warning("[%d/%d] FAIL %s - %s", position, total, url, record.error)
            else:
                self.logger.info("[%d/%d] OK   %s", position, total, url)

        await asyncio.gather(*(_run(i, url) for i, url in enumerate(urls, start=1)))

        ordered = [results.get(url) or FailedPage(url, "no result") for url in urls]
        failed = sum(1 for r in ordered if isinstance(r, FailedPage))
        duration = time.monotonic() - start
        self.logger.info("Завершено: %d страниц (%d с ошибкой) за %.2f с", len(ordered), failed, duration)
        return ordered

    async def _fetch_outcome(self, url: str) -> FetchOutcome:
        try:
            html = await self.fetcher.fetch(url)
        except FetchError as exc:
            return FetchOutcome(url, error=exc.reason)
        except Exception as exc:
            # e.g. UnicodeError from IDNA encoding of an over-long host label
            self.logger.debug("Unexpected fetch error for %s", url, exc_info=True)
            return FetchOutcome(url, error=f"{type(exc).__name__}: {exc}")
        return FetchOutcome(url, html=html)

    def _to_record(self, outcome: FetchOutcome) -> ExportRecord:
        if not outcome.ok:
            return FailedPage(outcome.url, outcome.error or "unknown error")
        try:
            return self.extractor(outcome.html or "", outcome.url)
        except Exception as exc:
            self.logger.exception("Extraction failed for %s", outcome.url)
            return FailedPage(outcome.url, f"extraction failed: {exc}")
