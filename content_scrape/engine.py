# File: content_scrape/engine.py
"""content_scrape.engine: Orchestration layer: URL source → fetch + extract → CSV."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import List, Optional, Union

from content_scrape.config import ExportConfig, load_config
from content_scrape.crawler.crawler import ExportCrawler
from content_scrape.crawler.fetcher import Fetcher
from content_scrape.crawler.models import ExportRecord
from content_scrape.crawler.resolver import UrlResolver
from content_scrape.logger import logger
from content_scrape.report.csv_report import write_csv

__all__ = ["Engine", "start_export"]


async def start_export(cfg: ExportConfig) -> List[ExportRecord]:
    """
    Resolves the URL source and runs the crawler inside one HTTP session.

    Parameters
    ----------
    cfg : ExportConfig
        Export settings (source, concurrency, timeout, User-Agent).

    Returns
    -------
    List[ExportRecord]
        One record per unique URL, in source order.
    """
    async with Fetcher(cfg) as fetcher:
        urls = await UrlResolver(fetcher).resolve(cfg.source)
        logger.info("Found %d URLs", len(urls))
        crawler = ExportCrawler(fetcher, concurrency=cfg.concurrency)
        return await crawler.crawl(urls)


class Engine:
    """Фасад, через который работает CLI: загрузка конфига, запуск выгрузки и запись CSV."""

    @staticmethod
    def load_config(path: Optional[Union[str, Path]] = None, **overrides) -> ExportConfig:
        """Загружает конфиг из YAML/JSON и накладывает переопределения."""
        return load_config(path, **overrides)

    def __init__(self, config: ExportConfig) -> None:
        self.config = config

    def run(self) -> Path:
        """Выполняет выгрузку целиком и возвращает путь к CSV.

        Файл пишется только после завершения всех загрузок; при ошибке
        разрешения источника файл не создаётся.
        """
        logger.info("Starting export from %s %s", self.config.source.kind.value, self.config.source.location)
        try:
            records = asyncio.run(start_export(self.config))
        except Exception as exc:
            logger.error("Export failed: %s", exc)
            raise
        return write_csv(self.config.output_path, records)
