# File: tests/test_logger.py
import logging

from content_scrape.crawler.crawler import ExportCrawler
from content_scrape.crawler.fetcher import Fetcher
from content_scrape.logger import configure, logger


def test_reconfigure_replaces_handlers(tmp_path):
    log_file = tmp_path / "export.log"
    configure(level="WARNING", log_file=log_file)
    lg = configure(level="DEBUG", log_file=log_file)

    assert lg is logger
    assert lg.level == logging.DEBUG
    assert len(lg.handlers) == 2
    assert lg.propagate is False

    lg.info("hello file")
    for handler in lg.handlers:
        handler.flush()
    assert "hello file" in log_file.read_text(encoding="utf-8")

    assert len(configure().handlers) == 1


def test_crawler_uses_shared_logger(make_config):
    assert ExportCrawler(Fetcher(make_config())).logger is logger
