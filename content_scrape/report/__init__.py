# File: content_scrape/report/__init__.py
"""content_scrape.report: Запись результатов выгрузки (CSV для импорта в CMS)."""

from .csv_report import CSV_COLUMNS, write_csv

__all__ = ["CSV_COLUMNS", "write_csv"]
