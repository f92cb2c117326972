# content_scrape/report/csv_report.py

"""
Запись результатов выгрузки в CSV для импорта в CMS.

Одна строка — одна страница, все поля всегда в кавычках.
"""
import csv
from pathlib import Path
from typing import Iterable, Tuple

from content_scrape.crawler.models import COLUMNS, ExportRecord
from content_scrape.logger import logger

# error is empty for successful pages
CSV_COLUMNS: Tuple[str, ...] = (*COLUMNS, "error")


def write_csv(output_path: Path | str, records: Iterable[ExportRecord]) -> Path:
    """
    Сохраняет записи в CSV по указанному пути.

    :param output_path: путь к CSV-файлу
    :param records: PageRecord / FailedPage в нужном порядке строк
    :return: Path сохранённого файла

    Пример:
    ```python
    from content_scrape.report.csv_report import write_csv
    path = write_csv('export.csv', records)
    print(f"CSV saved to: {path}")
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    count = 0
    with output.open("w", encoding="utf-8", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=CSV_COLUMNS, restval="", quoting=csv.QUOTE_ALL)
        writer.writeheader()
        for record in records:
            writer.writerow(record.as_row())
            count += 1

    logger.info("Wrote CSV: %s (%d rows)", output, count)
    return output
