# === FILE: content_scrape/cli.py ===
#!/usr/bin/env python3
"""
Точка входа для запуска выгрузки content_scrape через командную строку.

Источник URL (обязателен один из):
  --sitemap URL       sitemap.xml или sitemap index (рекурсивно)
  --urls PATH         Файл со списком URL, по одному в строке (# — комментарий)

Опции выгрузки:
  --out, -o PATH      Итоговый CSV (default: export.csv)
  --concurrency INT   Макс. число одновременных загрузок (default: 5)
  --timeout MS        Таймаут одного запроса в миллисекундах (default: 20000)
  --config, -c PATH   YAML/JSON-файл с теми же ключами (опции CLI важнее)

Логирование:
  --log-level LEVEL   Уровень логирования (DEBUG, INFO, ...)
  --log-file PATH     Файл для логов (stdout, если не указан)

Дополнительно:
  --version, -v       Показать версию

Пример:
  content-scrape --sitemap https://example.com/sitemap.xml --out export.csv
  content-scrape --urls urls.txt --concurrency 10 --timeout 5000
"""
import sys
from pathlib import Path

import click
from pydantic import ValidationError

from content_scrape import __version__
from content_scrape.config import ConfigurationError
from content_scrape.engine import Engine
from content_scrape.logger import configure

CONTEXT_SETTINGS = dict(help_option_names=["--help", "-h"])


def print_error(message: str):
    click.secho(message, fg="red", err=True)
    sys.exit(1)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, "--version", "-v", message="content_scrape, version %(version)s")
@click.option("--sitemap", "sitemap", default=None, help="URL sitemap.xml или sitemap index.")
@click.option(
    "--urls", "urls_file",
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Файл со списком URL, по одному в строке.",
)
@click.option(
    "--out", "-o", "output_path",
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Итоговый CSV-файл.  [default: export.csv]",
)
@click.option(
    "--concurrency", "concurrency",
    type=int,
    default=None,
    help="Макс. число одновременных загрузок.  [default: 5]",
)
@click.option(
    "--timeout", "timeout_ms",
    type=int,
    default=None,
    help="Таймаут одного запроса, мс.  [default: 20000]",
)
@click.option(
    "--config", "-c", "config_path",
    default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Путь к файлу конфигурации YAML/JSON.",
)
@click.option(
    "--log-level", "log_level",
    default="INFO", show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    help="Уровень логирования",
)
@click.option(
    "--log-file", "log_file",
    default=None,
    type=click.Path(writable=True, dir_okay=False, path_type=Path),
    help="Путь к файлу логов (stdout, если не указан)",
)
def cli(sitemap, urls_file, output_path, concurrency, timeout_ms, config_path, log_level, log_file):
    """Выгрузить баннер, описание, видео и плитки страниц сайта в CSV."""
    logger = configure(level=log_level, log_file=log_file)

    try:
        cfg = Engine.load_config(
            config_path,
            sitemap=sitemap,
            urls_file=urls_file,
            output_path=output_path,
            concurrency=concurrency,
            timeout_ms=timeout_ms,
        )
    except ConfigurationError as e:
        print_error(f"Error: {e}")
    except (ValidationError, ValueError, TypeError, OSError) as e:
        print_error(f"Ошибка загрузки конфигурации: {e}")

    # CSV is written only after every page has settled
    try:
        Engine(cfg).run()
    except Exception as e:
        logger.debug("Export aborted", exc_info=True)
        print_error(f"Error: {e}")


if __name__ == "__main__":
    cli()
