# File: tests/test_csv_report.py
import csv

from content_scrape.crawler.models import COLUMNS, FailedPage, PageRecord, Tile
from content_scrape.report.csv_report import CSV_COLUMNS, write_csv


def _read(path):
    with path.open(encoding="utf-8", newline="") as f:
        return list(csv.reader(f))


def test_header_and_column_order(tmp_path):
    out = write_csv(tmp_path / "export.csv", [])

    assert CSV_COLUMNS[: len(COLUMNS)] == COLUMNS
    assert CSV_COLUMNS[-1] == "error"
    assert CSV_COLUMNS[9:13] == ("tile1_heading", "tile1_description", "tile1_link_title", "tile1_link_url")
    assert CSV_COLUMNS[-5:-1] == ("tile3_heading", "tile3_description", "tile3_link_title", "tile3_link_url")
    header_line = out.read_text(encoding="utf-8").splitlines()[0]
    assert header_line == ",".join(f'"{c}"' for c in CSV_COLUMNS)


def test_every_field_quoted_and_rows_in_order(tmp_path):
    records = [
        PageRecord(
            url="https://site.com/a",
            banner_title='Say "hi", friend',
            tiles=(Tile("T1", "D1", "L1", "https://site.com/1"), Tile(), Tile()),
        ),
        FailedPage("https://site.com/b", "timeout after 20000 ms"),
    ]
    out = write_csv(tmp_path / "nested" / "export.csv", records)

    lines = out.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 3
    for line in lines:
        cells = line.split('","')
        assert len(cells) == len(CSV_COLUMNS)
        assert line.startswith('"') and line.endswith('"')

    header, first, second = _read(out)
    row_a = dict(zip(header, first))
    assert row_a["url"] == "https://site.com/a"
    assert row_a["banner_title"] == 'Say "hi", friend'
    assert row_a["tile1_link_url"] == "https://site.com/1"
    assert row_a["tile2_heading"] == ""
    assert row_a["error"] == ""

    row_b = dict(zip(header, second))
    assert row_b["url"] == "https://site.com/b"
    assert row_b["error"] == "timeout after 20000 ms"
    assert all(row_b[c] == "" for c in COLUMNS if c != "url")


def test_utf8_content(tmp_path):
    out = write_csv(tmp_path / "u.csv", [PageRecord(url="https://site.com/ü", banner_title="Grüße – ok")])
    assert "Grüße – ok" in out.read_text(encoding="utf-8")
