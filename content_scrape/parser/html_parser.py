# === FILE: content_scrape/parser/html_parser.py ===
"""Field extraction for content_scrape.

:func:`extract_page` turns the HTML of one page into a
:class:`~content_scrape.crawler.models.PageRecord` using a fixed map of
structural selectors:

* ``div.banner`` — image (``<img src>`` or inline ``background-image``),
  title (h1, else h2), description (first p) and the first button/link
  with visible text.
* ``div.main-description`` — plain text.
* ``div.article-video`` — heading (h1–h3) and embed URL
  (iframe src → ``data-src`` → anchor href).
* ``div.related-articles`` — up to three tiles.

For every rule the first match wins. Missing blocks never raise, they simply
produce empty strings. All links are made absolute against the page URL and
all text goes through :func:`~content_scrape.utils.clean_text`.
"""
from __future__ import annotations

import re
from collections.abc import Sequence
from typing import List, Optional

from bs4 import BeautifulSoup
from bs4.element import Tag

from content_scrape.crawler.models import TILE_SLOTS, PageRecord, Tile
from content_scrape.utils import absolutize_url, clean_text

__all__: Sequence[str] = ("extract_page", "BANNER_SELECTOR", "TILE_ITEM_SELECTOR")

BANNER_SELECTOR = "div.banner"
MAIN_DESCRIPTION_SELECTOR = "div.main-description"
VIDEO_SELECTOR = "div.article-video"
TILES_SELECTOR = "div.related-articles"
TILE_ITEM_SELECTOR = ".tile, .card, article, li, .related-article"

_BACKGROUND_RE = re.compile(r"background-image\s*:\s*url\(\s*(['\"]?)(.*?)\1\s*\)", re.IGNORECASE)


# ---------------------------------------------------------------------------
# Small accessors (all tolerate a missing node)
# ---------------------------------------------------------------------------


def _attr(node: Optional[Tag], name: str) -> str:
    if node is None:
        return ""
    value = node.get(name)
    if isinstance(value, list):
        value = " ".join(value)
    return value or ""


def _text(node: Optional[Tag]) -> str:
    return clean_text(node.get_text()) if node is not None else ""


def _first(scope: Optional[Tag], *names: str) -> Optional[Tag]:
    """First descendant (document order) whose tag is one of *names*."""
    if scope is None:
        return None
    found = scope.find(list(names))
    return found if isinstance(found, Tag) else None


def _first_with_text(scope: Optional[Tag], *names: str) -> Optional[Tag]:
    if scope is None:
        return None
    for node in scope.find_all(list(names)):
        if isinstance(node, Tag) and _text(node):
            return node
    return None


def _background_image(node: Optional[Tag]) -> str:
    match = _BACKGROUND_RE.search(_attr(node, "style"))
    return match.group(2).strip() if match else ""


# ---------------------------------------------------------------------------
# Blocks
# ---------------------------------------------------------------------------


def _banner_fields(soup: BeautifulSoup, page_url: str) -> dict[str, str]:
    banner = soup.select_one(BANNER_SELECTOR)

    image = _attr(_first(banner, "img"), "src") or _background_image(banner)
    title = _text(_first(banner, "h1")) or _text(_first(banner, "h2"))
    button = _first_with_text(banner, "a", "button")

    return {
        "banner_image": absolutize_url(image, page_url),
        "banner_title": title,
        "banner_description": _text(_first(banner, "p")),
        "banner_button_text": _text(button),
        "banner_button_link": absolutize_url(_attr(button, "href"), page_url),
    }


def _video_fields(soup: BeautifulSoup, page_url: str) -> dict[str, str]:
    video = soup.select_one(VIDEO_SELECTOR)
    if video is None:
        return {"video_heading": "", "video_embed_url": ""}

    data_src_node = video.find(attrs={"data-src": True})
    embed = (
        _attr(_first(video, "iframe"), "src")
        or _attr(data_src_node if isinstance(data_src_node, Tag) else None, "data-src")
        or _attr(_first(video, "a"), "href")
    )
    return {
        "video_heading": _text(_first(video, "h1", "h2", "h3")),
        "video_embed_url": absolutize_url(embed, page_url),
    }


def _tile_from(node: Tag, page_url: str) -> Tile:
    link = _first_with_text(node, "a")
    return Tile(
        heading=_text(_first(node, "h1", "h2", "h3", "h4")),
        description=_text(_first(node, "p")),
        link_title=_text(link),
        link_url=absolutize_url(_attr(link, "href"), page_url),
    )


def _tiles(soup: BeautifulSoup, page_url: str) -> tuple[Tile, ...]:
    wrapper = soup.select_one(TILES_SELECTOR)
    tiles: List[Tile] = []
    if wrapper is not None:
        candidates = wrapper.select(TILE_ITEM_SELECTOR)
        if not candidates:
            candidates = wrapper.find_all(True, recursive=False)
        for node in candidates:
            if len(tiles) >= TILE_SLOTS:
                break
            tile = _tile_from(node, page_url)
            if not tile.is_empty():
                tiles.append(tile)

    while len(tiles) < TILE_SLOTS:
        tiles.append(Tile())
    return tuple(tiles)


# ---------------------------------------------------------------------------
# Public function
# ---------------------------------------------------------------------------


def extract_page(html: str, page_url: str) -> PageRecord:
    """Extract the fixed set of content fields from *html*.

    Parameters
    ----------
    html
        Raw page markup.
    page_url
        URL the markup was fetched from; relative links are resolved
        against it and it becomes the record key.
    """
    soup = BeautifulSoup(html or "", "html.parser")

    return PageRecord(
        url=page_url,
        **_banner_fields(soup, page_url),
        main_description=_text(soup.select_one(MAIN_DESCRIPTION_SELECTOR)),
        **_video_fields(soup, page_url),
        tiles=_tiles(soup, page_url),
    )
