"""
Data models for the content_scrape pipeline.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple, Union

TILE_SLOTS = 3

TILE_FIELDS: Tuple[str, ...] = ("heading", "description", "link_title", "link_url")

COLUMNS: Tuple[str, ...] = (
    "url",
    "banner_image",
    "banner_title",
    "banner_description",
    "banner_button_text",
    "banner_button_link",
    "main_description",
    "video_heading",
    "video_embed_url",
    *(f"tile{n}_{name}" for n in range(1, TILE_SLOTS + 1) for name in TILE_FIELDS),
)


@dataclass(slots=True, frozen=True)
class Tile:
    """One card of the "related articles" block."""

    heading: str = ""
    description: str = ""
    link_title: str = ""
    link_url: str = ""

    def is_empty(self) -> bool:
        return not (self.heading or self.description or self.link_title or self.link_url)


def _empty_tiles() -> Tuple[Tile, ...]:
    return tuple(Tile() for _ in range(TILE_SLOTS))


@dataclass(slots=True, frozen=True)
class PageRecord:
    """Content fields extracted from one successfully fetched page.

    Every field is a string; missing content is ``""`` so that each row has
    the same number of columns.
    """

    url: str
    banner_image: str = ""
    banner_title: str = ""
    banner_description: str = ""
    banner_button_text: str = ""
    banner_button_link: str = ""
    main_description: str = ""
    video_heading: str = ""
    video_embed_url: str = ""
    tiles: Tuple[Tile, ...] = field(default_factory=_empty_tiles)

    def __post_init__(self) -> None:
        if len(self.tiles) != TILE_SLOTS:
            raise ValueError(f"PageRecord needs exactly {TILE_SLOTS} tiles, got {len(self.tiles)}")

    def as_row(self) -> Dict[str, str]:
        row = {
            "url": self.url,
            "banner_image": self.banner_image,
            "banner_title": self.banner_title,
            "banner_description": self.banner_description,
            "banner_button_text": self.banner_button_text,
            "banner_button_link": self.banner_button_link,
            "main_description": self.main_description,
            "video_heading": self.video_heading,
            "video_embed_url": self.video_embed_url,
        }
        for n, tile in enumerate(self.tiles, start=1):
            for name in TILE_FIELDS:
                row[f"tile{n}_{name}"] = getattr(tile, name)
        return row


@dataclass(slots=True, frozen=True)
class FailedPage:
    """Degraded record: the page could not be fetched (or processed)."""

    url: str
    error: str

    def as_row(self) -> Dict[str, str]:
        # no content keys; the CSV writer leaves those cells empty
        return {"url": self.url, "error": self.error}


ExportRecord = Union[PageRecord, FailedPage]


@dataclass(slots=True, frozen=True)
class FetchOutcome:
    """Result of one fetch attempt: HTML or an error reason, never both."""

    url: str
    html: Optional[str] = None
    error: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.html is None) == (self.error is None):
            raise ValueError("FetchOutcome needs exactly one of html / error")

    @property
    def ok(self) -> bool:
        return self.html is not None
