# File: tests/test_html_parser.py
"""Field extraction rules: selectors, precedence, link resolution, padding."""
import pytest

from content_scrape.crawler.models import PageRecord, Tile
from content_scrape.parser.html_parser import extract_page

PAGE_URL = "https://site.com/articles/spring"


def test_full_page(page_html):
    rec = extract_page(page_html, PAGE_URL)

    assert isinstance(rec, PageRecord)
    assert rec.url == PAGE_URL
    assert rec.banner_image == "https://site.com/img/hero.png"
    assert rec.banner_title == "Spring Sale"
    assert rec.banner_description == "Up to 50% off"
    assert rec.banner_button_text == "Shop now"
    assert rec.banner_button_link == "https://site.com/shop"
    assert rec.main_description == "Intro text. More text."
    assert rec.video_heading == "Watch the video"
    assert rec.video_embed_url == "https://www.youtube.com/embed/abc"


def test_tiles_skip_empty_and_keep_first_three(page_html):
    rec = extract_page(page_html, PAGE_URL)

    assert rec.tiles == (
        Tile("First", "One", "Read one", "https://site.com/one"),
        Tile("Second", "Two", "Read two", "https://site.com/articles/two"),
        Tile("Third", "Three", "Read three", "https://other.com/3"),
    )


def test_empty_document_gives_empty_fields():
    rec = extract_page("<html><body><p>nothing here</p></body></html>", PAGE_URL)

    row = rec.as_row()
    assert row["url"] == PAGE_URL
    assert all(value == "" for key, value in row.items() if key != "url")
    assert len(rec.tiles) == 3


def test_background_image_fallback():
    html = """<div class="banner" style="background-image:url('/img/banner.jpg')">
                <h2>Title from h2</h2></div>"""
    rec = extract_page(html, "https://host.example/page")

    assert rec.banner_image == "https://host.example/img/banner.jpg"
    assert rec.banner_title == "Title from h2"


@pytest.mark.parametrize(
    "style",
    [
        'background-image: url("/b.jpg")',
        "color: red; BACKGROUND-IMAGE : url( /b.jpg )",
        "background-image:url(/b.jpg)",
    ],
)
def test_background_image_variants(style):
    html = f"<div class='banner' style='{style}'></div>"
    assert extract_page(html, "https://a.com/p").banner_image == "https://a.com/b.jpg"


def test_img_wins_over_background():
    html = """<div class="banner" style="background-image:url(/bg.jpg)">
                <img src="/fg.jpg"></div>"""
    assert extract_page(html, "https://a.com/p").banner_image == "https://a.com/fg.jpg"


def test_h1_wins_over_h2_regardless_of_order():
    html = '<div class="banner"><h2>Second level</h2><h1>First level</h1></div>'
    assert extract_page(html, "https://a.com/").banner_title == "First level"


def test_first_banner_only():
    html = """<div class="banner"><h1>One</h1></div>
              <div class="banner"><h1>Two</h1></div>"""
    assert extract_page(html, "https://a.com/").banner_title == "One"


def test_button_element_without_href():
    html = '<div class="banner"><button>  Subscribe </button><a href="/x">Later</a></div>'
    rec = extract_page(html, "https://a.com/")

    assert rec.banner_button_text == "Subscribe"
    assert rec.banner_button_link == ""


def test_video_embed_precedence_data_src_before_anchor():
    html = """<div class="article-video"><h3>Clip</h3>
                <a href="/watch">Watch</a>
                <div data-src="//player.example/v/1"></div></div>"""
    rec = extract_page(html, "https://a.com/p")

    assert rec.video_heading == "Clip"
    assert rec.video_embed_url == "https://player.example/v/1"


def test_video_embed_anchor_fallback():
    html = '<div class="article-video"><a href="/watch?v=9">Watch</a></div>'
    assert extract_page(html, "https://a.com/p").video_embed_url == "https://a.com/watch?v=9"


def test_tiles_fall_back_to_direct_children():
    html = """<div class="related-articles">
                <section><h4>Alpha</h4><a href="/alpha">Go</a></section>
                <section><p>Beta only text</p></section>
              </div>"""
    rec = extract_page(html, "https://a.com/p")

    assert rec.tiles[0] == Tile("Alpha", "", "Go", "https://a.com/alpha")
    assert rec.tiles[1] == Tile("", "Beta only text", "", "")
    assert rec.tiles[2] == Tile()


def test_tile_link_must_have_text():
    html = """<div class="related-articles"><article>
                <a href="/img-link"><img src="/t.png"></a>
                <a href="/text-link">Read more</a>
              </article></div>"""
    tile = extract_page(html, "https://a.com/p").tiles[0]

    assert tile.link_title == "Read more"
    assert tile.link_url == "https://a.com/text-link"


def test_relative_image_resolves_against_page():
    html = '<div class="banner"><img src="/x.png"></div>'
    assert extract_page(html, "https://a.com/p").banner_image == "https://a.com/x.png"


def test_malformed_link_passes_through():
    html = '<div class="banner"><a href="http://[broken">Go</a></div>'
    assert extract_page(html, "https://a.com/p").banner_button_link == "http://[broken"


def test_extraction_is_idempotent(page_html):
    assert extract_page(page_html, PAGE_URL) == extract_page(page_html, PAGE_URL)
    assert extract_page(page_html, PAGE_URL).as_row() == extract_page(page_html, PAGE_URL).as_row()
