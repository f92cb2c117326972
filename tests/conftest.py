# File: tests/conftest.py
from collections.abc import AsyncIterator, Awaitable, Callable
from pathlib import Path

import pytest
import pytest_asyncio
from aiohttp import web

from content_scrape.config import ExportConfig
from content_scrape.logger import configure


@pytest.fixture(autouse=True)
def fresh_logging():
    """Re-bind the project logger to the current (captured) stdout for every test."""
    configure(level="DEBUG")
    yield
    configure(level="INFO")


@pytest.fixture()
def urls_file(tmp_path) -> Path:
    """
    Temporary URL list with a duplicate, a comment and blank lines.
    """
    path = tmp_path / "urls.txt"
    path.write_text(
        "https://site.com/a\n"
        "\n"
        "# skipped comment\n"
        "  https://site.com/a  \n"
        "https://site.com/b\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture()
def make_config(urls_file) -> Callable[..., ExportConfig]:
    """
    Factory for a valid ExportConfig; keyword arguments override defaults.
    """

    def _make(**overrides) -> ExportConfig:
        data = {"urls_file": urls_file, "timeout_ms": 2000, "user_agent": "TestAgent/1.0"}
        data.update(overrides)
        return ExportConfig(**data)

    return _make


@pytest_asyncio.fixture
async def serve(unused_tcp_port_factory) -> AsyncIterator[Callable[[web.Application], Awaitable[str]]]:
    """Start aiohttp apps on free ports, return their base URL, clean up afterwards."""
    runners: list[web.AppRunner] = []

    async def _start(app: web.Application) -> str:
        runner = web.AppRunner(app)
        await runner.setup()
        port = unused_tcp_port_factory()
        site = web.TCPSite(runner, "127.0.0.1", port)
        await site.start()
        runners.append(runner)
        return f"http://127.0.0.1:{port}"

    try:
        yield _start
    finally:
        for runner in runners:
            await runner.cleanup()


@pytest.fixture()
def page_html() -> str:
    """A page that exercises every block of the extractor."""
    return """
    <html><body>
      <div class="banner">
        <img src="/img/hero.png" alt="">
        <h1>  Spring\n  Sale </h1>
        <p>Up to&nbsp;50% off</p>
        <a href="#"> </a>
        <a href="/shop">Shop now</a>
      </div>
      <div class="main-description"><p>Intro text.</p>  <p>More text.</p></div>
      <div class="article-video">
        <h2>Watch the video</h2>
        <iframe src="https://www.youtube.com/embed/abc"></iframe>
      </div>
      <div class="related-articles">
        <div class="tile"><h3>First</h3><p>One</p><a href="/one">Read one</a></div>
        <div class="tile"></div>
        <div class="tile"><h3>Second</h3><p>Two</p><a href="two">Read two</a></div>
        <div class="tile"><h3>Third</h3><p>Three</p><a href="https://other.com/3">Read three</a></div>
        <div class="tile"><h3>Fourth</h3></div>
      </div>
    </body></html>
    """
