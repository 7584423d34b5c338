"""Mini README: Thumbnail rendering through a headless browser.

Structure:
    * ThumbnailRenderer - protocol turning a model URL into PNG bytes.
    * PlaywrightRenderer - screenshots a ``<model-viewer>`` page in Chromium.
    * ThumbnailCache - writes ``<display name>.png`` once and reuses it.

Rendering is slow (a browser launch per miss), so the cache is a plain
presence check: once a PNG exists it is served forever.
"""

from __future__ import annotations

import tempfile
from html import escape
from pathlib import Path
from typing import Protocol

from ..catalogue import derive_display_name
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

MODEL_VIEWER_SCRIPT = "https://unpkg.com/@google/model-viewer/dist/model-viewer.min.js"

_PAGE_TEMPLATE = """<!DOCTYPE html><html><head>
<script type="module" src="{script}"></script>
<style>html,body{{margin:0;padding:0}}</style>
</head><body>
<model-viewer id="mv" src="{model_url}" camera-controls shadow-intensity="1" exposure="1.0" style="width:{size}px;height:{size}px"></model-viewer>
</body></html>"""


class ThumbnailRenderer(Protocol):
    async def render(self, model_url: str) -> bytes:
        ...


class PlaywrightRenderer:
    """Render a model snapshot with headless Chromium."""

    def __init__(self, *, size: int = 512, settle_ms: int = 1200) -> None:
        self.size = size
        self.settle_ms = settle_ms

    def build_page(self, model_url: str) -> str:
        return _PAGE_TEMPLATE.format(
            script=MODEL_VIEWER_SCRIPT,
            model_url=escape(model_url, quote=True),
            size=self.size,
        )

    async def render(self, model_url: str) -> bytes:
        from playwright.async_api import async_playwright

        async with async_playwright() as playwright:
            browser = await playwright.chromium.launch(headless=True, args=["--no-sandbox"])
            try:
                page = await browser.new_page(
                    viewport={"width": self.size, "height": self.size},
                    device_scale_factor=1,
                )
                await page.set_content(self.build_page(model_url), wait_until="networkidle")
                # model-viewer keeps loading after network idle
                await page.wait_for_timeout(self.settle_ms)
                return await page.screenshot(type="png")
            finally:
                await browser.close()


class ThumbnailCache:
    """Serve cached thumbnails, rendering each one on first request."""

    def __init__(
        self,
        directory: Path,
        renderer: ThumbnailRenderer,
        *,
        extension: str = ".glb",
        url_prefix: str = "/thumbs",
    ) -> None:
        self.directory = Path(directory)
        self.renderer = renderer
        self.extension = extension
        self.url_prefix = url_prefix.rstrip("/")

    def thumbnail_name(self, filename: str) -> str:
        if "/" in filename or "\\" in filename or not filename.endswith(self.extension):
            raise ValueError(f"Not a model filename: {filename!r}")
        display_name = derive_display_name(filename, self.extension)
        if not display_name or display_name in {".", ".."}:
            raise ValueError(f"Not a model filename: {filename!r}")
        return f"{display_name}.png"

    async def ensure(self, filename: str, model_url: str) -> str:
        """Return the thumbnail URL for ``filename``, rendering it if missing."""

        name = self.thumbnail_name(filename)
        url = f"{self.url_prefix}/{name}"
        output_path = self.directory / name
        if output_path.exists():
            LOGGER.debug("Thumbnail cache hit for %s", filename)
            return url

        self.directory.mkdir(parents=True, exist_ok=True)
        LOGGER.info("Rendering thumbnail for %s from %s", filename, model_url)
        image = await self.renderer.render(model_url)
        # Publish complete files only; the presence check never re-renders.
        with tempfile.NamedTemporaryFile(
            dir=self.directory, prefix=f".{name}.", suffix=".tmp", delete=False
        ) as handle:
            handle.write(image)
            temporary_path = Path(handle.name)
        try:
            temporary_path.replace(output_path)
        except OSError:
            temporary_path.unlink(missing_ok=True)
            raise
        return url
