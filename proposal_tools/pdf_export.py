"""
HTML -> A4 PDF through headless Chromium (Playwright).

build_proposal.py only depends on the `render(html_path) -> bytes` method, so
tests can hand it any object with that method instead of a real browser.
"""
import asyncio
from pathlib import Path

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import async_playwright

from proposal_tools import settings
from proposal_tools.errors import PdfExportError

PDF_OPTIONS = {
    "format": "A4",
    "print_background": True,
    "margin": {"top": "20mm", "right": "12mm", "bottom": "18mm", "left": "12mm"},
}
LAUNCH_ARGS = ["--font-render-hinting=none"]


class PlaywrightPdfRenderer:
    """Loads a written HTML file in Chromium and prints it to PDF bytes."""

    def __init__(self, timeout: float | None = None, headless: bool = True):
        self.timeout = settings.PDF_TIMEOUT_SECONDS if timeout is None else timeout
        self.headless = headless

    async def _render(self, html_path: Path) -> bytes:
        async with async_playwright() as p:
            browser = await p.chromium.launch(headless=self.headless, args=LAUNCH_ARGS)
            try:
                page = await browser.new_page()
                await page.goto(html_path.resolve().as_uri(), wait_until="networkidle", timeout=0)
                return await page.pdf(**PDF_OPTIONS)
            finally:
                await browser.close()

    async def render_async(self, html_path: str | Path) -> bytes:
        html_path = Path(html_path)
        if not html_path.is_file():
            raise PdfExportError(f"HTML file not found: {html_path}")
        try:
            return await asyncio.wait_for(self._render(html_path), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            raise PdfExportError(f"PDF export timed out after {self.timeout:g}s: {html_path.name}") from e
        except PlaywrightError as e:
            raise PdfExportError(f"Headless browser failed on {html_path.name}: {e}") from e

    def render(self, html_path: str | Path) -> bytes:
        return asyncio.run(self.render_async(html_path))
