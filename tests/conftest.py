"""
Shared fixtures for the proposal builder tests.

No test launches a real browser: PDF export goes through FakePdfRenderer or a
stubbed async_playwright.
"""
import shutil
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
TEMPLATES_DIR = ROOT / "templates"
EXAMPLE_DIR = ROOT / "data" / "proposals"


class FakePdfRenderer:
    """Records the HTML files it was asked to print and returns fixed bytes."""

    def __init__(self, payload: bytes = b"%PDF-1.7\n% fake\n"):
        self.payload = payload
        self.calls = []

    def render(self, html_path):
        html_path = Path(html_path)
        self.calls.append(html_path)
        assert html_path.is_file(), "HTML must be written before PDF export"
        return self.payload


class ForbiddenPdfRenderer:
    def render(self, html_path):
        raise AssertionError(f"PDF renderer must not be called (got {html_path})")


class MemorySource:
    """In-memory replacement for FileProposalSource."""

    def __init__(self, documents=None, texts=None):
        self.documents = {Path(k): v for k, v in (documents or {}).items()}
        self.texts = {Path(k): v for k, v in (texts or {}).items()}

    def load_document(self, path):
        from proposal_tools.errors import InputDocumentError
        try:
            return self.documents[Path(path)]
        except KeyError:
            raise InputDocumentError(f"File not found: {path}")

    def read_text(self, path):
        from proposal_tools.errors import InputDocumentError
        try:
            return self.texts[Path(path)]
        except KeyError:
            raise InputDocumentError(f"File not found: {path}")


@pytest.fixture
def templates_dir():
    return TEMPLATES_DIR


@pytest.fixture
def example_yaml(tmp_path):
    """The bundled example proposal copied into tmp_path/data/."""
    data_dir = tmp_path / "data"
    shutil.copytree(EXAMPLE_DIR, data_dir)
    return data_dir / "example.yaml"


@pytest.fixture
def out_dir(tmp_path):
    return tmp_path / "out"


@pytest.fixture
def fake_pdf():
    return FakePdfRenderer()
