"""
Runtime settings for the proposal builder.

Values come from environment variables (optionally from a .env file at the
project root). CLI flags in build_proposal.py override the directories.
"""
import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent   # project root
load_dotenv(BASE_DIR / ".env")


def _env(name: str, default: str = "") -> str:
    return os.environ.get(name, default).strip().strip('"')


def _env_float(name: str, default: float) -> float:
    raw = _env(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        print(f"[Settings] Ignoring invalid {name}={raw!r}, using {default}")
        return default


TEMPLATES_DIR = Path(_env("PROPOSAL_TEMPLATES_DIR") or BASE_DIR / "templates")
OUTPUT_DIR = Path(_env("PROPOSAL_OUTPUT_DIR") or BASE_DIR / "out")

# Single formatting convention for money and dates
LOCALE = _env("PROPOSAL_LOCALE") or "it_IT"
CURRENCY = _env("PROPOSAL_CURRENCY") or "EUR"

# Upper bound for the whole headless-browser export (launch + load + pdf)
PDF_TIMEOUT_SECONDS = _env_float("PDF_TIMEOUT_SECONDS", 60.0)
