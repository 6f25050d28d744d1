"""
Output file naming: <YYYY-MM-DD>_<customer>.html / .pdf

The date comes first so generated files sort chronologically in a directory
listing. Same meta/client in, same name out.
"""
import re
from datetime import date, datetime
from pathlib import Path

UNKNOWN_CUSTOMER = "unknown_customer"

# Runs of anything outside ASCII letters, digits, "_" and "-" collapse to one "_"
_UNSAFE_RUN = re.compile(r"[^A-Za-z0-9_-]+")


def parse_date(value) -> date | None:
    """Accept date/datetime objects (YAML gives us those) or ISO-8601 strings."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    s = value.strip()
    try:
        return date.fromisoformat(s)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(s.replace("Z", "+00:00")).date()
    except ValueError:
        return None


def resolve_date(meta: dict | None, now: datetime | None = None) -> date:
    """meta.date when present and parseable, otherwise the run time."""
    parsed = parse_date((meta or {}).get("date"))
    if parsed is not None:
        return parsed
    return (now or datetime.now()).date()


def _clean(value) -> str:
    if value is None:
        return ""
    return str(value).strip()


def customer_identity(client: dict | None) -> str:
    client = client if isinstance(client, dict) else {}
    return _clean(client.get("company")) or _clean(client.get("name")) or UNKNOWN_CUSTOMER


def sanitize_filename(text: str) -> str:
    return _UNSAFE_RUN.sub("_", text)


def resolve_base_name(meta: dict | None, client: dict | None, now: datetime | None = None) -> str:
    day = resolve_date(meta if isinstance(meta, dict) else None, now)
    return f"{day.isoformat()}_{sanitize_filename(customer_identity(client))}"


def resolve_output_paths(meta, client, out_dir: str | Path, now: datetime | None = None) -> dict:
    """Returns {"base", "html_path", "pdf_path"} under out_dir."""
    base = resolve_base_name(meta, client, now)
    out_dir = Path(out_dir)
    return {
        "base": base,
        "html_path": out_dir / f"{base}.html",
        "pdf_path": out_dir / f"{base}.pdf",
    }
