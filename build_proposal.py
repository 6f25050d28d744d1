"""
Build a proposal from a YAML data file: HTML always, A4 PDF unless --html.

    python build_proposal.py data/proposals/<file>.yaml [--html]

Steps: load YAML (+ scope/terms Markdown) -> line totals and pricing summary ->
render templates/layout.html -> write out/<date>_<customer>.html ->
print it to out/<date>_<customer>.pdf with headless Chromium.
Nothing is written if loading or rendering fails; if the PDF step fails the
HTML file stays on disk.
"""
import argparse
import sys
from datetime import datetime
from pathlib import Path

from proposal_tools import settings
from proposal_tools.data_source import FileProposalSource, resolve_text_block
from proposal_tools.errors import ProposalError
from proposal_tools.html_renderer import ProposalRenderer, default_helpers
from proposal_tools.markdown_render import md_to_html
from proposal_tools.naming import resolve_output_paths
from proposal_tools.pricing import attach_item_totals, compute_totals

USAGE = "Usage: python build_proposal.py data/proposals/<file>.yaml [--html]"
YAML_SUFFIXES = (".yaml", ".yml")


def build_context(data: dict, base_dir: Path, source) -> dict:
    """Merge the loaded document with item totals, pricing summary and converted Markdown."""
    scope_src = resolve_text_block(data, "scope_md", base_dir, source)
    terms_src = resolve_text_block(data, "terms_md", base_dir, source)

    items = attach_item_totals(data.get("items"))
    totals = compute_totals(items, data.get("pricing"))

    return {
        **data,
        "items": items,
        "totals": totals,
        "scope_html": md_to_html(scope_src),
        "terms_html": md_to_html(terms_src),
    }


def build(
    data_path: str | Path,
    only_html: bool = False,
    out_dir: str | Path | None = None,
    template_dir: str | Path | None = None,
    source=None,
    renderer: ProposalRenderer | None = None,
    pdf_renderer=None,
    now: datetime | None = None,
) -> dict:
    """
    Run the whole pipeline for one YAML file.

    Returns {"html": Path, "pdf": Path | None}. pdf_renderer is any object with
    render(html_path) -> bytes; it is only created/used when only_html is False.
    """
    out_dir = Path(out_dir) if out_dir else settings.OUTPUT_DIR
    out_dir.mkdir(parents=True, exist_ok=True)

    source = source or FileProposalSource()
    abs_data = Path(data_path).resolve()
    data = source.load_document(abs_data)

    ctx = build_context(data, abs_data.parent, source)

    renderer = renderer or ProposalRenderer(template_dir)
    html = renderer.render(ctx, helpers=default_helpers())

    paths = resolve_output_paths(data.get("meta"), data.get("client"), out_dir, now=now)
    html_path = paths["html_path"]
    html_path.write_text(html, encoding="utf-8")

    if only_html:
        print(f"[Build] HTML ready: {html_path}")
        return {"html": html_path, "pdf": None}

    if pdf_renderer is None:
        from proposal_tools.pdf_export import PlaywrightPdfRenderer
        pdf_renderer = PlaywrightPdfRenderer()
    print(f"[PDF] Rendering {html_path.name} ...", flush=True)
    pdf_bytes = pdf_renderer.render(html_path)
    pdf_path = paths["pdf_path"]
    pdf_path.write_bytes(pdf_bytes)
    print(f"[Build] HTML ready: {html_path}")
    print(f"[Build] PDF ready: {pdf_path}")
    return {"html": html_path, "pdf": pdf_path}


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Generate proposal HTML/PDF from a YAML data file.")
    ap.add_argument("data", nargs="?", default=None, help="Path to data/proposals/<file>.yaml")
    ap.add_argument("--html", action="store_true", help="Only write the HTML file, skip the PDF")
    ap.add_argument("--out-dir", default=None, help=f"Output directory (default: {settings.OUTPUT_DIR})")
    ap.add_argument("--templates", default=None, help=f"Template directory (default: {settings.TEMPLATES_DIR})")
    args = ap.parse_args(argv)

    if not args.data:
        print(USAGE, file=sys.stderr)
        return 1
    if not args.data.lower().endswith(YAML_SUFFIXES):
        print(f"ERROR: expected a .yaml/.yml file, got {args.data}", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return 1

    try:
        build(args.data, only_html=args.html, out_dir=args.out_dir, template_dir=args.templates)
    except ProposalError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
