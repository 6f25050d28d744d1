"""
Markdown -> HTML for the free-text blocks of a proposal (scope, terms).

Raw HTML in the source is never passed through: `<b>` in a proposal is printed
as the literal text "<b>", so client-supplied text cannot break the layout.
Single newlines become <br>, bare URLs become links.
"""
from markdown_it import MarkdownIt

_md = MarkdownIt("js-default", {"html": False, "linkify": True, "breaks": True})


def md_to_html(text: str | None) -> str:
    if not text or not str(text).strip():
        return ""
    return _md.render(str(text))
