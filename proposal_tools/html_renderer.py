"""
Proposal HTML renderer (Jinja2).

Template layout:
    templates/layout.html          main document
    templates/partials/<name>.*    included as {% include "<name>" %}

Formatting helpers (eur, format_date) are handed to each render() call and
installed as filters on an environment built for that call, so nothing is
registered globally.

scope_html / terms_html come from md_to_html() and are embedded as-is; every
other context value is autoescaped.
"""
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from babel import Locale, UnknownLocaleError
from babel.dates import format_date as babel_format_date
from babel.numbers import format_currency
from jinja2 import (
    ChainableUndefined,
    ChoiceLoader,
    DictLoader,
    Environment,
    FileSystemLoader,
    TemplateError,
    TemplateNotFound,
    UndefinedError,
)
from markupsafe import Markup

from proposal_tools import settings
from proposal_tools.errors import TemplateConfigError
from proposal_tools.naming import parse_date
from proposal_tools.pricing import to_number

MARKUP_FIELDS = ("scope_html", "terms_html")


def default_helpers(locale: str = settings.LOCALE, currency: str = settings.CURRENCY) -> Dict[str, Callable]:
    """Currency and DD/MM/YYYY date formatters for one locale."""
    try:
        Locale.parse(locale)
    except (UnknownLocaleError, ValueError) as e:
        raise TemplateConfigError(f"Unknown locale for formatting helpers: {locale!r}") from e

    def eur(value) -> str:
        return format_currency(to_number(value), currency, locale=locale)

    def format_date(value) -> str:
        if not value:
            return ""
        parsed = parse_date(value)
        if parsed is None:
            return str(value)
        return babel_format_date(parsed, "dd/MM/yyyy", locale=locale)

    return {"eur": eur, "format_date": format_date}


def load_partials(partials_dir: Path) -> Dict[str, str]:
    """Read every file in partials_dir; key is the file name without extension."""
    if not partials_dir.is_dir():
        raise TemplateConfigError(f"Partials directory not found: {partials_dir}")
    partials = {}
    for f in sorted(partials_dir.iterdir()):
        if f.is_file():
            partials[f.stem] = f.read_text(encoding="utf-8")
    return partials


class ProposalRenderer:
    """Renders the proposal context into one self-contained HTML document."""

    def __init__(
        self,
        template_dir: Optional[str | Path] = None,
        layout: str = "layout.html",
        partials_dir: str = "partials",
    ):
        self.template_dir = Path(template_dir) if template_dir else settings.TEMPLATES_DIR
        self.layout = layout
        self.partials_dir = self.template_dir / partials_dir

    def _build_environment(self, helpers: Dict[str, Callable]) -> Environment:
        if not self.template_dir.is_dir():
            raise TemplateConfigError(f"Template directory not found: {self.template_dir}")
        env = Environment(
            loader=ChoiceLoader([
                DictLoader(load_partials(self.partials_dir)),
                FileSystemLoader(str(self.template_dir)),
            ]),
            autoescape=True,
            undefined=ChainableUndefined,
            auto_reload=False,
        )
        env.filters.update(helpers)
        return env

    def render(self, context: Dict[str, Any], helpers: Optional[Dict[str, Callable]] = None) -> str:
        """
        Render the layout with context.

        Raises TemplateConfigError for a missing layout/partial, a syntax
        error, or a reference to a helper that was not passed in.
        """
        env = self._build_environment(helpers if helpers is not None else default_helpers())
        ctx = dict(context)
        for key in MARKUP_FIELDS:
            ctx[key] = Markup(ctx.get(key) or "")
        try:
            template = env.get_template(self.layout)
            return template.render(**ctx)
        except TemplateNotFound as e:
            raise TemplateConfigError(f"Template not found: {e.name} (in {self.template_dir})") from e
        except UndefinedError as e:
            raise TemplateConfigError(f"Template calls an undefined helper: {e}") from e
        except TemplateError as e:
            raise TemplateConfigError(f"Template error in {self.layout}: {e}") from e
