"""
Jinja2 templating shared by all views.

The derived attributes from catalog.models.virtuals are exposed as template
globals, so views compute urls, names and lifespans the same way the
controllers do:

    <a href="{{ record_url(author) }}">{{ author_name(author)|stored }}</a>
    ({{ author_lifespan(author) }})

Record text is escaped once, when a form is validated (see
catalog.schemas.common.sanitize). Views print it through the `stored`
filter so autoescaping does not escape it a second time; everything else
is autoescaped as usual.
"""

from pathlib import Path

from fastapi.templating import Jinja2Templates
from markupsafe import Markup

from catalog.models import virtuals

TEMPLATES_DIR = Path(__file__).parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def stored(value) -> Markup:
    """Mark text that was escaped on input as safe markup."""
    if value is None:
        return Markup("")
    return Markup(str(value))


templates.env.filters["stored"] = stored

templates.env.globals.update(
    entity_url=virtuals.entity_url,
    list_url=virtuals.list_url,
    record_url=virtuals.record_url,
    author_name=virtuals.author_name,
    author_lifespan=virtuals.author_lifespan,
    format_date_medium=virtuals.format_date_medium,
    format_date_iso=virtuals.format_date_iso,
)
