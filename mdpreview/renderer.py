"""page template loading and rendering."""

import logging
from pathlib import Path
from typing import Optional, Union

from jinja2 import Environment, StrictUndefined, Template, TemplateError

from mdpreview.core.errors import RenderError
from mdpreview.core.models import Page

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE = (
    "<!DOCTYPE html><html><head>"
    '<meta http-equiv="content-type" content="text/html; charset=utf-8"> '
    "<title>{{ title }}</title> </head> <body> {{ body }} </body> </html>"
)

_env = Environment(
    autoescape=True,
    undefined=StrictUndefined,
    keep_trailing_newline=True,
)


def load_template(template_file: Optional[Union[str, Path]] = None) -> Template:
    """
    compiles the page template.

    Args:
        template_file: alternative template path, or None for the built-in default

    Returns:
        compiled template

    Raises:
        RenderError: if the template file cannot be read or parsed
    """
    if not template_file:
        return _env.from_string(DEFAULT_TEMPLATE)

    path = Path(template_file)
    logger.debug("loading template %s", path)
    try:
        source = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise RenderError(f"reading template file {str(path)!r}: {e}") from e

    try:
        return _env.from_string(source)
    except TemplateError as e:
        raise RenderError(f"parsing template file {str(path)!r}: {e}") from e


def render_page(
    page: Page,
    template: Optional[Template] = None,
    template_file: Optional[Union[str, Path]] = None,
) -> bytes:
    """
    renders page into the template as UTF-8 bytes.

    The title is escaped; the body is Markup and is inserted verbatim. Both are
    exposed as ``title``/``body`` and as ``Title``/``Body``.

    Args:
        page: title and sanitized body
        template: already compiled template (takes precedence over template_file)
        template_file: alternative template path, loaded when template is None
            and named in error messages

    Returns:
        rendered page bytes

    Raises:
        RenderError: if loading or executing the template fails
    """
    if template is None:
        template = load_template(template_file)

    try:
        rendered = template.render(
            title=page.title, body=page.body, Title=page.title, Body=page.body
        )
    except TemplateError as e:
        source = str(template_file) if template_file else "<default>"
        raise RenderError(f"executing template {source!r}: {e}") from e

    return rendered.encode("utf-8")
