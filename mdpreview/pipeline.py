"""end-to-end preview pipeline."""

import logging
from pathlib import Path
from typing import Optional, TextIO, Union

from mdpreview.console import ConsoleHandler
from mdpreview.converters import Converter, get_converter
from mdpreview.core.errors import PreviewError
from mdpreview.core.models import Document, Page
from mdpreview.previewer import preview
from mdpreview.renderer import load_template, render_page
from mdpreview.writer import output_path_for, save_html

logger = logging.getLogger(__name__)


def parse_content(
    markdown: Union[bytes, str],
    template_file: Optional[Union[str, Path]] = None,
    converter: Optional[Converter] = None,
) -> bytes:
    """
    converts Markdown into a sanitized, fully rendered HTML page.

    Args:
        markdown: Markdown source (bytes are decoded as UTF-8)
        template_file: alternative template path, or None for the built-in default
        converter: converter to use (defaults to the basic rule set)

    Returns:
        rendered page bytes

    Raises:
        RenderError: if the template cannot be loaded or rendered
    """
    if isinstance(markdown, bytes):
        markdown = markdown.decode("utf-8", errors="replace")
    converter = converter or get_converter()

    # loads the template first so a bad template fails before any conversion
    template = load_template(template_file)

    fragment = converter.convert(markdown)
    page = Page.from_sanitized(fragment)
    logger.debug(
        "converted %d chars with %s into %d chars of sanitized HTML",
        len(markdown),
        converter.name,
        len(page.body),
    )

    return render_page(page, template=template, template_file=template_file)


def run(  # pylint: disable=too-many-arguments
    filename: Union[str, Path],
    out: TextIO,
    skip_preview: bool = False,
    template_file: Optional[Union[str, Path]] = None,
    converter: Optional[Converter] = None,
    console: Optional[ConsoleHandler] = None,
) -> Path:
    """
    reads filename, renders it, writes index.html next to it, prints the
    output path to out and optionally opens the result.

    Args:
        filename: Markdown file to preview
        out: stream that receives the output path
        skip_preview: if True, don't launch the viewer
        template_file: alternative template path
        converter: converter to use (defaults to the basic rule set)
        console: console for the preview status spinner

    Returns:
        path of the written file

    Raises:
        MdPreviewError: on the first failing step; nothing is retried
    """
    document = Document.read(filename)

    html = parse_content(document.text, template_file, converter)

    out_path = output_path_for(document.path)
    print(out_path, file=out)

    save_html(out_path, html)
    logger.debug("wrote %d bytes to %s", len(html), out_path)

    if skip_preview:
        return out_path

    try:
        preview(out_path, console=console)
    except PreviewError as e:
        raise PreviewError(f"preview failed for {str(out_path)!r}: {e}") from e

    return out_path
