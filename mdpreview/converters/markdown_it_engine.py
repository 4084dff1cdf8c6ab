"""Markdown conversion delegated to markdown-it-py."""

from typing import cast

from markdown_it import MarkdownIt

from mdpreview.converters.base import Converter


class MarkdownItConverter(Converter):  # pylint: disable=too-few-public-methods
    """renders CommonMark (plus tables) with markdown-it-py."""

    name = "markdown-it"

    def __init__(self) -> None:
        # raw HTML is left in place for the sanitizer
        self._md = MarkdownIt("commonmark")
        self._md.enable("table")

    def convert(self, text: str) -> str:
        return cast(str, self._md.render(text))
