"""data models for a single preview run."""

from dataclasses import dataclass
from pathlib import Path
from typing import Union

from markupsafe import Markup

from mdpreview.core.errors import InputError
from mdpreview.sanitizer import sanitize_html

DEFAULT_TITLE = "Markdown Preview"


@dataclass(frozen=True)
class Document:
    """raw Markdown source as read from disk."""

    path: Path
    content: bytes

    @classmethod
    def read(cls, path: Union[str, Path]) -> "Document":
        """
        reads the source file at path.

        Args:
            path: Markdown file to read

        Returns:
            document holding the raw bytes

        Raises:
            InputError: if the file cannot be read
        """
        source = Path(path)
        try:
            content = source.read_bytes()
        except OSError as e:
            raise InputError(f"reading markdown {str(source)!r}: {e}") from e
        return cls(path=source, content=content)

    @property
    def text(self) -> str:
        """source decoded as UTF-8, undecodable bytes replaced."""
        return self.content.decode("utf-8", errors="replace")


@dataclass(frozen=True)
class Page:
    """values substituted into the page template."""

    title: str
    body: Markup  # only ever built from sanitizer output

    @classmethod
    def from_sanitized(cls, fragment: str, title: str = DEFAULT_TITLE) -> "Page":
        """sanitizes fragment and marks the result safe for verbatim embedding."""
        return cls(title=title, body=Markup(sanitize_html(fragment)))
