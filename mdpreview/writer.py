"""output path computation and page persistence."""

from pathlib import Path
from typing import Union

from mdpreview.core.errors import OutputError

OUTPUT_FILENAME = "index.html"


def output_path_for(source: Union[str, Path]) -> Path:
    """returns the index.html path next to the source file."""
    return Path(source).parent / OUTPUT_FILENAME


def save_html(path: Union[str, Path], data: bytes) -> None:
    """
    writes data to path, replacing any existing file.

    Raises:
        OutputError: if the file cannot be written
    """
    try:
        Path(path).write_bytes(data)
    except OSError as e:
        raise OutputError(f"writing HTML file {str(path)!r}: {e}") from e
