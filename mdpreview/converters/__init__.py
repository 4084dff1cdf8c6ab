"""converter lookup by name."""

from mdpreview.converters.base import Converter
from mdpreview.converters.basic import BasicConverter
from mdpreview.converters.markdown_it_engine import MarkdownItConverter

DEFAULT_CONVERTER = BasicConverter.name

CONVERTERS: dict[str, type[Converter]] = {
    BasicConverter.name: BasicConverter,
    MarkdownItConverter.name: MarkdownItConverter,
}


def get_converter(name: str = DEFAULT_CONVERTER) -> Converter:
    """
    returns a new converter instance for name.

    Raises:
        ValueError: if no converter is registered under name
    """
    try:
        return CONVERTERS[name]()
    except KeyError:
        raise ValueError(f"unknown converter: {name!r}") from None


__all__ = [
    "CONVERTERS",
    "DEFAULT_CONVERTER",
    "BasicConverter",
    "Converter",
    "MarkdownItConverter",
    "get_converter",
]
