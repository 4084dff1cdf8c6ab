"""base converter interface."""

from abc import ABC, abstractmethod


class Converter(ABC):  # pylint: disable=too-few-public-methods
    """abstract base class for Markdown to HTML converters."""

    name: str = ""

    @abstractmethod
    def convert(self, text: str) -> str:
        """
        Convert Markdown text to an HTML fragment.

        Args:
            text: Markdown source

        Returns:
            unsanitized HTML fragment
        """
        ...  # pylint: disable=unnecessary-ellipsis
