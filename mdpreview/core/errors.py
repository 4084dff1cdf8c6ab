"""error types raised by the preview pipeline."""


class MdPreviewError(Exception):
    """base class for all fatal pipeline errors."""


class InputError(MdPreviewError):
    """source Markdown file could not be read."""


class RenderError(MdPreviewError):
    """template could not be loaded, parsed or rendered."""


class OutputError(MdPreviewError):
    """rendered page could not be written."""


class PreviewError(MdPreviewError):
    """default viewer could not be launched."""
