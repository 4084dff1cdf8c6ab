"""minimal line-oriented Markdown converter."""

from mdpreview.converters.base import Converter

FENCE = "```"
HEADING_PREFIX = "# "
LIST_PREFIX = "- "


def normalize_newlines(text: str) -> str:
    """converts \\r\\n and lone \\r line endings to \\n."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


class BasicConverter(Converter):  # pylint: disable=too-few-public-methods
    """
    converts a small Markdown subset: level 1 headings, fenced code blocks,
    unordered lists and paragraphs.

    Text is copied through without escaping; the sanitizer handles raw HTML.
    """

    name = "basic"

    def convert(self, text: str) -> str:
        lines = normalize_newlines(text).split("\n")
        out: list[str] = []
        in_code = False
        in_list = False

        for line in lines:
            if line.startswith(FENCE):
                # a fence also ends any open list
                if in_list:
                    out.append("</ul>\n")
                    in_list = False
                out.append("</code></pre>\n" if in_code else "<pre><code>")
                in_code = not in_code
                continue

            if in_code:
                out.append(line + "\n")
                continue

            if line.startswith(LIST_PREFIX):
                if not in_list:
                    out.append("<ul>\n")
                    in_list = True
                out.append(f"<li>{line[len(LIST_PREFIX):]}</li>\n")
                continue
            if in_list:
                out.append("</ul>\n")
                in_list = False

            if line.startswith(HEADING_PREFIX):
                out.append(f"<h1>{line[len(HEADING_PREFIX):]}</h1>\n")
            elif line:
                out.append(f"<p>{line}</p>\n")
            else:
                out.append("\n")

        # unterminated constructs are closed best-effort
        if in_code:
            out.append("</code></pre>\n")
        if in_list:
            out.append("</ul>\n")

        return "".join(out)
