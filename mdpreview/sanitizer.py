"""pattern-based removal of dangerous HTML constructs."""

import re

_FLAGS = re.IGNORECASE | re.DOTALL

# applied in order; each pattern is replaced with the empty string
REMOVAL_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"<script[^>]*>.*?</script>", _FLAGS),
    re.compile(r"\son\w+\s*=\s*(?:\"[^\"]*\"|'[^']*')", _FLAGS),
    re.compile(r"javascript:[^\"'\s]*", _FLAGS),
    re.compile(r"\sstyle\s*=\s*(?:\"[^\"]*\"|'[^']*')", _FLAGS),
    re.compile(r"<iframe[^>]*>.*?</iframe>", _FLAGS),
    re.compile(r"<object[^>]*>.*?</object>", _FLAGS),
    re.compile(r"<embed[^>]*>", _FLAGS),
    re.compile(r"<base[^>]*>", _FLAGS),
    re.compile(r"<meta[^>]*http-equiv=[\"']refresh[\"'][^>]*>", _FLAGS),
)


def _remove_once(html: str) -> str:
    for pattern in REMOVAL_PATTERNS:
        html = pattern.sub("", html)
    return html


def sanitize_html(html: str) -> str:
    """
    strips script blocks, event handlers, javascript: URLs, inline styles,
    iframes, objects, embeds, base tags and meta refreshes from an HTML fragment.

    Removal can splice fragments into a new match (``<scr<script></script>ipt>``),
    so the passes repeat until nothing changes. This makes the function
    idempotent.

    Args:
        html: HTML fragment

    Returns:
        fragment with every recognised construct removed
    """
    prev = None
    while prev != html:
        prev = html
        html = _remove_once(html)
    return html
