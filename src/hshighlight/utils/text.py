"""Text processing utilities for hshighlight.

Example:
    >>> from hshighlight.utils.text import escape_html
    >>> escape_html("a <$> b")
    'a &lt;$&gt; b'
"""

from __future__ import annotations

import html as html_module


def escape_html(text: str) -> str:
    """Escape HTML special characters for safe use in markup and attributes.

    Converts special characters to HTML entities:
    - & becomes &amp;
    - < becomes &lt;
    - > becomes &gt;
    - " becomes &quot;
    - ' becomes &#x27;

    Args:
        text: Text to escape

    Returns:
        HTML-escaped text

    Examples:
        >>> escape_html("'a' -> \\"b\\"")
        '&#x27;a&#x27; -&gt; &quot;b&quot;'
    """
    if not text:
        return ""

    return html_module.escape(text, quote=True)
