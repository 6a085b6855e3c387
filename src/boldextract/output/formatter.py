"""Turn an ordered list of fragments into the caller's output shape.

``sep_string`` joins the fragments with a separator and wraps the joined
string with the same separator on both ends, so an empty list still yields
two separators.  Any other scheme hands the list back unchanged.
"""

from __future__ import annotations

from collections.abc import Sequence

DEFAULT_SEPARATOR = "\n\r"
DEFAULT_SCHEME = "sep_string"


def format_result(
    fragments: Sequence[str],
    scheme: str = DEFAULT_SCHEME,
    separator: str = DEFAULT_SEPARATOR,
) -> str | Sequence[str]:
    """Format ``fragments`` according to ``scheme``.

    >>> format_result(["A", "B"])
    '\\n\\rA\\n\\rB\\n\\r'
    >>> format_result(["A", "B"], "raw")
    ['A', 'B']
    """

    if scheme == DEFAULT_SCHEME:
        return separator + separator.join(fragments) + separator
    return fragments


__all__ = ["DEFAULT_SCHEME", "DEFAULT_SEPARATOR", "format_result"]
