"""Shared vocabulary for bold run extractors.

WordprocessingML stores text in runs (``w:r``).  A run may carry run
properties (``w:rPr``) and its visible text lives in ``w:t`` children.  Bold
is switched on by ``<w:b/>`` or by ``<w:b w:val="..."/>`` with a value that
is not false-like.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..io.docx_reader import XmlContent

W_NS = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"

W_R = f"{{{W_NS}}}r"
W_RPR = f"{{{W_NS}}}rPr"
W_B = f"{{{W_NS}}}b"
W_T = f"{{{W_NS}}}t"
W_VAL = f"{{{W_NS}}}val"

FALSE_VALUES: frozenset[str] = frozenset({"false", "0", "off"})

# ASCII whitespace plus NUL; non-breaking spaces survive.
TRIM_CHARS = " \t\n\r\0\x0b"


def is_bold_value(value: str | None) -> bool:
    """Return ``True`` when a ``w:val`` attribute value switches bold on.

    A missing attribute means on.
    """

    if value is None:
        return True
    return value.strip().lower() not in FALSE_VALUES


def trim_fragment(text: str) -> str:
    return text.strip(TRIM_CHARS)


@runtime_checkable
class FragmentExtractor(Protocol):
    """Protocol for bold run extractors.

    Implementations must return fragments in document order and never raise
    for well-formed input.  A document without bold runs yields ``[]``.
    """

    def name(self) -> str:
        """Return a short, stable identifier for the strategy."""

        ...

    def extract(self, content: XmlContent) -> list[str]:
        """Return the trimmed text of every bold run in ``content``."""

        ...


__all__ = [
    "FALSE_VALUES",
    "TRIM_CHARS",
    "W_B",
    "W_NS",
    "W_R",
    "W_RPR",
    "W_T",
    "W_VAL",
    "FragmentExtractor",
    "is_bold_value",
    "trim_fragment",
]
