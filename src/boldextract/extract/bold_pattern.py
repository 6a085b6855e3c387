"""Regular expression scan for bold runs.

:class:`BoldPatternExtractor` works on the serialized body XML.  A match
starts at a bold marker that is switched on and advances lazily to the first
``<w:t>`` element with non-empty content, capturing that content.  The scan
gives up at the next bold marker of any value, at a run end ``</w:r>`` or at
the end of paragraph properties ``</w:pPr>``, so bold set only on a paragraph
mark never leaks into the following run.

Run property revisions (``w:rPrChange``) hold the formatting a run had before
a tracked change.  They are removed before scanning so only the current
formatting counts.

The pattern relies on the conventional ``w:`` prefix, which is what every
WordprocessingML producer emits and what lxml preserves on serialization.
"""

from __future__ import annotations

import html
import re

from ..io.docx_reader import XmlContent
from ..utils.logging import get_logger
from .base import FALSE_VALUES, trim_fragment

__all__ = ["BOLD_RUN_RX", "REVISION_RX", "BoldPatternExtractor"]

log = get_logger(__name__)

# ---------------------------------------------------------------------------
# Regular expressions
# ---------------------------------------------------------------------------
_FALSE_ALT = "|".join(re.escape(v) for v in sorted(FALSE_VALUES))

BOLD_ON = rf"""<w:b(?:\s+w:val="(?!\s*(?i:{_FALSE_ALT})\s*")[^"]*")?\s*/>"""
BOLD_ANY = r"<w:b(?:\s[^>]*)?/>"
SCAN_STOP = rf"(?:{BOLD_ANY}|</w:r>|</w:pPr>)"
TEXT_NODE = r"<w:t(?:\s[^>]*)?>(?P<text>[^<]+)</w:t>"

BOLD_RUN_RX: re.Pattern[str] = re.compile(
    rf"{BOLD_ON}(?:(?!{SCAN_STOP}).)*?{TEXT_NODE}",
    re.DOTALL,
)

REVISION_RX: re.Pattern[str] = re.compile(
    r"<w:rPrChange\b[^>]*/>|<w:rPrChange\b[^>]*>.*?</w:rPrChange>",
    re.DOTALL,
)


class BoldPatternExtractor:
    """Extract bold run text by scanning serialized XML."""

    def name(self) -> str:  # pragma: no cover - trivial
        return "pattern"

    def extract(self, content: XmlContent) -> list[str]:
        """Return trimmed bold fragments of ``content`` in document order."""

        current = REVISION_RX.sub("", content.text)
        fragments = [
            trim_fragment(html.unescape(match.group("text")))
            for match in BOLD_RUN_RX.finditer(current)
        ]
        log.debug("Pattern scan found %d bold fragments", len(fragments))
        return fragments
