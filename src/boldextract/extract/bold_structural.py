"""Tree walk for bold runs.

Every ``w:r`` is visited in document order.  The last ``w:b`` child of its
``w:rPr`` decides whether the run is bold; when it is, the first direct
``w:t`` child with non-empty text is captured.  This mirrors the nearest text
node rule of :mod:`boldextract.extract.bold_pattern`, so both strategies agree
on well-formed documents, tracked formatting changes included.  They differ
on nested runs (text boxes inside a run), which this walk does not enter.
"""

from __future__ import annotations

from lxml import etree

from ..io.docx_reader import XmlContent
from ..utils.logging import get_logger
from .base import W_B, W_R, W_RPR, W_T, W_VAL, is_bold_value, trim_fragment

__all__ = ["BoldStructuralExtractor"]

log = get_logger(__name__)


def _run_is_bold(run: etree._Element) -> bool:
    props = run.find(W_RPR)
    if props is None:
        return False
    markers = props.findall(W_B)
    if not markers:
        return False
    return is_bold_value(markers[-1].get(W_VAL))


def _first_text(run: etree._Element) -> str | None:
    for node in run.iterchildren(W_T):
        if node.text:
            return node.text
    return None


class BoldStructuralExtractor:
    """Extract bold run text by walking the parsed tree."""

    def name(self) -> str:  # pragma: no cover - trivial
        return "structural"

    def extract(self, content: XmlContent) -> list[str]:
        """Return trimmed bold fragments of ``content`` in document order."""

        fragments: list[str] = []
        for run in content.root.iter(W_R):
            if not _run_is_bold(run):
                continue
            text = _first_text(run)
            if text is not None:
                fragments.append(trim_fragment(text))
        log.debug("Tree walk found %d bold fragments", len(fragments))
        return fragments
