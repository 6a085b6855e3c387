"""Bold run extractors.

Two strategies are available and are never combined: ``pattern`` scans the
serialized body XML with a regular expression, ``structural`` walks the lxml
tree.  :func:`get_extractor` returns the one selected by name.
"""

from __future__ import annotations

from .base import FragmentExtractor
from .bold_pattern import BoldPatternExtractor
from .bold_structural import BoldStructuralExtractor

STRATEGIES: dict[str, type[FragmentExtractor]] = {
    "pattern": BoldPatternExtractor,
    "structural": BoldStructuralExtractor,
}


def get_extractor(strategy: str = "pattern") -> FragmentExtractor:
    """Return a new extractor for ``strategy``.

    Raises ``ValueError`` for an unknown strategy name.
    """

    try:
        cls = STRATEGIES[strategy]
    except KeyError:
        known = ", ".join(sorted(STRATEGIES))
        raise ValueError(f"Unknown extraction strategy '{strategy}' (expected one of: {known})") from None
    return cls()


__all__ = [
    "STRATEGIES",
    "BoldPatternExtractor",
    "BoldStructuralExtractor",
    "FragmentExtractor",
    "get_extractor",
]
