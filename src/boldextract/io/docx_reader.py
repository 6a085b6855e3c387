"""DOCX body loader.

Reads ``word/document.xml`` out of a ``.docx`` package and parses it with
lxml.  The parsed tree is kept together with its re-serialized text so that
both tree walking and pattern scanning extractors can consume the same
:class:`XmlContent`.  Re-serializing normalizes quoting, namespace
declarations and empty elements (``<w:b/>``) regardless of how the producing
application wrote them.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from lxml import etree

from ..utils.errors import MalformedXmlError
from ..utils.logging import get_logger
from .archive import fetch_entry

DOCUMENT_XML = "word/document.xml"

SECURE_PARSER = etree.XMLParser(resolve_entities=False, no_network=True, huge_tree=False)

log = get_logger(__name__)


@dataclass(slots=True, frozen=True)
class XmlContent:
    """Parsed body XML and its canonical string form."""

    root: etree._Element
    text: str


def parse_xml(data: bytes, *, source: str = "<bytes>") -> XmlContent:
    """Parse ``data`` into :class:`XmlContent`.

    Raises :class:`MalformedXmlError` when ``data`` is not well-formed.
    """

    try:
        root = etree.fromstring(data, SECURE_PARSER)
    except (etree.XMLSyntaxError, ValueError) as exc:
        raise MalformedXmlError(f"Invalid XML in {source}: {exc}") from exc
    return XmlContent(root=root, text=etree.tostring(root, encoding="unicode"))


def load_body(
    document_path: str | os.PathLike[str],
    *,
    entry_name: str = DOCUMENT_XML,
) -> XmlContent:
    """Fetch and parse the body XML of ``document_path``."""

    raw = fetch_entry(document_path, entry_name)
    content = parse_xml(raw, source=f"{document_path}:{entry_name}")
    log.debug("Parsed %s (%d chars serialized)", entry_name, len(content.text))
    return content


__all__ = ["DOCUMENT_XML", "SECURE_PARSER", "XmlContent", "load_body", "parse_xml"]
