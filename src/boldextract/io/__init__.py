"""Document package input: zip entry retrieval and body XML loading."""

from __future__ import annotations

from .archive import fetch_entry
from .docx_reader import DOCUMENT_XML, XmlContent, load_body

__all__ = ["DOCUMENT_XML", "XmlContent", "fetch_entry", "load_body"]
