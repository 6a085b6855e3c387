"""Shared fixtures for building small ``.docx`` packages on disk."""

from __future__ import annotations

import zipfile
from collections.abc import Callable
from pathlib import Path

import pytest

W_NS = "http://schemas.openxmlformats.org/wordprocessingml/2006/main"

CONTENT_TYPES = (
    '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
    '<Types xmlns="http://schemas.openxmlformats.org/package/2006/content-types">'
    '<Default Extension="xml" ContentType="application/xml"/>'
    "</Types>"
)

SAMPLE_BODY = (
    "<w:p>"
    "<w:r><w:rPr><w:b/></w:rPr><w:t>Hello</w:t></w:r>"
    "<w:r><w:t>plain world</w:t></w:r>"
    '<w:r><w:rPr><w:b/><w:i/></w:rPr><w:t xml:space="preserve"> Bold two </w:t></w:r>'
    "</w:p>"
    "<w:p>"
    '<w:r><w:rPr><w:b/><w:b w:val="false"/></w:rPr><w:t>switched off</w:t></w:r>'
    '<w:r><w:rPr><w:b w:val="true"/></w:rPr><w:t>Third</w:t></w:r>'
    "</w:p>"
)


def document_xml(body: str) -> str:
    return (
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
        f'<w:document xmlns:w="{W_NS}"><w:body>{body}</w:body></w:document>'
    )


@pytest.fixture
def make_docx(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory writing a zip package with ``body`` as its document XML.

    ``raw`` bypasses the document wrapper and is written to ``entry`` as-is.
    """

    def _make(
        body: str = SAMPLE_BODY,
        *,
        name: str = "sample.docx",
        entry: str = "word/document.xml",
        raw: str | bytes | None = None,
    ) -> Path:
        path = tmp_path / name
        payload = raw if raw is not None else document_xml(body)
        with zipfile.ZipFile(path, "w", compression=zipfile.ZIP_DEFLATED) as zf:
            zf.writestr("[Content_Types].xml", CONTENT_TYPES)
            zf.writestr(entry, payload)
        return path

    return _make


@pytest.fixture
def sample_docx(make_docx: Callable[..., Path]) -> Path:
    return make_docx()
