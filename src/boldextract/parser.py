"""Document parsers: validation and orchestration.

A parser variant exposes the extension it accepts, the archive entry holding
the body XML and the rule that turns that XML into fragments.  The
orchestration in :func:`parse` is shared by all variants:

    validate path -> load body XML -> extract fragments -> format

:func:`open_document` performs the validation and returns a
:class:`~boldextract.utils.result.Result` instead of raising, so callers that
want to branch on bad input can do so without exception handling.
:func:`parse` raises the carried error.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, runtime_checkable

from .config import ConfigModel
from .extract import get_extractor
from .io.docx_reader import DOCUMENT_XML, XmlContent, load_body
from .output.formatter import DEFAULT_SCHEME, DEFAULT_SEPARATOR, format_result
from .utils.errors import InvalidExtensionError
from .utils.logging import get_logger
from .utils.result import Result

log = get_logger(__name__)


@runtime_checkable
class DocumentParser(Protocol):
    """Capability set shared by every document parser variant."""

    entry_name: str

    def expected_extension(self) -> str:
        """Return the accepted extension without the leading dot."""

        ...

    def extract_fragments(self, content: XmlContent) -> list[str]:
        """Return the fragments of ``content`` in document order."""

        ...


class DocxBoldParser:
    """Extract bold runs from ``.docx`` packages."""

    def __init__(
        self,
        strategy: str = "pattern",
        *,
        entry_name: str = DOCUMENT_XML,
        extension: str = "docx",
    ) -> None:
        self.extractor = get_extractor(strategy)
        self.entry_name = entry_name
        self._extension = extension

    def expected_extension(self) -> str:
        return self._extension

    def extract_fragments(self, content: XmlContent) -> list[str]:
        return self.extractor.extract(content)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(strategy={self.extractor.name()!r}, "
            f"entry_name={self.entry_name!r}, extension={self._extension!r})"
        )


@dataclass(slots=True, frozen=True)
class Document:
    """A validated input path."""

    path: Path
    extension: str


def _extension_of(path: Path) -> str:
    # "report.docx" -> "docx"; "archive" -> ""
    return path.suffix[1:] if path.suffix else ""


def open_document(
    path: str | os.PathLike[str],
    parser: DocumentParser,
) -> Result[Document, Exception]:
    """Validate ``path`` for ``parser`` without touching its contents.

    The error side carries :class:`FileNotFoundError` when ``path`` does not
    exist (the extension is then not checked) or
    :class:`InvalidExtensionError` when its extension differs from
    ``parser.expected_extension()``.  The comparison is case-sensitive.
    """

    candidate = Path(path)
    if not candidate.exists():
        return Result.err(FileNotFoundError(f"Can't open file {path}"))

    expected = parser.expected_extension()
    actual = _extension_of(candidate)
    if actual != expected:
        return Result.err(
            InvalidExtensionError(f"Incorrect file extension '.{actual}', .{expected} expected")
        )
    return Result.ok(Document(path=candidate, extension=actual))


def parse(
    path: str | os.PathLike[str],
    parser: DocumentParser | None = None,
    *,
    scheme: str = DEFAULT_SCHEME,
    separator: str = DEFAULT_SEPARATOR,
) -> str | Sequence[str]:
    """Extract and format the fragments of the document at ``path``.

    ``parser`` defaults to a :class:`DocxBoldParser` with the pattern
    strategy.  Every error propagates unchanged; there is no partial result.
    """

    parser = parser if parser is not None else DocxBoldParser()
    opened = open_document(path, parser)
    if opened.is_err:
        raise opened.error
    document = opened.value

    content = load_body(document.path, entry_name=parser.entry_name)
    fragments = parser.extract_fragments(content)
    log.debug("Extracted %d fragments from %s", len(fragments), document.path)
    return format_result(fragments, scheme, separator)


def parser_from_config(cfg: ConfigModel) -> DocxBoldParser:
    """Build the docx parser described by ``cfg``."""

    return DocxBoldParser(
        cfg.extraction.strategy,
        entry_name=cfg.document.entry,
        extension=cfg.document.extension,
    )


def parse_with_config(path: str | os.PathLike[str], cfg: ConfigModel) -> str | Sequence[str]:
    """Run :func:`parse` with parser and output settings taken from ``cfg``."""

    return parse(
        path,
        parser_from_config(cfg),
        scheme=cfg.output.scheme,
        separator=cfg.output.separator,
    )


__all__ = [
    "Document",
    "DocumentParser",
    "DocxBoldParser",
    "open_document",
    "parse",
    "parse_with_config",
    "parser_from_config",
]
