"""Extract bold text runs from ``.docx`` word-processing packages."""

from .parser import DocxBoldParser, open_document, parse

__version__ = "0.1.0"

__all__ = ["DocxBoldParser", "open_document", "parse", "__version__"]
