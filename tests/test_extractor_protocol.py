from boldextract.extract import BoldPatternExtractor, BoldStructuralExtractor
from boldextract.extract.base import FragmentExtractor
from boldextract.io.docx_reader import XmlContent, parse_xml


class DummyExtractor:
    def name(self) -> str:  # pragma: no cover - trivial
        return "dummy"

    def extract(self, content: XmlContent) -> list[str]:
        return [content.root.tag]


def test_dummy_extractor_runtime_checkable() -> None:
    dummy = DummyExtractor()
    assert isinstance(dummy, FragmentExtractor)
    assert dummy.extract(parse_xml(b"<root/>")) == ["root"]


def test_builtin_extractors_document_extract() -> None:
    for cls in (BoldPatternExtractor, BoldStructuralExtractor):
        assert cls.extract.__doc__ and cls.extract.__doc__.strip()
