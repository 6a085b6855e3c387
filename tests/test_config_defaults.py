from boldextract.config import load_config


def test_default_values() -> None:
    cfg = load_config()
    assert cfg.schema_version == 1
    assert cfg.document.extension == "docx"
    assert cfg.document.entry == "word/document.xml"
    assert cfg.extraction.strategy == "pattern"
    assert cfg.output.scheme == "sep_string"
    assert cfg.output.separator == "\n\r"
