"""Checks on the shape of the installed ``boldextract`` package."""

from __future__ import annotations

import importlib
import pkgutil
from importlib import resources

import boldextract

SUBPACKAGES = {"config", "extract", "io", "output", "utils"}


def test_subpackages_present() -> None:
    found = {info.name for info in pkgutil.iter_modules(boldextract.__path__) if info.ispkg}
    assert SUBPACKAGES <= found


def test_every_module_documented_and_importable() -> None:
    undocumented = []
    for info in pkgutil.walk_packages(boldextract.__path__, "boldextract."):
        module = importlib.import_module(info.name)
        if not (module.__doc__ and module.__doc__.strip()):
            undocumented.append(info.name)
    assert undocumented == []


def test_defaults_yaml_is_packaged() -> None:
    defaults = resources.files("boldextract.config").joinpath("defaults.yml")
    assert defaults.is_file()
    assert "word/document.xml" in defaults.read_text(encoding="utf-8")
