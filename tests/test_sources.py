"""Tests for the default filesystem collaborators."""

import sys

import pytest

from classloader.sources import directory_exists
from classloader.sources import file_exists
from classloader.sources import load_source_file


def test_file_exists(tmp_path):
    source = tmp_path / "Thing.py"
    source.write_text("")

    assert file_exists(str(source)) is True
    assert file_exists(str(tmp_path)) is False
    assert file_exists(str(tmp_path / "Missing.py")) is False


def test_directory_exists(tmp_path):
    assert directory_exists(str(tmp_path)) is True
    assert directory_exists(str(tmp_path / "missing")) is False


def test_load_source_file_registers_module(tmp_path, clean_modules):
    source = tmp_path / "Widget.py"
    source.write_text("class Widget:\n    size = 3\n")

    module = load_source_file(str(source), "Shop.Widget")

    assert sys.modules["Shop.Widget"] is module
    assert module.Widget.size == 3
    assert module.__file__ == str(source)


def test_load_source_file_any_extension(tmp_path, clean_modules):
    source = tmp_path / "Legacy.inc"
    source.write_text("LOADED = True\n")

    module = load_source_file(str(source), "Legacy")

    assert module.LOADED is True


def test_load_source_file_syntax_error(tmp_path, clean_modules):
    source = tmp_path / "Bad.py"
    source.write_text("def broken(:\n")

    with pytest.raises(SyntaxError):
        load_source_file(str(source), "Bad")
    assert "Bad" not in sys.modules
