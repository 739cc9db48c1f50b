"""Tests for the IniDocument / IniSection mappings."""

import pytest

from dotini.model import IniDocument, IniSection


def test_section_basic_mapping():
    sect = IniSection("user", {"name": "John"})
    sect["email"] = "john@example.com"
    assert sect.name == "user"
    assert len(sect) == 2
    assert list(sect) == ["name", "email"]
    del sect["name"]
    assert "name" not in sect


def test_section_equals_plain_dict():
    assert IniSection("s", {"a": "1"}) == {"a": "1"}
    assert IniSection("s", {"a": "1"}) != {"a": "2"}


def test_section_to_dict_is_a_copy():
    sect = IniSection("s", {"a": "1"})
    copied = sect.to_dict()
    copied["a"] = "changed"
    assert sect["a"] == "1"


def test_section_str():
    assert str(IniSection("user")) == "[user]"


def test_document_setdefault_returns_live_section():
    doc = IniDocument()
    doc.setdefault("a")["x"] = "1"
    doc.setdefault("a")["y"] = "2"
    assert doc == {"a": {"x": "1", "y": "2"}}


def test_document_setitem_copies_external_dict():
    """Assigned dicts are copied, not shared."""
    pairs = {"x": "1"}
    doc = IniDocument()
    doc["a"] = pairs
    pairs["x"] = "changed"
    assert doc["a"]["x"] == "1"
    assert isinstance(doc["a"], IniSection)
    assert doc["a"].name == "a"


def test_document_rejects_empty_section_name():
    doc = IniDocument()
    with pytest.raises(ValueError):
        doc[""] = {}


def test_document_keeps_insertion_order():
    doc = IniDocument()
    for name in ("b", "a", "c"):
        doc.setdefault(name)
    assert list(doc) == ["b", "a", "c"]


def test_document_to_dict():
    doc = IniDocument()
    doc["a"] = {"x": "1"}
    plain = doc.to_dict()
    assert plain == {"a": {"x": "1"}}
    assert type(plain["a"]) is dict


def test_document_delete_and_repr():
    doc = IniDocument()
    doc["a"] = {"x": "1"}
    assert "IniDocument" in repr(doc)
    del doc["a"]
    assert len(doc) == 0
    assert "a" not in doc
