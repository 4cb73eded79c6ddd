# tests/core/engine/test_engine_registry.py
"""
Testes das operações de registry do SourceEngine
(set_source / set_sources / add_sources).
"""
import pytest

from atlas_sources import SourceEngine
from atlas_sources.core.exceptions import (
    InvalidSourceIdError,
    InvalidSourceKindError,
    InvalidSourcesTypeError,
)
from atlas_sources.core.sources.types import ArraySource, MapSource, TemplateSource


def test_empty_engine_has_no_sources():
    assert SourceEngine().source_ids() == []


def test_constructor_registers_sources(engine):
    assert engine.source_ids() == ["foo", "list", "named"]
    assert isinstance(engine.get_source("list"), ArraySource)
    assert isinstance(engine.get_source("named"), MapSource)


def test_set_source_is_chainable():
    engine = SourceEngine()
    assert engine.set_source("a", "a.csv").set_source("b", "b.csv") is engine
    assert engine.source_ids() == ["a", "b"]


def test_set_source_overwrites():
    engine = SourceEngine().set_source("a", "a.csv").set_source("a", "other.csv")
    assert engine.get_source("a") == TemplateSource("other.csv")


@pytest.mark.parametrize("bad_id", ["", None, 0, False])
def test_set_source_rejects_falsy_ids(bad_id):
    engine = SourceEngine()
    with pytest.raises(InvalidSourceIdError) as exc:
        engine.set_source(bad_id, "a.csv")
    assert str(exc.value).startswith("invalid source id")


def test_set_source_rejects_invalid_kinds():
    with pytest.raises(InvalidSourceKindError):
        SourceEngine().set_source("a", 42)


def test_set_sources_replaces_everything(engine):
    engine.set_sources({"only": "foo.csv"})
    assert engine.source_ids() == ["only"]


@pytest.mark.parametrize("bad", [None, "foo.csv", 1])
def test_set_sources_requires_a_mapping(engine, bad):
    with pytest.raises(InvalidSourcesTypeError) as exc:
        engine.set_sources(bad)
    assert str(exc.value).startswith("sources must be a mapping")
    assert engine.source_ids() == ["foo", "list", "named"]


def test_add_sources_merges(engine):
    engine.add_sources({"extra": "bar.csv", "foo": "bar.csv"})
    assert engine.source_ids() == ["foo", "list", "named", "extra"]
    assert engine.get_source("foo") == TemplateSource("bar.csv")


def test_add_sources_accepts_list_of_definitions():
    engine = SourceEngine().add_sources(
        [
            {"id": "a", "file": "a.csv"},
            {"id": "b", "file": ":x.json"},
        ]
    )
    assert engine.get_source("a") == TemplateSource("a.csv")
    assert engine.get_source("b") == TemplateSource(":x.json")


def test_add_sources_list_entry_without_id():
    with pytest.raises(InvalidSourceIdError):
        SourceEngine().add_sources([{"file": "a.csv"}])


@pytest.mark.parametrize("bad", ["a.csv", 3, [["a.csv"]]])
def test_add_sources_rejects_other_shapes(bad):
    with pytest.raises(InvalidSourcesTypeError):
        SourceEngine().add_sources(bad)


def test_engines_do_not_share_state():
    one = SourceEngine(loaders={"xyz": lambda path: path})
    two = SourceEngine()
    one.set_source("a", "a.csv")

    assert two.source_ids() == []
    assert "xyz" in one.loaders
    assert "xyz" not in two.loaders
