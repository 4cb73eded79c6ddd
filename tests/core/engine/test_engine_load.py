# tests/core/engine/test_engine_load.py
"""
Testes de ponta a ponta de `SourceEngine.load`.

Este módulo valida o pipeline completo (normalize → interpolate →
aggregate → dispatch) contra os arquivos de `tests/fixtures/data`.

Os testes asseguram que:
- cada forma de requisição produz o formato de resultado esperado
- parâmetros são interpolados nos caminhos antes da carga
- referências `#id` carregam os mesmos dados da fonte referenciada
- erros de resolução acontecem antes de qualquer I/O
- o LoadContext registra normalização, arquivos lidos e falhas

Limites explícitos:
    - Não valida o adapter de middleware (ver test_middleware.py)
    - Não valida fontes derivadas (ver test_transforms.py)
"""
import os

import pytest

from atlas_sources import LoadContext, SourceEngine
from atlas_sources.core.exceptions import (
    InvalidRequestError,
    MissingParameterError,
    ReferenceCycleError,
    UnknownReferenceError,
    UnknownSourceError,
)

FOO_ROWS = [{"a": "1", "b": "x"}, {"a": "2", "b": "y"}]
BAR_ROWS = [{"a": "3", "b": "z"}, {"a": "4", "b": "w"}]


def test_loads_a_single_source(engine):
    data = engine.load_sync("foo")
    assert data == {"foo": FOO_ROWS}


def test_list_source_keeps_positions(engine):
    data = engine.load_sync("list")
    assert isinstance(data["list"], list)
    assert data["list"] == [FOO_ROWS, BAR_ROWS]


def test_named_source_keeps_aliases(engine):
    data = engine.load_sync("named")
    assert data["named"] == {"foo": FOO_ROWS, "bar": BAR_ROWS}


def test_reference_loads_same_data(engine):
    engine.set_source("ref", "#foo")
    data = engine.load_sync(["ref", "foo"])
    assert data["ref"] == data["foo"]


def test_reference_to_structured_source(engine):
    engine.set_source("ref", "#named")
    assert engine.load_sync("ref")["ref"] == {"foo": FOO_ROWS, "bar": BAR_ROWS}


def test_interpolated_reference(engine):
    engine.set_source("pick", "#:target")
    assert engine.load_sync("pick", {"target": "foo"}) == {"pick": FOO_ROWS}


def test_parameter_is_interpolated_into_path(data_dir, recording_loader):
    loader = recording_loader(data=[])
    engine = SourceEngine(path=str(data_dir), sources={"baz": ":x.csv"}, loaders={"csv": loader})

    engine.load_sync("baz", {"x": "baz"})

    assert loader.calls == [os.path.join(str(data_dir), "baz.csv")]


def test_parameter_with_real_file(engine):
    engine.set_source("baz", ":x.tsv")
    assert engine.load_sync("baz", {"x": "baz"}) == {"baz": [{"a": "5", "b": "v"}]}


def test_missing_parameter(engine):
    engine.set_source("baz", ":x.csv")
    with pytest.raises(MissingParameterError) as exc:
        engine.load_sync("baz")
    assert str(exc.value) == 'non-existent key: "x" in ":x.csv"'


def test_unknown_source(engine):
    with pytest.raises(UnknownSourceError) as exc:
        engine.load_sync("nope")
    assert str(exc.value) == 'no such data source: "nope"'


def test_unknown_reference(engine):
    engine.set_source("bad", "#nope")
    with pytest.raises(UnknownReferenceError):
        engine.load_sync("bad")


def test_reference_cycle(engine):
    engine.set_sources({"a": "#b", "b": "#a"})
    with pytest.raises(ReferenceCycleError):
        engine.load_sync("a")


def test_resolution_errors_happen_before_any_io(data_dir, recording_loader):
    loader = recording_loader(data=[])
    engine = SourceEngine(
        path=str(data_dir),
        sources={"ok": "ok.csv", "tmpl": ":x.csv"},
        loaders={"csv": loader},
    )

    with pytest.raises(UnknownSourceError):
        engine.load_sync(["ok", "nope"])
    with pytest.raises(MissingParameterError):
        engine.load_sync(["ok", "tmpl"])

    assert loader.calls == []


def test_wildcard_after_set_sources(engine):
    engine.set_sources({"a": "foo.csv", "b": "bar.csv"})
    data = engine.load_sync("*")
    assert list(data) == ["a", "b"]
    assert data == {"a": FOO_ROWS, "b": BAR_ROWS}


def test_list_request_is_keyed_by_id_in_order(engine):
    data = engine.load_sync(["named", "foo"])
    assert list(data) == ["named", "foo"]


def test_alias_request(engine):
    data = engine.load_sync({"first": "foo", "second": "foo"})
    assert data == {"first": FOO_ROWS, "second": FOO_ROWS}


def test_empty_requests(engine):
    assert engine.load_sync([]) == {}
    assert engine.load_sync({}) == {}


def test_function_source_receives_params(engine):
    engine.set_source("echo", lambda params: dict(params))
    assert engine.load_sync("echo", {"x": 1}) == {"echo": {"x": 1}}


def test_async_function_source_can_load_other_sources(engine, run):
    async def combined(params):
        data = await engine.load(["foo", "list"], params)
        return len(data["foo"]) + len(data["list"])

    engine.set_source("combined", combined)
    assert run(engine.load("combined")) == {"combined": 4}


def test_mixed_file_kinds(engine):
    engine.set_sources(
        {
            "meta": "meta.json",
            "notes": "notes.txt",
            "settings": "settings.yaml",
        }
    )
    data = engine.load_sync("*")
    assert data["meta"] == {"name": "foo", "rows": [1, 2, 3]}
    assert data["notes"] == "hello sources\n"
    assert data["settings"] == {"name": "settings", "limits": {"max": 10}}


def test_missing_file_propagates_loader_error(engine):
    engine.set_source("gone", "does-not-exist.csv")
    with pytest.raises(FileNotFoundError):
        engine.load_sync(["foo", "gone"])


@pytest.mark.parametrize("bad_params", ["x=1", 42, ["x"]])
def test_params_must_be_a_mapping(engine, bad_params):
    with pytest.raises(InvalidRequestError):
        engine.load_sync("foo", bad_params)


def test_context_records_events(engine):
    ctx = LoadContext()
    engine.load_sync(["foo", "list"], ctx=ctx)

    messages = [e["message"] for e in ctx.events]
    assert messages[0] == "request normalized"
    assert messages[-1] == "load finished"
    assert messages.count("file loaded") == 3

    normalized = ctx.events[0]
    assert normalized["entries"] == ["foo", "list"]
    assert normalized["positional"] is True
    assert all(e["load_id"] == ctx.load_id for e in ctx.events)


def test_context_records_failures(engine):
    ctx = LoadContext()
    with pytest.raises(UnknownSourceError):
        engine.load_sync("nope", ctx=ctx)

    [event] = ctx.events_for("error")
    assert event["message"] == "load failed"
    assert event["error"]["type"] == "UNKNOWN_SOURCE"
    assert event["error"]["details"]["source_id"] == "nope"
