# tests/loaders/test_file_loaders.py
"""
Testes dos loaders de arquivo embutidos e da tabela de loaders.

Os testes asseguram que:
- cada formato embutido lê o arquivo de fixture correspondente
- csv/tsv retornam linhas como dicts de strings (sem coerção)
- a tabela de loaders é copiada por instância e aceita overrides
- specs "modulo:atributo" são importadas ou rejeitadas explicitamente
"""
import pytest

from atlas_sources.core.config.errors import InvalidLoaderSpecError
from atlas_sources.loaders.files import (
    load_csv,
    load_json,
    load_parquet,
    load_text,
    load_tsv,
    load_yaml,
)
from atlas_sources.loaders.table import (
    DEFAULT_LOADERS,
    build_loader_table,
    import_loader,
)


def test_csv(run, data_dir):
    rows = run(load_csv(str(data_dir / "foo.csv")))
    assert rows == [{"a": "1", "b": "x"}, {"a": "2", "b": "y"}]


def test_tsv(run, data_dir):
    assert run(load_tsv(str(data_dir / "baz.tsv"))) == [{"a": "5", "b": "v"}]


def test_json(run, data_dir):
    assert run(load_json(str(data_dir / "meta.json"))) == {"name": "foo", "rows": [1, 2, 3]}


def test_text(run, data_dir):
    assert run(load_text(str(data_dir / "notes.txt"))) == "hello sources\n"


def test_yaml(run, data_dir):
    assert run(load_yaml(str(data_dir / "settings.yaml")))["limits"] == {"max": 10}


def test_parquet_round_trip(run, tmp_path):
    pd = pytest.importorskip("pandas")
    pytest.importorskip("pyarrow")
    target = tmp_path / "rows.parquet"
    pd.DataFrame({"a": [1, 2], "b": ["x", "y"]}).to_parquet(target)

    rows = run(load_parquet(str(target)))

    assert rows == [{"a": 1, "b": "x"}, {"a": 2, "b": "y"}]


def test_missing_file(run, tmp_path):
    with pytest.raises(FileNotFoundError):
        run(load_csv(str(tmp_path / "missing.csv")))


def test_default_table_covers_builtin_extensions():
    assert set(DEFAULT_LOADERS) == {"json", "csv", "tsv", "txt", "yaml", "yml", "parquet"}


def test_build_loader_table_copies_defaults():
    table = build_loader_table()
    table["csv"] = None
    assert DEFAULT_LOADERS["csv"] is load_csv


def test_build_loader_table_overrides():
    def custom(path):
        return path

    table = build_loader_table({".CSV": custom, "json": None, "default": custom})

    assert table["csv"] is custom
    assert table["default"] is custom
    assert "json" not in table
    assert table["tsv"] is load_tsv


def test_build_loader_table_rejects_non_callables():
    with pytest.raises(InvalidLoaderSpecError):
        build_loader_table({"csv": 42})


def test_import_loader():
    assert import_loader("atlas_sources.loaders.files:load_yaml") is load_yaml


@pytest.mark.parametrize(
    "spec",
    [
        "atlas_sources.loaders.files",
        ":load_yaml",
        "atlas_sources.does_not_exist:load",
        "atlas_sources.loaders.files:missing",
        "atlas_sources.loaders.table:DEFAULT_LOADER_KEY",
    ],
)
def test_import_loader_rejects_bad_specs(spec):
    with pytest.raises(InvalidLoaderSpecError):
        import_loader(spec)
