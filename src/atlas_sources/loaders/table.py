# src/atlas_sources/loaders/table.py
"""
Tabela extensão → loader de uma instância do motor.

Cada `SourceEngine` recebe sua própria tabela, construída a partir de
`DEFAULT_LOADERS` mais overrides explícitos. Nenhuma tabela é
compartilhada entre instâncias: alterar a tabela de um motor não afeta
outro.

Regras (v1):
    - Chaves são extensões sem ponto, em minúsculas ("csv", "json")
    - A chave especial "default" atende extensões não registradas
    - Overrides podem ser callables ou strings "pacote.modulo:atributo"
    - Override com valor None remove a extensão da tabela

Limites explícitos:
    - Não executa loaders
    - Não decide qual loader usar para um caminho (isso é do dispatcher)
"""

from __future__ import annotations

import importlib
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional, Union

from atlas_sources.core.config.errors import InvalidLoaderSpecError

from .files import load_csv, load_json, load_parquet, load_text, load_tsv, load_yaml

Loader = Callable[[str], Union[Any, Awaitable[Any]]]

DEFAULT_LOADER_KEY = "default"

DEFAULT_LOADERS: Mapping[str, Loader] = {
    "json": load_json,
    "csv": load_csv,
    "tsv": load_tsv,
    "txt": load_text,
    "yaml": load_yaml,
    "yml": load_yaml,
    "parquet": load_parquet,
}


def import_loader(spec: str) -> Loader:
    """Resolve uma string "pacote.modulo:atributo" para o callable correspondente."""
    module_name, sep, attr = spec.partition(":")
    if not sep or not module_name or not attr:
        raise InvalidLoaderSpecError(
            f"Loader deve ser 'modulo:atributo', recebido: {spec!r}"
        )

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise InvalidLoaderSpecError(f"Módulo de loader não encontrado: {module_name}") from e

    loader = getattr(module, attr, None)
    if not callable(loader):
        raise InvalidLoaderSpecError(f"Loader não é callable: {spec}")
    return loader


def build_loader_table(overrides: Optional[Mapping[str, Any]] = None) -> Dict[str, Loader]:
    table: Dict[str, Loader] = dict(DEFAULT_LOADERS)

    for ext, loader in (overrides or {}).items():
        key = str(ext).lstrip(".").lower()
        if loader is None:
            table.pop(key, None)
            continue
        if isinstance(loader, str):
            loader = import_loader(loader)
        if not callable(loader):
            raise InvalidLoaderSpecError(
                f"Loader para '{key}' deve ser callable, recebido: {type(loader).__name__}"
            )
        table[key] = loader

    return table
