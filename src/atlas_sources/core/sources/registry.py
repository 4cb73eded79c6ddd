# src/atlas_sources/core/sources/registry.py
"""
Registro de fontes de dados nomeadas.

Este módulo define o `SourceRegistry`, o mapeamento id → Source
consultado pelo normalizador e pelo interpolador durante `load`.

O registry não possui dados, apenas indireção: ele guarda as definições
das fontes já convertidas para as variantes canônicas.

Responsabilidades do módulo:
    - Validar ids de fonte
    - Converter valores Python em Source (via `coerce_source`)
    - Substituir o conjunto inteiro de fontes de uma só vez

Decisões arquiteturais:
    - A última escrita vence (`set` é um upsert)
    - `replace` valida todas as entradas antes de trocar o mapeamento
    - Não há snapshot por requisição: mutações concorrentes com um `load`
      em andamento podem ser observadas por ele

Invariantes:
    - Todo id registrado é uma string não-vazia
    - Todo valor registrado é uma variante de Source

Limites explícitos:
    - Não interpola templates
    - Não carrega dados
    - Não detecta ciclos de referência (responsabilidade do interpolador)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping

from atlas_sources.core.exceptions import InvalidSourceIdError, InvalidSourcesTypeError

from .types import Source, coerce_source


def _validate_id(source_id: Any) -> str:
    if not isinstance(source_id, str) or not source_id:
        raise InvalidSourceIdError(
            f'invalid source id: "{source_id}"',
            details={"source_id": repr(source_id)},
            hint="Ids de fonte devem ser strings não-vazias",
        )
    return source_id


@dataclass
class SourceRegistry:
    """Mapeamento id → Source de uma instância do motor."""

    _sources: Dict[str, Source] = field(default_factory=dict, init=False, repr=False)

    def set(self, source_id: str, source: Any) -> None:
        sid = _validate_id(source_id)
        self._sources[sid] = coerce_source(source)

    def replace(self, sources: Mapping[str, Any]) -> None:
        if not isinstance(sources, Mapping):
            raise InvalidSourcesTypeError(
                f"sources must be a mapping, got {type(sources).__name__}",
                details={"type": type(sources).__name__},
            )
        resolved = {_validate_id(sid): coerce_source(src) for sid, src in sources.items()}
        self._sources = resolved

    def get(self, source_id: str) -> Source:
        return self._sources[source_id]

    def ids(self) -> List[str]:
        return list(self._sources)

    def __contains__(self, source_id: object) -> bool:
        return source_id in self._sources

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._sources))

    def __len__(self) -> int:
        return len(self._sources)
