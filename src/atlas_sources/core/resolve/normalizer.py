# src/atlas_sources/core/resolve/normalizer.py
"""
Normalização da forma de uma requisição de fontes.

Uma requisição de `load` pode chegar em quatro formas:
    - "*"                 → todas as fontes registradas
    - "id"                → uma única fonte
    - ["a", "b"]          → lista de ids (resultado posicional, chaves = ids)
    - {"alias": "id"}     → mapa de aliases (resultado por alias)

Este módulo converte todas elas em um `CanonicalRequest`: um mapeamento
alias → Source já buscado no registry, na ordem de declaração.

Decisões arquiteturais:
    - Todas as entradas são resolvidas antes de qualquer I/O
    - Um id ausente interrompe a normalização com UnknownSourceError
    - A ordem do resultado final segue a ordem de declaração

Limites explícitos:
    - Não interpola templates
    - Não segue referências `#id`
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Tuple

from atlas_sources.core.exceptions import InvalidRequestError, UnknownSourceError
from atlas_sources.core.sources.registry import SourceRegistry
from atlas_sources.core.sources.types import Source

WILDCARD = "*"


@dataclass(frozen=True)
class CanonicalRequest:
    """Requisição normalizada: alias → Source, mais a origem posicional."""

    entries: Dict[str, Source]
    positional: bool = False


def _aliases(request: Any) -> Tuple[Dict[str, Any], bool]:
    if isinstance(request, str):
        return {request: request}, False

    if isinstance(request, (list, tuple)):
        return {str(sid): sid for sid in request}, True

    if isinstance(request, Mapping):
        return dict(request), False

    raise InvalidRequestError(
        f"invalid request type: {type(request).__name__}",
        details={"type": type(request).__name__},
        hint='Use "*", um id, uma lista de ids ou um mapa alias → id',
    )


def normalize(request: Any, registry: SourceRegistry) -> CanonicalRequest:
    if isinstance(request, str) and request == WILDCARD:
        ids = registry.ids()
        return CanonicalRequest(entries={sid: registry.get(sid) for sid in ids})

    aliases, positional = _aliases(request)

    entries: Dict[str, Source] = {}
    for alias, source_id in aliases.items():
        if not isinstance(source_id, str) or source_id not in registry:
            raise UnknownSourceError(
                f'no such data source: "{source_id}"',
                details={"source_id": source_id, "alias": alias},
                hint="Registre a fonte com set_source/add_sources antes de carregá-la",
            )
        entries[alias] = registry.get(source_id)

    return CanonicalRequest(entries=entries, positional=positional)
