# src/atlas_sources/core/config/merge.py
"""
Utilitário canônico de deep-merge da configuração do motor.

Política de merge (v1):
    - dict → merge recursivo por chave
    - list → sobrescrita total (sem merge elemento a elemento)
    - escalar → sobrescrita direta
    - conflito de tipos → erro estrutural explícito
    - filhos de chaves "opacas" (ex.: `sources`, `loaders`) → sobrescrita
      total por chave, sem checagem de tipo (uma fonte pode passar de
      caminho para mapa entre defaults e local)

Invariantes:
    - Nenhum input é mutado
    - Chaves não sobrescritas são preservadas
    - Conflitos estruturais interrompem o merge

Limites explícitos:
    - Não carrega arquivos
    - Não valida semântica das fontes
"""

from copy import deepcopy
from typing import Any, Dict, Iterable

from .errors import ConfigTypeConflictError

OPAQUE_KEYS = ("sources", "loaders")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _conflicts(current: Any, value: Any) -> bool:
    # None limpa a chave; int e float são intercambiáveis (ex.: load_timeout)
    if current is None or value is None:
        return False
    if _is_number(current) and _is_number(value):
        return False
    return type(current) is not type(value)


def deep_merge(
    base: Dict[str, Any],
    override: Dict[str, Any],
    *,
    opaque_keys: Iterable[str] = OPAQUE_KEYS,
) -> Dict[str, Any]:
    """
    Combina `base` e `override` sem mutar nenhum dos dois.

    Args:
        base (Dict[str, Any]): Configuração base (defaults).
        override (Dict[str, Any]): Overrides explícitos (local).
        opaque_keys (Iterable[str]): Chaves de topo cujos filhos são
            substituídos inteiros.

    Returns:
        Dict[str, Any]: Nova configuração resultante.

    Raises:
        ConfigTypeConflictError: Se ocorrer conflito de tipo entre base e override.
    """
    if not isinstance(base, dict) or not isinstance(override, dict):
        raise ConfigTypeConflictError(
            f"Deep-merge requer dicts no nível raiz, recebido: "
            f"{type(base).__name__} vs {type(override).__name__}"
        )

    opaque = set(opaque_keys)
    merged: Dict[str, Any] = deepcopy(base)

    for key, value in override.items():
        current = merged.get(key)

        if key not in merged:
            merged[key] = deepcopy(value)
        elif key in opaque and isinstance(current, dict) and isinstance(value, dict):
            # Substituição por id: cada fonte/loader do override vence inteira
            merged[key] = {**current, **deepcopy(value)}
        elif isinstance(current, dict) and isinstance(value, dict):
            merged[key] = deep_merge(current, value, opaque_keys=())
        elif isinstance(value, list):
            merged[key] = deepcopy(value)
        elif _conflicts(current, value):
            raise ConfigTypeConflictError(
                f"Conflito de tipo na chave '{key}': "
                f"{type(current).__name__} vs {type(value).__name__}"
            )
        else:
            merged[key] = deepcopy(value)

    return merged
