# src/atlas_sources/core/resolve/interpolator.py
"""
Interpolação de templates e resolução de referências entre fontes.

Este módulo concentra toda a lógica de substituição de parâmetros do
Atlas Sources. Ele percorre uma Source recursivamente e produz uma nova
Source em que:
    - todo placeholder `:nome` de um TemplateSource foi substituído por
      `str(params["nome"])`
    - todo template que começa com `#` foi trocado pela fonte referenciada,
      ela própria interpolada

Política de interpolação (v1):
    - MapSource / ArraySource → recursão preservando chaves e ordem
    - FunctionSource          → retornada intacta (recebe params vivos
                                na invocação, não strings interpoladas)
    - TemplateSource          → substituição + resolução de referência

Decisões arquiteturais:
    - Alvos de referência são interpolados SEM os parâmetros da requisição
      (cadeias de referência não herdam params externos)
    - A cadeia de ids seguidos é rastreada: ciclos (`a → #b → #a`) e cadeias
      mais longas que `max_reference_depth` falham com ReferenceCycleError
    - O padrão de placeholder é fixo por instância (default `:(\\w+)`)

Invariantes:
    - O resultado nunca contém placeholders não resolvidos
    - A estrutura (chaves/ordem) da Source de entrada é preservada
    - O registry nunca é mutado

Limites explícitos:
    - Não é um motor de templates genérico
    - Não carrega dados
    - Não valida existência de arquivos
"""

from __future__ import annotations

import re
from typing import Optional, Pattern, Tuple, Union

from atlas_sources.core.exceptions import (
    MissingParameterError,
    ReferenceCycleError,
    UnknownReferenceError,
)
from atlas_sources.core.sources.registry import SourceRegistry
from atlas_sources.core.sources.types import (
    ArraySource,
    FunctionSource,
    MapSource,
    Params,
    Source,
    TemplateSource,
)

DEFAULT_INTERPOLATION_PATTERN = r":(\w+)"
DEFAULT_MAX_REFERENCE_DEPTH = 32
REFERENCE_SIGIL = "#"


def compile_pattern(pattern: Union[str, Pattern[str], None]) -> Pattern[str]:
    compiled = re.compile(pattern or DEFAULT_INTERPOLATION_PATTERN)
    if compiled.groups < 1:
        raise ValueError(
            f"interpolation pattern must capture the parameter name: {compiled.pattern!r}"
        )
    return compiled


class Interpolator:
    """Substitui parâmetros em Sources e segue referências `#id` no registry."""

    def __init__(
        self,
        registry: SourceRegistry,
        pattern: Union[str, Pattern[str], None] = None,
        max_reference_depth: int = DEFAULT_MAX_REFERENCE_DEPTH,
    ):
        self.registry = registry
        self.pattern = compile_pattern(pattern)
        self.max_reference_depth = max_reference_depth

    def interpolate(self, source: Source, params: Optional[Params] = None) -> Source:
        return self._interpolate(source, params or {}, ())

    def _interpolate(self, source: Source, params: Params, chain: Tuple[str, ...]) -> Source:
        if isinstance(source, MapSource):
            return MapSource(
                {alias: self._interpolate(src, params, chain) for alias, src in source.entries.items()}
            )
        if isinstance(source, ArraySource):
            return ArraySource(tuple(self._interpolate(src, params, chain) for src in source.items))
        if isinstance(source, FunctionSource):
            return source

        value = self.substitute(source.template, params)

        if value.startswith(REFERENCE_SIGIL):
            return self._follow(value, chain)

        return TemplateSource(value)

    def substitute(self, template: str, params: Params) -> str:
        def _replace(match: "re.Match[str]") -> str:
            key = match.group(1)
            if key not in params:
                raise MissingParameterError(
                    f'non-existent key: "{key}" in "{template}"',
                    details={"placeholder": key, "template": template},
                    hint="Informe o parâmetro na chamada de load",
                )
            return str(params[key])

        return self.pattern.sub(_replace, template)

    def _follow(self, reference: str, chain: Tuple[str, ...]) -> Source:
        source_id = reference[len(REFERENCE_SIGIL):]
        if source_id not in self.registry:
            raise UnknownReferenceError(
                f'bad source reference: "{reference}"',
                details={"reference": reference, "source_id": source_id},
            )

        followed = chain + (source_id,)
        if source_id in chain or len(followed) > self.max_reference_depth:
            raise ReferenceCycleError(
                f'reference cycle while resolving "{reference}"',
                details={"chain": list(followed), "max_depth": self.max_reference_depth},
                hint="Quebre a cadeia de referências #id entre as fontes",
            )

        return self._interpolate(self.registry.get(source_id), {}, followed)
