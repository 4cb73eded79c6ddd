# src/atlas_sources/core/engine/engine.py
"""
Motor de resolução de fontes do Atlas Sources.

O `SourceEngine` é a fachada pública do núcleo. Ele possui o registry de
fontes, a tabela de loaders da instância e a configuração de
interpolação, e expõe `load` como único ponto de entrada do pipeline:

    requisição → normalize → interpolate → aggregate → dispatch → dados

Decisões arquiteturais:
    - Erros de configuração (id inválido, tipo inválido) são síncronos
    - Erros de resolução são detectados antes de qualquer I/O
    - Erros de carga propagam pela corrotina de `load`, um único erro e
      nenhum dado parcial
    - Cada instância tem sua própria tabela de loaders (sem estado global)

Limites explícitos:
    - Não faz cache de resultados entre chamadas
    - Não sincroniza mutações do registry com cargas em andamento
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, Pattern, Union

from atlas_sources.core.config.loader import load_config, validate_config
from atlas_sources.core.context import LoadContext
from atlas_sources.core.errors import exception_to_error
from atlas_sources.core.exceptions import (
    InvalidRequestError,
    InvalidSourcesTypeError,
)
from atlas_sources.core.resolve.interpolator import DEFAULT_MAX_REFERENCE_DEPTH, Interpolator
from atlas_sources.core.resolve.normalizer import normalize
from atlas_sources.core.sources.registry import SourceRegistry
from atlas_sources.core.sources.types import Params, Source
from atlas_sources.loaders.table import Loader, build_loader_table
from atlas_sources import middleware, transforms

from .dispatcher import Dispatcher


class SourceEngine:
    """Registry de fontes + pipeline de resolução (normalize → interpolate → load)."""

    def __init__(
        self,
        *,
        path: Optional[Union[str, Path]] = None,
        sources: Optional[Any] = None,
        loaders: Optional[Mapping[str, Any]] = None,
        interpolation_pattern: Union[str, Pattern[str], None] = None,
        max_reference_depth: int = DEFAULT_MAX_REFERENCE_DEPTH,
        load_timeout: Optional[float] = None,
    ):
        self.path = path
        self.registry = SourceRegistry()
        self.loaders: Dict[str, Loader] = build_loader_table(loaders)
        self.interpolator = Interpolator(
            self.registry,
            pattern=interpolation_pattern,
            max_reference_depth=max_reference_depth,
        )
        self.dispatcher = Dispatcher(self.loaders, base_path=path, load_timeout=load_timeout)

        if sources:
            self.add_sources(sources)

    # -----------------------------
    # Construção a partir de config
    # -----------------------------
    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> "SourceEngine":
        cfg = validate_config(dict(config))
        return cls(
            path=cfg.get("path"),
            sources=cfg.get("sources"),
            loaders=cfg.get("loaders"),
            interpolation_pattern=cfg.get("interpolation_pattern"),
            max_reference_depth=cfg.get("max_reference_depth") or DEFAULT_MAX_REFERENCE_DEPTH,
            load_timeout=cfg.get("load_timeout"),
        )

    @classmethod
    def from_files(cls, defaults_path: str, local_path: Optional[str] = None) -> "SourceEngine":
        return cls.from_config(load_config(defaults_path=defaults_path, local_path=local_path))

    # -----------------------------
    # Registry
    # -----------------------------
    def set_source(self, source_id: str, source: Any) -> "SourceEngine":
        self.registry.set(source_id, source)
        return self

    def set_sources(self, sources: Mapping[str, Any]) -> "SourceEngine":
        self.registry.replace(sources)
        return self

    def add_sources(self, sources: Union[Mapping[str, Any], List[Mapping[str, Any]]]) -> "SourceEngine":
        if isinstance(sources, Mapping):
            for source_id, source in sources.items():
                self.set_source(source_id, source)
            return self

        if isinstance(sources, (list, tuple)):
            for entry in sources:
                if not isinstance(entry, Mapping):
                    raise InvalidSourcesTypeError(
                        f"source entries must be mappings with an 'id', got {type(entry).__name__}",
                        details={"type": type(entry).__name__},
                    )
                definition = {k: v for k, v in entry.items() if k != "id"}
                self.set_source(entry.get("id"), definition)
            return self

        raise InvalidSourcesTypeError(
            f"sources must be a mapping or a list, got {type(sources).__name__}",
            details={"type": type(sources).__name__},
        )

    def get_source(self, source_id: str) -> Source:
        return self.registry.get(source_id)

    def source_ids(self) -> List[str]:
        return self.registry.ids()

    # -----------------------------
    # Resolução
    # -----------------------------
    async def load(
        self,
        request: Any,
        params: Optional[Params] = None,
        *,
        ctx: Optional[LoadContext] = None,
    ) -> Dict[str, Any]:
        if params is None:
            params = {}
        if ctx is None:
            ctx = LoadContext(request=request, params=dict(params) if isinstance(params, Mapping) else {})

        try:
            if not isinstance(params, Mapping):
                raise InvalidRequestError(
                    f"params must be a mapping, got {type(params).__name__}",
                    details={"type": type(params).__name__},
                )

            canonical = normalize(request, self.registry)
            entries = {
                alias: self.interpolator.interpolate(source, params)
                for alias, source in canonical.entries.items()
            }
            ctx.log(
                source_id=None,
                level="info",
                message="request normalized",
                entries=list(entries),
                positional=canonical.positional,
            )

            data = await self.dispatcher.load_entries(entries, params, ctx)

        except Exception as exc:
            ctx.log(
                source_id=None,
                level="error",
                message="load failed",
                error=exception_to_error(exc).to_dict(),
            )
            raise

        ctx.log(source_id=None, level="info", message="load finished", entries=list(data))
        return data

    def load_sync(
        self,
        request: Any,
        params: Optional[Params] = None,
        *,
        ctx: Optional[LoadContext] = None,
    ) -> Dict[str, Any]:
        """Executa `load` em um event loop próprio (para chamadores síncronos)."""
        return asyncio.run(self.load(request, params, ctx=ctx))

    # -----------------------------
    # Adapters e fontes derivadas
    # -----------------------------
    def decorate(self, request: Any) -> Callable[..., Any]:
        return middleware.make_middleware(self, request)

    def transform(self, source_id: str, fn: Callable[[Any, Params], Any]) -> Callable[[Params], Any]:
        return transforms.transform(self, source_id, fn)

    def filter(self, source_id: str, predicate: Callable[[Any, Params], Any]) -> Callable[[Params], Any]:
        return transforms.filter_source(self, source_id, predicate)

    def find_by_param(self, source_id: str, param: str, key: Optional[str] = None) -> Callable[[Params], Any]:
        return transforms.find_by_param(self, source_id, param, key)

