"""
Atlas Sources — Canonical Exceptions (v1)

Este módulo define as exceções tipadas do motor de resolução de fontes.

Objetivo:
- Permitir que registry, interpolador e dispatcher levantem falhas semânticas
- Facilitar o mapeamento determinístico para SourceErrorPayload
- Evitar ValueError/RuntimeError genéricos nos pontos de resolução

Regras:
- Erros de configuração (id inválido, tipo inválido) são levantados no momento
  da chamada, de forma síncrona
- Erros de resolução são levantados pela corrotina de `load`
- Exceções carregam apenas dados estruturados (serializáveis) em `details`
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(eq=False)
class SourceException(Exception):
    """Base class para exceções internas do Atlas Sources.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Mensagem deve ser curta e humana
    """

    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None

    def __str__(self) -> str:
        return self.message


# ---------------------------------------------------------------------------
# Registry / configuração (síncronas)
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class InvalidSourceIdError(SourceException):
    """Id de fonte vazio, ausente ou não-string."""


@dataclass(eq=False)
class InvalidSourcesTypeError(SourceException):
    """Coleção de fontes não é um mapeamento (ou lista, quando aceita)."""


@dataclass(eq=False)
class InvalidSourceKindError(SourceException):
    """Valor não é template, função, lista nem mapeamento."""


# ---------------------------------------------------------------------------
# Resolução
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class InvalidRequestError(SourceException):
    """Forma de requisição não suportada por `load`."""


@dataclass(eq=False)
class UnknownSourceError(SourceException):
    """Id requisitado não existe no registry."""


@dataclass(eq=False)
class MissingParameterError(SourceException):
    """Placeholder de template sem parâmetro correspondente."""


@dataclass(eq=False)
class UnknownReferenceError(SourceException):
    """Referência `#id` aponta para fonte inexistente."""


@dataclass(eq=False)
class ReferenceCycleError(SourceException):
    """Cadeia de referências `#id` forma ciclo ou excede a profundidade máxima."""


# ---------------------------------------------------------------------------
# Carregamento
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class NoLoaderFoundError(SourceException):
    """Extensão de arquivo sem loader registrado e sem loader `default`."""


@dataclass(eq=False)
class LoadTimeoutError(SourceException):
    """Loader excedeu o `load_timeout` configurado."""
