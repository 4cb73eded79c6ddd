"""
Atlas Sources — Canonical Error Structures (v1)

Este módulo define o payload canônico de erro do Atlas Sources.
Erros de resolução fazem parte do contrato operacional do motor e, ao
serem registrados no LoadContext, devem ser:

- explícitos
- serializáveis
- rastreáveis

Nenhuma decisão implícita é permitida: o payload descreve a falha,
não tenta corrigi-la.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from typing import Any, Dict, Optional

from .exceptions import (
    InvalidRequestError,
    InvalidSourceIdError,
    InvalidSourceKindError,
    InvalidSourcesTypeError,
    LoadTimeoutError,
    MissingParameterError,
    NoLoaderFoundError,
    ReferenceCycleError,
    SourceException,
    UnknownReferenceError,
    UnknownSourceError,
)


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SourceErrorPayload:
    """
    Payload canônico de erro do Atlas Sources.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao operador (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Registry / configuração
INVALID_SOURCE_ID = "INVALID_SOURCE_ID"
INVALID_SOURCES_TYPE = "INVALID_SOURCES_TYPE"
INVALID_SOURCE_KIND = "INVALID_SOURCE_KIND"

# Resolução
INVALID_REQUEST = "INVALID_REQUEST"
UNKNOWN_SOURCE = "UNKNOWN_SOURCE"
MISSING_PARAMETER = "MISSING_PARAMETER"
UNKNOWN_REFERENCE = "UNKNOWN_REFERENCE"
REFERENCE_CYCLE = "REFERENCE_CYCLE"

# Carregamento
NO_LOADER_FOUND = "NO_LOADER_FOUND"
LOAD_TIMEOUT = "LOAD_TIMEOUT"
LOADER_ERROR = "LOADER_ERROR"


_CODES = {
    InvalidSourceIdError: INVALID_SOURCE_ID,
    InvalidSourcesTypeError: INVALID_SOURCES_TYPE,
    InvalidSourceKindError: INVALID_SOURCE_KIND,
    InvalidRequestError: INVALID_REQUEST,
    UnknownSourceError: UNKNOWN_SOURCE,
    MissingParameterError: MISSING_PARAMETER,
    UnknownReferenceError: UNKNOWN_REFERENCE,
    ReferenceCycleError: REFERENCE_CYCLE,
    NoLoaderFoundError: NO_LOADER_FOUND,
    LoadTimeoutError: LOAD_TIMEOUT,
}


def exception_to_error(exc: BaseException) -> SourceErrorPayload:
    """Converte exceções em SourceErrorPayload (serializável, acionável).

    Regras:
    - SourceException: código do catálogo + message/details/hint da exceção.
    - Outras exceções (tipicamente vindas de loaders): LOADER_ERROR, sem stack trace.
    """
    if isinstance(exc, SourceException):
        return SourceErrorPayload(
            type=_CODES.get(type(exc), exc.__class__.__name__),
            message=exc.message,
            details=dict(exc.details or {}),
            hint=exc.hint,
        )

    return SourceErrorPayload(
        type=LOADER_ERROR,
        message=str(exc) or "Erro inesperado durante carregamento",
        details={"exception_class": exc.__class__.__name__},
        hint="Verifique o loader e o arquivo de origem",
    )
