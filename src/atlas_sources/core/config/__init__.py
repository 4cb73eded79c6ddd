# src/atlas_sources/core/config/__init__.py

"""
Camada de configuração do Atlas Sources.

Responsabilidades do pacote:
    - Carregamento de arquivos de configuração (defaults + overrides locais)
    - Resolução de configuração final via deep-merge determinístico
    - Validação estrutural das chaves conhecidas do motor

Limites explícitos:
    - Não constrói o motor
    - Não resolve fontes
"""

from .errors import (
    ConfigError,
    ConfigTypeConflictError,
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    InvalidConfigValueError,
    InvalidLoaderSpecError,
    UnsupportedConfigFormatError,
)
from .loader import load_config, validate_config
from .merge import deep_merge

__all__ = [
    "ConfigError",
    "ConfigTypeConflictError",
    "DefaultsNotFoundError",
    "InvalidConfigRootTypeError",
    "InvalidConfigValueError",
    "InvalidLoaderSpecError",
    "UnsupportedConfigFormatError",
    "deep_merge",
    "load_config",
    "validate_config",
]
