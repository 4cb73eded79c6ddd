# src/atlas_sources/core/config/errors.py
"""
Exceções canônicas da camada de configuração do Atlas Sources.

Estas exceções representam violações estruturais da configuração do
motor (arquivo ausente, formato desconhecido, tipos incompatíveis), e
não erros de resolução de fontes.

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - São levantadas na construção do motor, nunca durante `load`
"""


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração do motor.

    Limites explícitos:
        - Não representa erro de resolução de fonte
        - Não representa erro de loader
    """


class DefaultsNotFoundError(ConfigError):
    """
    Arquivo de configuração base (defaults) não encontrado.

    O arquivo de defaults é obrigatório; o local é opcional.
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Formato de arquivo de configuração não suportado.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """Conteúdo raiz da configuração não é um dicionário."""


class ConfigTypeConflictError(ConfigError):
    """
    Conflito de tipos durante o deep-merge.

    Exemplo de conflito:
        - base:     {"max_reference_depth": 32}
        - override: {"max_reference_depth": "deep"}
    """


class InvalidConfigValueError(ConfigError):
    """Chave conhecida da configuração com valor de tipo inválido."""


class InvalidLoaderSpecError(ConfigError):
    """Loader declarado não pode ser importado ou não é callable."""
