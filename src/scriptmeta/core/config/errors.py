# src/scriptmeta/core/config/errors.py
"""
Exceções canônicas da camada de configuração do scriptmeta.

As exceções aqui definidas representam violações estruturais de
configuração, e não erros de parsing de script ou de Stage.

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
"""


class ConfigError(Exception):
    """
    Exceção base para erros de configuração.

    Permite captura genérica de falhas de configuração, separando-as de
    erros de parsing de scripts (ScriptException).
    """


class DefaultsNotFoundError(ConfigError):
    """
    O arquivo de configuração base (defaults) não existe.

    O arquivo de defaults é obrigatório; nenhum default é inventado.
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Formato de arquivo não suportado.

    Formatos suportados (v1): YAML (.yaml, .yml) e JSON (.json).
    """


class InvalidConfigRootTypeError(ConfigError):
    """O conteúdo raiz do arquivo não é um mapa chave-valor."""


class ConfigTypeConflictError(ConfigError):
    """
    Conflito de tipos entre defaults e override durante o deep-merge.

    Exemplo:
        - base:     {"stages": {"inputs.save": {"enabled": true}}}
        - override: {"stages": {"inputs.save": "off"}}
    """


class InvalidConfigValueError(ConfigError):
    """Uma chave reconhecida possui valor com formato inválido."""
