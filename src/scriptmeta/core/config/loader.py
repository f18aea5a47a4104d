# src/scriptmeta/core/config/loader.py
"""
Loader de configuração do scriptmeta.

Fontes, em ordem de precedência crescente:
    1. arquivo de defaults (obrigatório)
    2. arquivo local de overrides (opcional, ignorado se ausente)

Chaves reconhecidas (v1):
    stages:
      <stage_id>:
        enabled: bool          # default: true
    persistence:
      path: str | null         # arquivo YAML do PrefsStore

Chaves desconhecidas são preservadas sem validação.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Dict, Optional

import yaml  # PyYAML

from .errors import (
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    InvalidConfigValueError,
    UnsupportedConfigFormatError,
)
from .merge import deep_merge


# sufixo → parser do texto do arquivo
_PARSERS: Dict[str, Callable[[str], Any]] = {
    ".yaml": yaml.safe_load,
    ".yml": yaml.safe_load,
    ".json": json.loads,
}


def _read_mapping(path: Path) -> Dict[str, Any]:
    """
    Lê um arquivo de configuração e devolve sua raiz como dict.

    Arquivo vazio equivale a `{}`.

    Raises:
        DefaultsNotFoundError: arquivo inexistente.
        UnsupportedConfigFormatError: sufixo fora de `_PARSERS`.
        InvalidConfigRootTypeError: raiz não é um mapa.
    """
    if not path.exists():
        raise DefaultsNotFoundError(f"Arquivo de configuração não encontrado: {path}")

    parser = _PARSERS.get(path.suffix.lower())
    if parser is None:
        raise UnsupportedConfigFormatError(
            f"Formato não suportado: {path.suffix or '(sem extensão)'} em {path}"
        )

    text = path.read_text(encoding="utf-8")
    data = parser(text) if text.strip() else None
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"A raiz de {path.name} precisa ser um mapa, veio {type(data).__name__}"
        )
    return data


def validate_config(config: Dict[str, Any]) -> None:
    """
    Valida o formato das chaves reconhecidas.

    Raises:
        InvalidConfigValueError: Se `stages` ou `persistence` estiverem malformados.
    """
    stages = config.get("stages") or {}
    if not isinstance(stages, dict):
        raise InvalidConfigValueError("'stages' deve ser um mapa stage_id -> opções")
    for stage_id, options in stages.items():
        if options is None:
            continue
        if not isinstance(options, dict):
            raise InvalidConfigValueError(f"'stages.{stage_id}' deve ser um mapa")
        if "enabled" in options and not isinstance(options["enabled"], bool):
            raise InvalidConfigValueError(f"'stages.{stage_id}.enabled' deve ser bool")

    persistence = config.get("persistence") or {}
    if not isinstance(persistence, dict):
        raise InvalidConfigValueError("'persistence' deve ser um mapa")
    path = persistence.get("path")
    if path is not None and not isinstance(path, str):
        raise InvalidConfigValueError("'persistence.path' deve ser string ou null")


def load_config(*, defaults_path: str, local_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Resolve a configuração efetiva: defaults + override local (deep_merge),
    seguida de validate_config.

    Raises:
        DefaultsNotFoundError, UnsupportedConfigFormatError,
        InvalidConfigRootTypeError, ConfigTypeConflictError,
        InvalidConfigValueError
    """
    config = _read_mapping(Path(defaults_path))

    if local_path is not None and Path(local_path).exists():
        config = deep_merge(config, _read_mapping(Path(local_path)))

    validate_config(config)
    return config
