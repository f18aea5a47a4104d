"""
Identidade/versão de um script em disco.

Formato (v1): `<yyyy-mm-dd-HH:MM:SS>-<sha256 hex>`, usando o mtime do
arquivo (UTC) e o SHA-256 do conteúdo.

Política de falha:
    - Arquivo inexistente → None (scripts em memória não têm versão)
    - Falha ao ler/hashear → apenas o datestamp (best-effort)
"""

from __future__ import annotations

import hashlib
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Optional, Union


DATESTAMP_FORMAT = "%Y-%m-%d-%H:%M:%S"


def compute_digest(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def compute_version(
    path: Union[str, Path],
    *,
    on_error: Optional[Callable[[Exception], None]] = None,
) -> Optional[str]:
    p = Path(path)
    if not p.is_file():
        return None

    modified = datetime.fromtimestamp(p.stat().st_mtime, tz=timezone.utc)
    datestamp = modified.strftime(DATESTAMP_FORMAT)
    try:
        return f"{datestamp}-{compute_digest(p.read_bytes())}"
    except OSError as e:
        if on_error is not None:
            on_error(e)
    return datestamp
