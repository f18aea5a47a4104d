"""Prioridades canônicas de Stages (maior valor roda antes)."""

from __future__ import annotations


class Priority:
    FIRST = 1e300
    EXTREMELY_HIGH = 1000000.0
    VERY_HIGH = 10000.0
    HIGH = 100.0
    NORMAL = 0.0
    LOW = -100.0
    VERY_LOW = -10000.0
    EXTREMELY_LOW = -1000000.0
    LAST = -1e300
