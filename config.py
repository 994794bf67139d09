"""Configurazione centrale per Text Engine.

Qui centralizziamo i parametri modificabili del motore (capacità inventario,
salute di default, livello di log, validazione del mondo). Tutti i valori hanno
un default sensato e possono essere sovrascritti via variabili d'ambiente.
"""
from __future__ import annotations
import logging
import os


def _get_int_env(name: str, default: int, minval: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        v = int(raw)
        if minval is not None and v < minval:
            return default
        return v
    except ValueError:
        return default


def _get_float_env(name: str, default: float, minval: float | None = None) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        v = float(raw)
        if minval is not None and v < minval:
            return default
        return v
    except ValueError:
        return default


def _get_bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    val = raw.strip().lower()
    return val in {"1", "true", "yes", "on"}


# ---------------- Personaggi ----------------
# Peso massimo trasportabile di default
DEFAULT_CARRY_CAPACITY: float = 25.0
ENV_CARRY_CAPACITY = "TE_CARRY_CAPACITY"

# Salute massima di default
DEFAULT_MAX_HEALTH: int = 100
ENV_MAX_HEALTH = "TE_MAX_HEALTH"


def get_carry_capacity() -> float:
    """Ritorna la capacità di trasporto. Var: TE_CARRY_CAPACITY (se valida >= 0)."""
    return _get_float_env(ENV_CARRY_CAPACITY, DEFAULT_CARRY_CAPACITY, minval=0.0)


def get_max_health() -> int:
    """Salute massima dei personaggi. Var: TE_MAX_HEALTH (default 100)."""
    return _get_int_env(ENV_MAX_HEALTH, DEFAULT_MAX_HEALTH, minval=1)


# ---------------- Mondo ----------------

def get_strict_world() -> bool:
    """Se attivo il bootstrap solleva errore sui problemi di validazione. Var: TE_STRICT_WORLD."""
    return _get_bool_env("TE_STRICT_WORLD", False)


# ---------------- Logging ----------------
DEFAULT_LOG_LEVEL = "WARNING"


def get_log_level() -> int:
    """Livello di log numerico. Var: TE_LOG_LEVEL (nome livello, default WARNING)."""
    raw = os.getenv("TE_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(raw)
    if isinstance(level, int):
        return level
    # nome sconosciuto: fallback silenzioso
    return logging.WARNING


def configure_logging(level: int | None = None) -> None:
    """Configure the root logger once for CLI/demo entry points."""
    logging.basicConfig(
        level=level if level is not None else get_log_level(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


__all__ = [
    # Personaggi
    "DEFAULT_CARRY_CAPACITY", "ENV_CARRY_CAPACITY", "get_carry_capacity",
    "DEFAULT_MAX_HEALTH", "ENV_MAX_HEALTH", "get_max_health",
    # Mondo
    "get_strict_world",
    # Logging
    "DEFAULT_LOG_LEVEL", "get_log_level", "configure_logging",
]
