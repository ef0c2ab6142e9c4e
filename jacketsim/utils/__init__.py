# jacketsim/utils/__init__.py
from __future__ import annotations
from .constants import T_S, T_EXT, DELTA_T, Q_MAX, EPS, N_LAYERS

__all__ = ["T_S", "T_EXT", "DELTA_T", "Q_MAX", "EPS", "N_LAYERS"]
