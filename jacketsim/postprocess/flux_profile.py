# -*- coding: utf-8 -*-
"""
Heat-flux profile q(d0) over a foam-thickness grid.

Columns:
  d0_m            hypothetical foam thickness [m]
  R_th_m2K_per_W  total resistance with that foam thickness
  q_W_per_m2      heat flux (FLUX_SENTINEL where R_th ~ 0)
  feasible        q <= q_max (+EPS)
"""
from __future__ import annotations
from typing import Sequence

import numpy as np
import pandas as pd

from jacketsim.models.stack import JacketStack
from jacketsim.utils.constants import EPS, Q_MAX

__all__ = ["thickness_grid", "flux_profile", "is_non_increasing"]

def thickness_grid(d_max: float, n: int = 101, log: bool = False) -> np.ndarray:
    """0..d_max, linear or log-spaced (log grids start at d_max*1e-6, plus 0)."""
    if log:
        return np.concatenate([[0.0], np.geomspace(d_max * 1e-6, d_max, n - 1)])
    return np.linspace(0.0, d_max, n)

def flux_profile(stack: JacketStack, d0_grid: Sequence[float], q_max: float = Q_MAX) -> pd.DataFrame:
    d0 = np.asarray(d0_grid, dtype=np.float64)
    R = np.array([stack.resistance_with_foam(float(x)) for x in d0])
    q = np.array([stack.heat_flux(float(x)) for x in d0])
    return pd.DataFrame({
        "d0_m": d0,
        "R_th_m2K_per_W": R,
        "q_W_per_m2": q,
        "feasible": q <= q_max + EPS,
    })

def is_non_increasing(profile: pd.DataFrame, tol: float = 1e-12) -> bool:
    q = profile["q_W_per_m2"].to_numpy()
    return bool(np.all(np.diff(q) <= tol * np.maximum(1.0, np.abs(q[:-1]))))
