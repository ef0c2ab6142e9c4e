# -*- coding: utf-8 -*-
"""
Layer dataclass for one sheet of the jacket stack.

Fields:
  - d:  thickness [m]
  - k:  base thermal conductivity [W/m·K]
  - mu: moisture coefficient [–]
  - c:  compression coefficient [–]
  - W:  accumulated moisture [–] (starts at 0.0)
  - C:  accumulated compression [–] (starts at 0.0, any sign)

Derived (never stored):
  k_eff(β)              = k · (1 + mu·W) · exp(β·C)
  thermal_resistance(β) = d / k_eff(β)   (0 for d < EPS)
"""
from __future__ import annotations
import math
from dataclasses import dataclass
from typing import NamedTuple

from ..utils.constants import EPS

__all__ = ["LayerParams", "Layer", "slab_resistance"]


def slab_resistance(d: float, k_eff: float) -> float:
    """d / k_eff with IEEE limits: inf for k_eff == 0, 0 for k_eff == inf."""
    if k_eff == 0.0:
        return math.inf
    return d / k_eff


class LayerParams(NamedTuple):
    """Plain (d, k, mu, c) tuple used at initialization and on replacement."""
    d: float
    k: float
    mu: float
    c: float


@dataclass(slots=True)
class Layer:
    d: float = 0.0
    k: float = 0.0
    mu: float = 0.0
    c: float = 0.0
    W: float = 0.0
    C: float = 0.0

    @classmethod
    def from_params(cls, params) -> "Layer":
        d, k, mu, c = params
        return cls(d=float(d), k=float(k), mu=float(mu), c=float(c))

    @property
    def params(self) -> LayerParams:
        return LayerParams(self.d, self.k, self.mu, self.c)

    def k_eff(self, beta: float) -> float:
        base = self.k * (1.0 + self.mu * self.W)
        if base == 0.0:
            return 0.0
        try:
            growth = math.exp(beta * self.C)
        except OverflowError:
            growth = math.inf
        return base * growth

    def thermal_resistance(self, beta: float) -> float:
        if self.d < EPS:
            return 0.0
        return slab_resistance(self.d, self.k_eff(beta))

    def replace(self, params) -> None:
        """Overwrite d, k, mu, c in place and clear W, C."""
        d, k, mu, c = params
        self.d, self.k, self.mu, self.c = float(d), float(k), float(mu), float(c)
        self.W = 0.0
        self.C = 0.0
