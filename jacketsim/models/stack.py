# -*- coding: utf-8 -*-
"""
Seven-layer jacket stack with a shared compression exponent β.

Conceptual indices run from -1 (innermost foam layer) to 5 (outermost,
exposed). Storage is 0..6; `to_storage_index` is the only place the
offset lives.

Public API (stable):
    to_storage_index(i: int) -> int
    JacketStack
        .total_resistance() -> float
        .total_resistance_excluding(stored_index: int) -> float
        .heat_flux(d0: float) -> float
        .heat_flux_current() -> float

Notes
-----
- heat_flux(d0) is pure w.r.t. stored state and non-increasing in d0.
- β is read once; it is exposed read-only.
"""
from __future__ import annotations
from typing import Iterable, Sequence, Tuple

from .layer import Layer, LayerParams, slab_resistance
from ..utils.constants import (
    EPS, R_TH_MIN, DELTA_T, N_LAYERS, FOAM_INDEX, FLUX_SENTINEL,
)

__all__ = ["to_storage_index", "JacketStack"]


def to_storage_index(i: int) -> int:
    """Conceptual layer index (-1..5) → list position (0..6)."""
    return int(i) + 1


class JacketStack:
    """Owned, mutable aggregate of exactly seven layers."""

    __slots__ = ("_layers", "_beta")

    def __init__(self, layers: Sequence[Layer], beta: float) -> None:
        if len(layers) != N_LAYERS:
            raise ValueError(f"Expected {N_LAYERS} layers, got {len(layers)}")
        self._layers: list[Layer] = list(layers)
        self._beta = float(beta)

    @classmethod
    def from_params(cls, params: Iterable, beta: float) -> "JacketStack":
        return cls([Layer.from_params(p) for p in params], beta)

    # ---- access --------------------------------------------------------

    @property
    def beta(self) -> float:
        return self._beta

    @property
    def layers(self) -> Tuple[Layer, ...]:
        return tuple(self._layers)

    def layer(self, i: int) -> Layer:
        """Layer at conceptual index i."""
        return self._layers[to_storage_index(i)]

    def __len__(self) -> int:
        return len(self._layers)

    def snapshot(self) -> Tuple[Tuple[LayerParams, float, float], ...]:
        """(params, W, C) per layer, innermost first."""
        return tuple((L.params, L.W, L.C) for L in self._layers)

    # ---- resistance / flux ---------------------------------------------

    def total_resistance(self) -> float:
        return sum(L.thermal_resistance(self._beta) for L in self._layers)

    def total_resistance_excluding(self, stored_index: int) -> float:
        return sum(
            L.thermal_resistance(self._beta)
            for j, L in enumerate(self._layers)
            if j != stored_index
        )

    def resistance_with_foam(self, d0: float) -> float:
        """R_th [m^2·K/W] with the foam layer at hypothetical thickness d0."""
        foam = to_storage_index(FOAM_INDEX)
        R_th = self.total_resistance_excluding(foam)
        if d0 > EPS:
            R_th += slab_resistance(d0, self._layers[foam].k_eff(self._beta))
        return R_th

    def heat_flux(self, d0: float) -> float:
        """q = ΔT / R_th [W/m^2]; FLUX_SENTINEL when R_th is ~0, 0.0 when R_th is inf."""
        R_th = self.resistance_with_foam(d0)
        if R_th < R_TH_MIN:
            return FLUX_SENTINEL
        return DELTA_T / R_th

    def heat_flux_current(self) -> float:
        return self.heat_flux(self.layer(FOAM_INDEX).d)
