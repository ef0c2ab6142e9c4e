# jacketsim/engine.py
"""
Query engine: the five jacket queries over an exclusively owned stack.

Query types
-----------
1  exposure(t)                  moisture at the outer layer, cascades inward
2  stress(i, x)                 compression at layer i, cascades outward
3  replace(i, d, k, mu, c)      new parameters, W = C = 0 for that layer
4  minimum_foam_thickness()     -> Feasible(d0) | Infeasible()
5  feasibility()                -> Feasibility.POSSIBLE | IMPOSSIBLE

`query(kind, *args)` is the flat entry point used by drivers: it returns
None for 1-3, a float for 4 (D0_INFEASIBLE when infeasible) and the
literal "POSSIBLE"/"IMPOSSIBLE" for 5.

Inputs are trusted: conceptual indices and physical constants are not
range-checked. A zero exposure time or zero stress leaves the state
untouched; the cascade is not re-run, so earlier accumulation does not
spread further on a `1 0` or `2 i 0` query.
"""
from __future__ import annotations

from typing import Iterable, Optional

from .models.stack import JacketStack, to_storage_index
from .solver.bisection import (
    SolverOptions, ThicknessResult, Feasibility,
    minimum_thickness, check_feasibility, as_float,
)
from .utils import diagnostics as diag
from .utils.constants import MOISTURE_RATE, OUTER_INDEX

__all__ = ["QueryEngine"]


class QueryEngine:
    def __init__(
        self,
        stack: JacketStack,
        options: Optional[SolverOptions] = None,
        verbose: bool = False,
    ) -> None:
        self.stack = stack
        self.options = options or SolverOptions()
        self.verbose = verbose

    @classmethod
    def from_params(
        cls,
        layers: Iterable,
        beta: float,
        options: Optional[SolverOptions] = None,
        verbose: bool = False,
    ) -> "QueryEngine":
        return cls(JacketStack.from_params(layers, beta), options=options, verbose=verbose)

    # ---- mutating queries ----------------------------------------------

    def exposure(self, t: float) -> None:
        """Type 1: t hours outside."""
        if t == 0:
            return
        layers = self.stack.layers
        layers[to_storage_index(OUTER_INDEX)].W += t * MOISTURE_RATE
        for j in range(len(layers) - 1, 0, -1):
            outer = layers[j]
            layers[j - 1].W += outer.W * outer.mu

    def stress(self, i: int, x: float) -> None:
        """Type 2: compression x applied to conceptual layer i."""
        if x == 0:
            return
        layers = self.stack.layers
        start = to_storage_index(i)
        layers[start].C += x
        for j in range(start, len(layers) - 1):
            inner = layers[j]
            layers[j + 1].C += inner.C * inner.c

    def replace(self, i: int, d: float, k: float, mu: float, c: float) -> None:
        """Type 3: swap in a new layer at conceptual index i."""
        self.stack.layer(i).replace((d, k, mu, c))

    # ---- derived queries -----------------------------------------------

    def minimum_foam_thickness(self) -> ThicknessResult:
        """Type 4."""
        return minimum_thickness(self.stack.heat_flux, self.options)

    def feasibility(self) -> Feasibility:
        """Type 5."""
        return check_feasibility(self.stack.heat_flux, self.options)

    # ---- dispatch ------------------------------------------------------

    def query(self, kind: int, *args):
        kind = int(kind)
        if kind == 1:
            (t,) = args
            self.exposure(float(t))
            result = None
        elif kind == 2:
            i, x = args
            self.stress(int(i), float(x))
            result = None
        elif kind == 3:
            i, d, k, mu, c = args
            self.replace(int(i), float(d), float(k), float(mu), float(c))
            result = None
        elif kind == 4:
            result = as_float(self.minimum_foam_thickness())
        elif kind == 5:
            result = self.feasibility().value
        else:
            raise ValueError(f"Unknown query type: {kind} (expected 1..5)")

        if self.verbose:
            diag.log_query(kind=kind, args=args, result=result)
            if kind <= 3:
                diag.log_stack_summary(self.stack)
        return result
