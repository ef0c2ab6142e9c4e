# jacketsim/solver/bisection.py
# Minimum foam thickness by feasibility-monotone bisection, plus the
# POSSIBLE/IMPOSSIBLE check. Both only rely on q(d0) being non-increasing.

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable, Union

from jacketsim.utils import diagnostics as diag
from jacketsim.utils.constants import (
    EPS, Q_MAX, Q_MID_TOL, D0_UPPER, D0_INFEASIBLE, PROBE_D0_LO, PROBE_D0_HI,
)

__all__ = [
    "SolverOptions", "Feasible", "Infeasible", "ThicknessResult",
    "Feasibility", "minimum_thickness", "check_feasibility", "as_float",
]

FluxFn = Callable[[float], float]


@dataclass
class SolverOptions:
    q_max: float = Q_MAX
    upper_bound_m: float = D0_UPPER
    max_iterations: int = 100
    width_tol_m: float = 1e-8
    debug: bool = False


@dataclass(frozen=True)
class Feasible:
    thickness_m: float
    iters: int = 0


@dataclass(frozen=True)
class Infeasible:
    pass


ThicknessResult = Union[Feasible, Infeasible]


class Feasibility(str, enum.Enum):
    POSSIBLE = "POSSIBLE"
    IMPOSSIBLE = "IMPOSSIBLE"

    def __str__(self) -> str:
        return self.value


def as_float(result: ThicknessResult) -> float:
    """Tagged result → float, with D0_INFEASIBLE standing in for Infeasible."""
    if isinstance(result, Feasible):
        return result.thickness_m
    return D0_INFEASIBLE


# ---- search ------------------------------------------------------------------


def minimum_thickness(flux: FluxFn, options: SolverOptions | None = None) -> ThicknessResult:
    """Smallest d0 >= 0 with flux(d0) <= q_max.

    Parameters
    ----------
    flux : callable
        q(d0) [W/m^2], non-increasing in d0.
    options : SolverOptions
        Bound, iteration cap and interval-width tolerance.

    Returns
    -------
    Feasible(0.0) if no foam is needed, Infeasible() if even the upper bound
    fails, else Feasible(right) after bisection.
    """
    opt = options or SolverOptions()
    left, right = 0.0, float(opt.upper_bound_m)

    if flux(0.0) <= opt.q_max + EPS:
        return Feasible(0.0)
    if flux(right) > opt.q_max + EPS:
        if opt.debug:
            diag.log_bisection_infeasible(q_upper=flux(right), d_upper=right, q_max=opt.q_max)
        return Infeasible()

    it = 0
    while right - left > opt.width_tol_m and it < opt.max_iterations:
        mid = 0.5 * (left + right)
        q = flux(mid)
        if q <= opt.q_max + Q_MID_TOL:
            right = mid
        else:
            left = mid
        it += 1
        if opt.debug:
            diag.log_bisection_iter(it=it, left=left, right=right, q_mid=q)

    if opt.debug:
        diag.log_bisection_summary(iters=it, thickness=right, width=right - left)
    return Feasible(right, iters=it)


def check_feasibility(flux: FluxFn, options: SolverOptions | None = None) -> Feasibility:
    """POSSIBLE if some finite d0 >= 0 brings flux to q_max or below."""
    opt = options or SolverOptions()
    q_max = opt.q_max

    if flux(0.0) <= q_max + EPS:
        return Feasibility.POSSIBLE

    q_large = flux(opt.upper_bound_m)
    if q_large <= q_max + EPS:
        return Feasibility.POSSIBLE

    # still decreasing between the probes and already under the cap
    q1 = flux(PROBE_D0_LO)
    q2 = flux(PROBE_D0_HI)
    if q2 < q1 and q2 <= q_max + EPS:
        return Feasibility.POSSIBLE

    if q_large > q_max - EPS:
        return Feasibility.IMPOSSIBLE
    return Feasibility.POSSIBLE
