"""
jacketsim/utils/diagnostics.py

Compact, low-noise traces of stack state and searches.
Call these from the engine/solver when verbose/debug is set.
"""

from __future__ import annotations

from typing import Sequence


def log_stack_summary(stack, *, prefix: str = "[diag]") -> None:
    """One line per layer: conceptual index, d, k_eff, R, W, C."""
    beta = stack.beta
    for j, L in enumerate(stack.layers):
        print(
            f"{prefix} layer {j - 1:+d} | d={L.d:.3e} m | k_eff={L.k_eff(beta):.3e} | "
            f"R={L.thermal_resistance(beta):.3e} | W={L.W:.3e} C={L.C:+.3e}"
        )
    print(f"{prefix} stack | beta={beta:g} | R_th={stack.total_resistance():.6e} | "
          f"q={stack.heat_flux_current():.6e} W/m^2")


def log_query(*, kind: int, args: Sequence, result=None, prefix: str = "[query]") -> None:
    arg_txt = " ".join(f"{a:g}" if isinstance(a, float) else str(a) for a in args)
    res_txt = "" if result is None else f" -> {result}"
    print(f"{prefix} type {kind} {arg_txt}{res_txt}".rstrip())


def log_bisection_iter(
    *,
    it: int,
    left: float,
    right: float,
    q_mid: float,
    prefix: str = "[bisect]",
) -> None:
    print(
        f"{prefix} iter {it:03d} | d0∈[{left:.6e},{right:.6e}] m | "
        f"width={right - left:.3e} | q(mid)={q_mid:.6e}"
    )


def log_bisection_summary(*, iters: int, thickness: float, width: float, prefix: str = "[bisect]") -> None:
    print(f"{prefix} done | iters={iters} | d0={thickness:.10f} m | width={width:.3e}")


def log_bisection_infeasible(*, q_upper: float, d_upper: float, q_max: float, prefix: str = "[bisect]") -> None:
    print(f"{prefix} infeasible | q({d_upper:g})={q_upper:.6e} > q_max={q_max:g}")
