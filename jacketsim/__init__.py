# jacketsim/__init__.py
"""
Transient thermal model of a seven-layer jacket and its heat-flux queries.

    from jacketsim import QueryEngine
    eng = QueryEngine.from_params(layers, beta=0.5)
    eng.query(1, 10.0)      # ten hours of exposure
    eng.query(4)            # minimum foam thickness [m]
"""
from __future__ import annotations
from .models.layer import Layer, LayerParams
from .models.stack import JacketStack, to_storage_index
from .solver.bisection import SolverOptions, Feasible, Infeasible, Feasibility
from .engine import QueryEngine

__all__ = [
    "Layer", "LayerParams", "JacketStack", "to_storage_index",
    "SolverOptions", "Feasible", "Infeasible", "Feasibility", "QueryEngine",
]
