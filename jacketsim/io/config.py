# jacketsim/io/config.py
# -*- coding: utf-8 -*-
"""
YAML → JacketStack, SolverOptions and query list.

Schema (example):

beta: 0.5
layers:                      # 7 rows, conceptual order -1..5 (optional with a layers CSV)
  - { d: 0.02,  k: 0.04,  mu: 0.1,  c: 0.2 }
  - { d: 0.05,  k: 0.03,  mu: 0.15, c: 0.25 }
  ...
solver:                      # optional
  q_max: 20.0
  upper_bound_m: 1.0e9
  max_iterations: 100
  width_tol_m: 1.0e-8
queries:                     # optional, same tuples as the stream format
  - [4]
  - [1, 10]
  - [2, 3, 5.0]
"""
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple

import yaml

from jacketsim.models.layer import LayerParams
from jacketsim.models.stack import JacketStack
from jacketsim.solver.bisection import SolverOptions
from jacketsim.utils.constants import N_LAYERS

@dataclass
class RunConfig:
    raw: dict
    path: Path

def load_config(path: Path, require_layers: bool = True) -> RunConfig:
    data = yaml.safe_load(Path(path).read_text())
    if not isinstance(data, dict):
        raise ValueError("Top-level YAML must be a mapping")
    _validate_minimum(data, require_layers=require_layers)
    return RunConfig(raw=data, path=Path(path))

def build_layers(cfg: RunConfig) -> List[LayerParams]:
    rows = cfg.raw["layers"]
    if len(rows) != N_LAYERS:
        raise ValueError(f"layers must have {N_LAYERS} rows, got {len(rows)}")
    layers: list[LayerParams] = []
    for row in rows:
        if isinstance(row, dict):
            layers.append(LayerParams(
                d=float(row["d"]), k=float(row["k"]),
                mu=float(row.get("mu", 0.0)), c=float(row.get("c", 0.0)),
            ))
        else:
            layers.append(LayerParams(*map(float, row)))
    return layers

def build_stack(cfg: RunConfig) -> JacketStack:
    return JacketStack.from_params(build_layers(cfg), float(cfg.raw["beta"]))

def build_solver_options(cfg: RunConfig) -> SolverOptions:
    s = cfg.raw.get("solver") or {}
    defaults = SolverOptions()
    return SolverOptions(
        q_max=float(s.get("q_max", defaults.q_max)),
        upper_bound_m=float(s.get("upper_bound_m", defaults.upper_bound_m)),
        max_iterations=int(s.get("max_iterations", defaults.max_iterations)),
        width_tol_m=float(s.get("width_tol_m", defaults.width_tol_m)),
        debug=bool(s.get("debug", defaults.debug)),
    )

def build_queries(cfg: RunConfig) -> List[Tuple]:
    queries = []
    for q in cfg.raw.get("queries") or []:
        q = list(q) if isinstance(q, (list, tuple)) else [q]
        if not q:
            raise ValueError("Empty query entry")
        queries.append(tuple(q))
    return queries

def _validate_minimum(cfg: dict, require_layers: bool = True) -> None:
    keys = ("beta", "layers") if require_layers else ("beta",)
    for key in keys:
        if key not in cfg:
            raise ValueError(f"Missing top-level key: {key}")
