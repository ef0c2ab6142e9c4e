# -*- coding: utf-8 -*-
"""
Whitespace-token stream format → engine queries → output lines.

Layout:
  7 rows   d k mu c          (conceptual order -1..5)
  1 value  beta
  1 value  Q                 (number of queries)
  Q rows   1 t | 2 i x | 3 i d k mu c | 4 | 5

Outputs (one line per derived query):
  type 4 → f"{d0:.10f}"
  type 5 → POSSIBLE | IMPOSSIBLE
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence, Tuple

from jacketsim.engine import QueryEngine
from jacketsim.models.layer import LayerParams
from jacketsim.solver.bisection import SolverOptions
from jacketsim.utils.constants import N_LAYERS

__all__ = [
    "StreamFormatError", "ParsedInput", "parse_stream", "format_result",
    "run_queries", "run_stream",
]

# number of arguments following the type tag
_ARITY = {1: 1, 2: 2, 3: 5, 4: 0, 5: 0}


class StreamFormatError(ValueError):
    pass


@dataclass
class ParsedInput:
    layers: List[LayerParams]
    beta: float
    queries: List[Tuple] = field(default_factory=list)


class _Tokens:
    def __init__(self, text: str) -> None:
        self._it: Iterator[str] = iter(text.split())

    def next(self, what: str) -> str:
        try:
            return next(self._it)
        except StopIteration:
            raise StreamFormatError(f"Unexpected end of input while reading {what}") from None

    def float(self, what: str) -> float:
        tok = self.next(what)
        try:
            return float(tok)
        except ValueError:
            raise StreamFormatError(f"Expected a number for {what}, got {tok!r}") from None

    def int(self, what: str) -> int:
        tok = self.next(what)
        try:
            return int(tok)
        except ValueError:
            raise StreamFormatError(f"Expected an integer for {what}, got {tok!r}") from None


def parse_stream(text: str) -> ParsedInput:
    tok = _Tokens(text)
    layers = [
        LayerParams(*(tok.float(f"layer {j - 1} {name}") for name in LayerParams._fields))
        for j in range(N_LAYERS)
    ]
    beta = tok.float("beta")
    n_queries = tok.int("query count")

    queries: List[Tuple] = []
    for q in range(n_queries):
        kind = tok.int(f"query {q} type")
        if kind not in _ARITY:
            raise StreamFormatError(f"Unknown query type {kind} at query {q}")
        args: list = []
        for a in range(_ARITY[kind]):
            # the layer index of types 2/3 is an integer
            if kind in (2, 3) and a == 0:
                args.append(tok.int(f"query {q} layer index"))
            else:
                args.append(tok.float(f"query {q} argument {a}"))
        queries.append((kind, *args))
    return ParsedInput(layers=layers, beta=beta, queries=queries)


def format_result(kind: int, result) -> Optional[str]:
    if kind == 4:
        return f"{result:.10f}"
    if kind == 5:
        return str(result)
    return None


def run_queries(engine: QueryEngine, queries: Sequence[Sequence]) -> List[str]:
    out: List[str] = []
    for kind, *args in queries:
        line = format_result(kind, engine.query(kind, *args))
        if line is not None:
            out.append(line)
    return out


def run_stream(
    text: str,
    options: Optional[SolverOptions] = None,
    verbose: bool = False,
) -> List[str]:
    parsed = parse_stream(text)
    engine = QueryEngine.from_params(parsed.layers, parsed.beta, options=options, verbose=verbose)
    return run_queries(engine, parsed.queries)
