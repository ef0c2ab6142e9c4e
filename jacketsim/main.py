# jacketsim/main.py
"""
jacketsim main entrypoint.

Default subcommand: run (query stream on stdin)
Usage examples:
    python -m jacketsim.main < input.txt
    python -m jacketsim.main run input.txt --verbose
    python -m jacketsim.main scenario jacket.yaml
    python -m jacketsim.main profile jacket.yaml --d-max 0.5 --csv q_profile.csv
"""

from __future__ import annotations

from dataclasses import dataclass
import argparse
import sys
from pathlib import Path

from .engine import QueryEngine
from .io.config import (
    load_config, build_layers, build_solver_options, build_queries,
)
from .io.layers_csv import load_layers_csv
from .io.stream import run_stream, run_queries
from .solver.bisection import SolverOptions
from .models.stack import JacketStack
from .postprocess.flux_profile import thickness_grid, flux_profile, is_non_increasing
from .utils import logger

__all__ = ["main"]


# ------------------------------ run subcommand ------------------------------


@dataclass(slots=True)
class _RunArgs:
    input: str
    verbose: bool


def _add_run_subparser(subparsers: argparse._SubParsersAction) -> argparse.ArgumentParser:
    p = subparsers.add_parser("run", help="Answer a whitespace-token query stream")
    p.add_argument("input", nargs="?", default="-", help="Input file ('-' for stdin)")
    p.add_argument("--verbose", action="store_true", help="Trace queries and stack state")
    p.set_defaults(cmd="run")
    return p


def _run_stream(args: _RunArgs) -> None:
    text = sys.stdin.read() if args.input == "-" else Path(args.input).read_text()
    for line in run_stream(text, options=SolverOptions(debug=args.verbose), verbose=args.verbose):
        print(line)


# ---------------------------- scenario subcommand ---------------------------


def _add_scenario_subparser(subparsers: argparse._SubParsersAction) -> argparse.ArgumentParser:
    p = subparsers.add_parser("scenario", help="Run the queries of a YAML scenario")
    p.add_argument("config", help="Scenario YAML (beta, layers, solver, queries)")
    p.add_argument("--layers-csv", default=None, help="Override layers with a d,k,mu,c CSV")
    p.add_argument("--verbose", action="store_true", help="Trace queries and stack state")
    p.set_defaults(cmd="scenario")
    return p


def _engine_from_config(ns: argparse.Namespace) -> tuple[QueryEngine, list]:
    # layers may come from the CSV alone
    cfg = load_config(Path(ns.config), require_layers=not ns.layers_csv)
    layers = load_layers_csv(Path(ns.layers_csv)) if ns.layers_csv else build_layers(cfg)
    options = build_solver_options(cfg)
    if ns.verbose:
        options.debug = True
    engine = QueryEngine.from_params(
        layers, float(cfg.raw["beta"]), options=options, verbose=ns.verbose
    )
    return engine, build_queries(cfg)


def _run_scenario(ns: argparse.Namespace) -> None:
    engine, queries = _engine_from_config(ns)
    if not queries:
        logger.warn(f"{ns.config} has no queries")
    for line in run_queries(engine, queries):
        print(line)


# ---------------------------- profile subcommand ----------------------------


def _add_profile_subparser(subparsers: argparse._SubParsersAction) -> argparse.ArgumentParser:
    p = subparsers.add_parser("profile", help="Tabulate q(d0) for the initial stack")
    p.add_argument("config", help="Scenario YAML (beta, layers)")
    p.add_argument("--layers-csv", default=None, help="Override layers with a d,k,mu,c CSV")
    p.add_argument("--d-max", type=float, default=1.0, help="Largest foam thickness [m]")
    p.add_argument("--n", type=int, default=101, help="Grid points")
    p.add_argument("--log", action="store_true", help="Log-spaced grid")
    p.add_argument("--csv", default=None, help="CSV output path (stdout if omitted)")
    p.set_defaults(cmd="profile", verbose=False)
    return p


def _run_profile(ns: argparse.Namespace) -> None:
    engine, _ = _engine_from_config(ns)
    stack: JacketStack = engine.stack
    df = flux_profile(stack, thickness_grid(ns.d_max, ns.n, log=ns.log), q_max=engine.options.q_max)
    if not is_non_increasing(df):
        logger.warn("q(d0) is not non-increasing on this grid; check k_eff of the foam layer")
    if ns.csv:
        df.to_csv(ns.csv, index=False)
        logger.info(f"wrote {ns.csv}")
    else:
        print(df.to_string(index=False))


# --------------------------------- main() ------------------------------------


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="jacketsim — jacket heat-flux queries")
    sub = parser.add_subparsers(dest="cmd")

    run_parser = _add_run_subparser(sub)
    _add_scenario_subparser(sub)
    _add_profile_subparser(sub)

    argv = sys.argv[1:] if argv is None else argv
    try:
        # If no subcommand given, default to 'run' on stdin
        if not argv:
            ns = run_parser.parse_args([])
            _run_stream(_RunArgs(input=str(ns.input), verbose=bool(ns.verbose)))
            return 0

        ns = parser.parse_args(argv)
        if ns.cmd == "run":
            _run_stream(_RunArgs(input=str(ns.input), verbose=bool(ns.verbose)))
        elif ns.cmd == "scenario":
            _run_scenario(ns)
        elif ns.cmd == "profile":
            _run_profile(ns)
        else:
            parser.error("Unknown command (try: run, scenario, profile)")
    except (ValueError, AssertionError, OSError) as exc:
        logger.error(str(exc))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
