from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import numpy as np

from hvengine.algorithms.registry import available_algorithms, resolve_algorithm
from hvengine.config import DEFAULT_NADIR_EPSILON, default_log_level
from hvengine.exceptions import HVEngineError
from hvengine.hypervolume import Hypervolume
from hvengine.logging import configure_hvengine_logging
from hvengine.population import ArrayPopulation


def _load_points(path: str) -> np.ndarray:
    file_path = Path(path).expanduser()
    if not file_path.exists():
        raise FileNotFoundError(f"Point file '{file_path}' does not exist.")
    text = file_path.read_text(encoding="utf-8")
    delimiter = "," if "," in text else None
    return np.loadtxt(file_path, delimiter=delimiter, ndmin=2, comments="#")


def _build_engine(args) -> Hypervolume:
    F = _load_points(args.file)
    if getattr(args, "front_only", False):
        return Hypervolume.from_population(ArrayPopulation(F))
    return Hypervolume(F)


def _reference(args, hv: Hypervolume) -> np.ndarray:
    if args.ref:
        return np.asarray(args.ref, dtype=float)
    return hv.get_nadir_point(args.epsilon)


def _algorithm(args):
    if args.algorithm == "auto":
        return None
    if args.algorithm == "fpras":
        return resolve_algorithm("fpras", seed=args.seed)
    return resolve_algorithm(args.algorithm)


def _fmt(values) -> str:
    return " ".join(f"{float(v):.12g}" for v in values)


def _compute_cmd(args) -> None:
    hv = _build_engine(args)
    ref = _reference(args, hv)
    value = hv.compute(ref, _algorithm(args))
    print(f"{value:.12g}")


def _contributions_cmd(args) -> None:
    hv = _build_engine(args)
    ref = _reference(args, hv)
    algorithm = _algorithm(args)
    contrib = hv.contributions(ref, algorithm)
    for value in contrib:
        print(f"{value:.12g}")
    print(f"least: {int(np.argmin(contrib))}")
    print(f"greatest: {int(np.argmax(contrib))}")


def _nadir_cmd(args) -> None:
    hv = _build_engine(args)
    print(_fmt(hv.get_nadir_point(args.epsilon)))


def _add_common(p: argparse.ArgumentParser, *, with_algorithm: bool) -> None:
    p.add_argument("file", help="Point file: one point per row, comma or whitespace separated")
    p.add_argument("--epsilon", type=float, default=DEFAULT_NADIR_EPSILON, help="Nadir margin used when --ref is omitted")
    p.add_argument("--front-only", action="store_true", help="Keep only the first Pareto front of the file")
    if with_algorithm:
        p.add_argument("--ref", type=float, nargs="+", default=None, help="Reference point coordinates")
        p.add_argument(
            "--algorithm",
            default="auto",
            choices=["auto", *available_algorithms()],
            help="Hypervolume algorithm (default: chosen by dimension)",
        )
        p.add_argument("--seed", type=int, default=None, help="Seed for the fpras algorithm")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="hvengine", description="Hypervolume indicator of a point set (minimization).")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd")

    compute_p = sub.add_parser("compute", help="Total hypervolume")
    _add_common(compute_p, with_algorithm=True)

    contrib_p = sub.add_parser("contributions", help="Exclusive contribution of every point")
    _add_common(contrib_p, with_algorithm=True)

    nadir_p = sub.add_parser("nadir", help="Nadir point plus epsilon")
    _add_common(nadir_p, with_algorithm=False)
    return p


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_hvengine_logging(level=logging.DEBUG if args.verbose else default_log_level())
    if args.cmd is None:
        parser.print_help()
        return 1
    handlers = {
        "compute": _compute_cmd,
        "contributions": _contributions_cmd,
        "nadir": _nadir_cmd,
    }
    try:
        handlers[args.cmd](args)
    except (HVEngineError, FileNotFoundError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
