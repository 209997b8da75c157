"""Console walkthrough of the inverse cache.

Run:
  - `cachematrix-demo '[[2,0],[0,2]]'`
  - `python -m cachematrix.demo '[[4,7],[2,6]]' --method lu --verbose`

Resolves the inverse twice (the second call is served from the cache), resets
the cache and resolves once more.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Sequence

import numpy as np

import cachematrix

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_INVALID_MATRIX = 2
EXIT_INVERSION_FAILED = 3


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="cachematrix-demo",
        description="Resolve, resolve (cached), reset, resolve a matrix inverse.",
    )
    parser.add_argument("matrix", help="JSON matrix, e.g. '[[4,7],[2,6]]'")
    parser.add_argument(
        "--method",
        choices=cachematrix.available_methods(),
        default=None,
        help="inversion method (default: configured default)",
    )
    parser.add_argument("--verbose", action="store_true", help="log cache activity to stderr")
    return parser.parse_args(argv)


def run(matrix: Any, *, method: str | None = None, out: Any = None) -> cachematrix.CachedMatrix:
    out = out if out is not None else sys.stdout
    mat = cachematrix.CachedMatrix(matrix)
    resolver = cachematrix.InverseResolver(method=method)

    print(resolver.resolve(mat), file=out)
    print(resolver.resolve(mat), file=out)
    cachematrix.reset(mat)
    print(resolver.resolve(mat), file=out)
    print(
        f"hits={resolver.stats.hits} misses={resolver.stats.misses} "
        f"computations={resolver.stats.computations}",
        file=out,
    )
    return mat


def main(argv: Sequence[str] | None = None) -> int:
    try:
        args = _parse_args(argv)
    except SystemExit as exc:
        return EXIT_OK if exc.code == 0 else EXIT_USAGE

    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s", stream=sys.stderr)

    try:
        data = json.loads(args.matrix)
    except json.JSONDecodeError as exc:
        print(f"error: matrix is not valid JSON: {exc}", file=sys.stderr)
        return EXIT_USAGE

    try:
        run(data, method=args.method)
    except (cachematrix.InvalidArgument, TypeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_INVALID_MATRIX
    except (np.linalg.LinAlgError, ValueError) as exc:
        print(f"error: inversion failed: {exc}", file=sys.stderr)
        return EXIT_INVERSION_FAILED
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
