"""Command line interface for inspecting and timing the easing curves.

``interpolation list`` prints every easing name, ``interpolation table NAME``
samples one curve and ``interpolation bench`` times the functions over the
eleven samples ``0.0, 0.1, ..., 1.0``.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
import timeit
from typing import List, Optional

import numpy as np

from .ease import EASING_FUNCTIONS, get_ease

# All CLI runs are appended to this file unless ``--log-file`` says otherwise.
LOG_FILE = 'interpolation.log'

DEFAULT_STEPS = 10
DEFAULT_ITERATIONS = 10000
BENCH_SAMPLES = [x / 10 for x in range(11)]
DTYPES = {'float64': float, 'float32': np.float32}

logger = logging.getLogger('interpolation')


def configure_logging(log_file: str = LOG_FILE, verbose: bool = False) -> None:
    """Attach a file handler to the package logger (once per file)."""
    path = os.path.abspath(log_file)
    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == path:
            break
    else:
        handler = logging.FileHandler(log_file, encoding="utf-8")
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.propagate = False


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='interpolation', description='Inspect and benchmark easing curves'
    )
    parser.add_argument('--log-file', default=LOG_FILE, help='file receiving log output')
    parser.add_argument('--verbose', action='store_true', help='log debug messages')
    commands = parser.add_subparsers(dest='command', required=True)

    commands.add_parser('list', help='print every easing name')

    table = commands.add_parser('table', help='sample one easing curve')
    table.add_argument('name', help="easing name, e.g. 'bounce-out'")
    table.add_argument('--steps', type=int, default=DEFAULT_STEPS,
                       help='number of intervals between 0 and 1')
    table.add_argument('--dtype', default='float64', choices=sorted(DTYPES))

    bench = commands.add_parser('bench', help='time the easing functions')
    bench.add_argument('names', nargs='*', help='easings to time (default: all)')
    bench.add_argument('--iterations', type=int, default=DEFAULT_ITERATIONS,
                       help='passes over the sample values per function')
    bench.add_argument('--dtype', default='float64', choices=sorted(DTYPES))
    return parser


def sample_curve(name: str, steps: int = DEFAULT_STEPS, dtype=float) -> List[tuple]:
    """Return ``(p, eased)`` pairs for ``steps + 1`` evenly spaced ``p``."""
    func = get_ease(name)
    steps = max(steps, 1)
    return [(dtype(i / steps), func(dtype(i / steps))) for i in range(steps + 1)]


def bench_ease(name: str, iterations: int = DEFAULT_ITERATIONS, dtype=float) -> float:
    """Return the average time in nanoseconds of one call to easing ``name``."""
    func = get_ease(name)
    values = [dtype(x) for x in BENCH_SAMPLES]

    def run():
        for x in values:
            func(x)

    total = timeit.timeit(run, number=iterations)
    return total / (iterations * len(values)) * 1e9


def _cmd_list(args) -> int:
    for name in EASING_FUNCTIONS:
        print(name)
    return 0


def _cmd_table(args) -> int:
    dtype = DTYPES[args.dtype]
    for p, value in sample_curve(args.name, args.steps, dtype):
        print(f"{float(p):.4f}\t{float(value):.6f}")
    logger.info("Sampled %s with %d steps (%s)", args.name, args.steps, args.dtype)
    return 0


def _cmd_bench(args) -> int:
    dtype = DTYPES[args.dtype]
    names = args.names or list(EASING_FUNCTIONS)
    for name in names:
        ns = bench_ease(name, args.iterations, dtype)
        print(f"{name:<20} {ns:10.1f} ns/call")
        logger.info("bench %s %s: %.1f ns/call", name, args.dtype, ns)
    return 0


COMMANDS = {
    'list': _cmd_list,
    'table': _cmd_table,
    'bench': _cmd_bench,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI and return its exit status."""
    args = create_parser().parse_args(argv)
    configure_logging(args.log_file, args.verbose)
    try:
        return COMMANDS[args.command](args)
    except KeyError as exc:
        logger.error("Invalid easing: %s", exc)
        print(f"error: {exc.args[0]}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
