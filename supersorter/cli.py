"""
Command-line interface for SuperSorter
"""

import argparse
import logging
import random
import sys

from supersorter.config import load_config
from supersorter.distributions import Distribution, generate
from supersorter.engine import Algorithm

logger = logging.getLogger(__name__)

ALGORITHM_CHOICES = [a.value for a in Algorithm]
DISTRIBUTION_CHOICES = [d.key for d in Distribution]


def _add_bench_args(parser):
    parser.add_argument("--config", "-c", help="Path to a JSON benchmark config", default=None)
    parser.add_argument("--iterations", "-i", help="Timed runs per case", type=int, default=None)
    parser.add_argument(
        "--size-exponent", "-k", help="Largest size is 10**K", type=int, default=None
    )
    parser.add_argument("--output-dir", "-o", help="Directory for report files", default=None)
    parser.add_argument("--seed", help="Seed for random inputs", type=int, default=None)


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command-line arguments"""
    parser = argparse.ArgumentParser(description="SuperSorter - in-place sorting strategies")
    parser.add_argument(
        "--log-level",
        "-l",
        help="Logging level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="INFO",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    bench = sub.add_parser("bench", help="Time every algorithm over every input shape")
    _add_bench_args(bench)
    bench.add_argument(
        "--algorithm", "-a", action="append", choices=ALGORITHM_CHOICES, default=None,
        help="Algorithm to run (repeatable; default: all)",
    )
    bench.add_argument(
        "--distribution", "-d", action="append", choices=DISTRIBUTION_CHOICES, default=None,
        help="Input shape to run (repeatable; default: all)",
    )

    qvd = sub.add_parser("quick-vs-default", help="Random-input race between quick and default")
    _add_bench_args(qvd)

    show = sub.add_parser("show", help="Watch an algorithm sort in a window")
    show.add_argument("--algorithm", "-a", choices=ALGORITHM_CHOICES, default="default")
    show.add_argument("--distribution", "-d", choices=DISTRIBUTION_CHOICES, default="random")
    show.add_argument("--size", "-n", type=int, default=32)
    show.add_argument("--speed", "-s", type=float, default=1.0)

    return parser.parse_args(argv)


def _bench_config(args, **extra):
    config = load_config(args.config)
    return config.update(
        iterations=args.iterations,
        size_exponent=args.size_exponent,
        output_dir=args.output_dir,
        seed=args.seed,
        **extra,
    )


def run_bench(args) -> int:
    from supersorter.bench import Benchmark

    config = _bench_config(args, algorithms=args.algorithm, distributions=args.distribution)
    results = Benchmark(config).run()
    failed = [r for r in results if not r.sorted]
    for r in failed:
        logger.error("FAILED: %s on %s (size %d)",
                     r.algorithm.display_name, r.distribution.label, r.size)
    return 1 if failed else 0


def run_quick_vs_default(args) -> int:
    from supersorter.bench import quick_vs_default

    iterations = args.iterations
    if iterations is None and args.config is None:
        iterations = 50
    config = load_config(args.config).update(
        iterations=iterations,
        size_exponent=args.size_exponent,
        output_dir=args.output_dir,
        seed=args.seed,
    )
    results = quick_vs_default(config)
    return 0 if all(r.sorted for r in results) else 1


def run_show(args) -> int:
    from supersorter import visualize

    if args.distribution == Distribution.RANDOM.key:
        values = list(range(1, args.size + 1)); random.shuffle(values)
    else:
        values = generate(args.distribution, args.size)
    visualize.show(values, args.algorithm, speed=args.speed)
    return 0


COMMANDS = {
    "bench": run_bench,
    "quick-vs-default": run_quick_vs_default,
    "show": run_show,
}


def main(argv=None) -> int:
    """
    Main entry point

    Returns:
        Exit code
    """
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    try:
        return COMMANDS[args.command](args)
    except ValueError as e:
        logger.error("%s", e)
        return 2


if __name__ == "__main__":
    sys.exit(main())
