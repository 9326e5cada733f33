"""
Benchmark driver: times every strategy over every input shape and writes
per-algorithm reports plus a consolidated comparison.txt.
"""

import dataclasses
import logging
import operator
import os
import time
from dataclasses import dataclass

import numpy as np

from supersorter import engine
from supersorter.config import BenchConfig
from supersorter.distributions import Distribution, generate
from supersorter.engine import Algorithm

logger = logging.getLogger(__name__)

COMPARISON_FILE = "comparison.txt"
TIME_PRECISION = 20


@dataclass
class BenchResult:
    algorithm: Algorithm
    distribution: Distribution
    size: int
    sorted: bool
    best: float
    average: float
    worst: float
    iterations: int


@dataclass
class ComparisonEntry:
    distribution: Distribution
    size: int
    best: float
    best_name: str
    average: float
    average_name: str
    worst: float
    worst_name: str


class ComparisonTable:
    """Fastest best/average and slowest worst time per (distribution, size)."""

    def __init__(self):
        self._entries: dict[tuple[Distribution, int], ComparisonEntry] = {}

    def add(self, result: BenchResult):
        name = result.algorithm.display_name
        key = (result.distribution, result.size)
        entry = self._entries.get(key)
        if entry is None:
            self._entries[key] = ComparisonEntry(
                result.distribution, result.size,
                result.best, name, result.average, name, result.worst, name,
            )
            return
        if result.best < entry.best:
            entry.best, entry.best_name = result.best, name
        if result.average < entry.average:
            entry.average, entry.average_name = result.average, name
        if result.worst > entry.worst:
            entry.worst, entry.worst_name = result.worst, name

    def entries(self) -> list[ComparisonEntry]:
        return list(self._entries.values())

    def format(self) -> str:
        p = TIME_PRECISION
        out = []
        for e in self._entries.values():
            out.append(f"Sort Type: {e.distribution.label} - Container size: {e.size}.\n")
            out.append(f"\tBest time: {e.best:.{p}f} ({e.best_name}).\n")
            out.append(f"\tBest average time: {e.average:.{p}f} ({e.average_name}).\n")
            out.append(f"\tWorst time: {e.worst:.{p}f} ({e.worst_name}).\n\n")
        return "".join(out)


# ============================================================
# ========================= TIMING ===========================
# ============================================================

def time_sort(values, algorithm, comparator=operator.gt) -> float:
    start = time.perf_counter()
    engine.sort(values, comparator, algorithm)
    return time.perf_counter() - start


def run_case(algorithm, distribution, size, iterations, rng=None,
             comparator=operator.gt) -> BenchResult:
    """Time `iterations` fresh inputs; stops early on the first unsorted result."""
    algorithm = Algorithm.parse(algorithm)
    distribution = Distribution.parse(distribution)
    if rng is None:
        rng = np.random.default_rng()

    logger.info("%s: %s test with size %d", algorithm.display_name, distribution.label, size)
    times = []
    ok = True
    for i in range(iterations):
        values = generate(distribution, size, rng)
        times.append(time_sort(values, algorithm, comparator))
        ok = engine.is_sorted(values, comparator)
        logger.debug("\tIteration %d: %.6fs", i, times[-1])
        if not ok:
            logger.error("%s failed to sort %s of size %d",
                         algorithm.display_name, distribution.label, size)
            break

    t = np.asarray(times)
    return BenchResult(
        algorithm, distribution, size, ok,
        float(t.min()), float(t.mean()), float(t.max()), len(times),
    )


# ============================================================
# ========================= REPORTS ==========================
# ============================================================

def report_filename(algorithm) -> str:
    return Algorithm.parse(algorithm).display_name.replace(" ", "_") + ".txt"


def format_result(result: BenchResult) -> str:
    name = result.algorithm.display_name
    kind = result.distribution.label
    digits = len(str(result.size))
    line_size = 15 + digits if digits > len(kind) else 24 + len(kind)
    p = TIME_PRECISION

    def boxed(text):
        return f"* {text}".ljust(line_size - 1) + "*\n"

    sep = "*" * line_size + "\n"
    return (
        sep
        + boxed(name)
        + boxed(f"Sort type: {kind}")
        + boxed(f"Size of the vector: {result.size}")
        + sep
        + ("Sorted successfully\n" if result.sorted else "Sort failed\n")
        + f"Best time:          {result.best:.{p}f} seconds\n"
        + f"Worst time:         {result.worst:.{p}f} seconds\n"
        + f"Average time:       {result.average:.{p}f} seconds\n"
        + "\n\n"
    )


class Benchmark:
    def __init__(self, config: BenchConfig | None = None):
        self.config = config or BenchConfig()
        self.rng = np.random.default_rng(self.config.seed)
        self.table = ComparisonTable()
        self.results: list[BenchResult] = []

    def _path(self, filename):
        return os.path.join(self.config.output_dir, filename)

    def run(self) -> list[BenchResult]:
        os.makedirs(self.config.output_dir, exist_ok=True)
        open(self._path(COMPARISON_FILE), "w").close()

        for algorithm in self.config.algorithms:
            self.run_algorithm(algorithm)

        with open(self._path(COMPARISON_FILE), "a") as f:
            f.write(self.table.format())
        logger.info("Wrote %d results to %s", len(self.results), self.config.output_dir)
        return self.results

    def run_algorithm(self, algorithm):
        path = self._path(report_filename(algorithm))
        open(path, "w").close()
        for distribution in self.config.distributions:
            for size in self.config.sizes:
                result = run_case(algorithm, distribution, size,
                                  self.config.iterations, self.rng)
                self.results.append(result)
                self.table.add(result)
                with open(path, "a") as f:
                    f.write(format_result(result))


def quick_vs_default(config: BenchConfig | None = None) -> list[BenchResult]:
    """Random-input shoot-out between plain and hybrid quick sort."""
    config = dataclasses.replace(
        config or BenchConfig(iterations=50),
        algorithms=[Algorithm.QUICK, Algorithm.DEFAULT],
        distributions=[Distribution.RANDOM],
    )
    return Benchmark(config).run()
