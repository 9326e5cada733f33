"""
Benchmark configuration for SuperSorter
"""

import json
import logging
import os
from dataclasses import asdict, dataclass, field, fields

from supersorter.distributions import Distribution
from supersorter.engine import Algorithm

logger = logging.getLogger(__name__)


@dataclass
class BenchConfig:
    """Settings for a benchmark run"""

    # Timed runs per (algorithm, distribution, size)
    iterations: int = 10

    # Sizes run from 10**1 up to 10**size_exponent
    size_exponent: int = 3

    # Where per-algorithm reports and comparison.txt are written
    output_dir: str = "data"

    # Seed for the random distribution; None draws fresh entropy
    seed: int | None = None

    algorithms: list[Algorithm] = field(
        default_factory=lambda: [
            Algorithm.BUBBLE,
            Algorithm.SELECTION,
            Algorithm.INSERTION,
            Algorithm.MERGE,
            Algorithm.QUICK,
            Algorithm.DEFAULT,
        ]
    )
    distributions: list[Distribution] = field(default_factory=lambda: list(Distribution))

    def __post_init__(self):
        self.algorithms = [Algorithm.parse(a) for a in self.algorithms]
        self.distributions = [Distribution.parse(d) for d in self.distributions]
        if self.iterations < 1:
            raise ValueError(f"iterations must be at least 1, got {self.iterations}")
        if self.size_exponent < 1:
            raise ValueError(f"size_exponent must be at least 1, got {self.size_exponent}")

    @property
    def sizes(self) -> list[int]:
        return [10 ** k for k in range(1, self.size_exponent + 1)]

    @classmethod
    def from_dict(cls, data: dict) -> "BenchConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(sorted(unknown))}")
        return cls(**data)

    def to_dict(self) -> dict:
        data = asdict(self)
        data["algorithms"] = [a.value for a in self.algorithms]
        data["distributions"] = [d.key for d in self.distributions]
        return data

    def to_json(self, path: str) -> None:
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    def update(self, **overrides) -> "BenchConfig":
        """Copy with every non-None override applied (CLI flags win over the file)."""
        data = self.to_dict()
        data.update({k: v for k, v in overrides.items() if v is not None})
        return BenchConfig.from_dict(data)


def load_config(path: str | None = None) -> BenchConfig:
    if path is None:
        return BenchConfig()
    if not os.path.exists(path):
        raise ValueError(f"Config file not found: {path}")
    with open(path) as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a JSON object")
    logger.debug("Loaded benchmark config from %s", path)
    return BenchConfig.from_dict(data)
