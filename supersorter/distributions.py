# ============================================================
# SuperSorter - input distributions for benchmarks and demos
# ============================================================

import enum

import numpy as np


class Distribution(enum.Enum):
    RANDOM   = ("random",   "Randomized Vector")
    FRONT    = ("front",    "Almost Sorted (Front) Vector")
    MIDDLE   = ("middle",   "Almost Sorted (Middle) Vector")
    BACK     = ("back",     "Almost Sorted (Back) Vector")
    REVERSED = ("reversed", "Reversed Vector")
    BITONIC  = ("bitonic",  "Bitonic Vector")
    ROTATED  = ("rotated",  "Rotated Vector")

    def __init__(self, key, label):
        self.key = key
        self.label = label

    @classmethod
    def parse(cls, value) -> "Distribution":
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        for member in cls:
            if key in (member.key, member.name.lower()):
                return member
        raise ValueError(f"Unknown distribution: {value!r}")


def _random(size, rng):
    return rng.integers(0, size * 10, size=size, endpoint=True)


def _front(size, rng):
    # 9,1,2,3,4,5,6,7,8
    return np.concatenate(([size], np.arange(1, size)))


def _middle(size, rng):
    # 0,1,2,3,9,4,5,6,7
    half = size // 2
    return np.concatenate((np.arange(half), [size], np.arange(half, size - 1)))


def _back(size, rng):
    # 0,1,2,3,4,5,6,8,7
    arr = np.arange(size)
    if size >= 2:
        arr[[-2, -1]] = arr[[-1, -2]]
    return arr


def _reversed(size, rng):
    # 8,7,6,5,4,3,2,1,0
    return np.arange(size - 1, -1, -1)


def _bitonic(size, rng):
    # 0,1,2,3,4,5,4,3,2,1
    i = np.arange(size)
    return np.where(i < size // 2, i, size - i)


def _rotated(size, rng):
    # 0,9,2,8,4,7,6,6,8,5
    i = np.arange(size)
    return np.where(i % 2 == 0, i, size - 1 - i // 2)


_GENERATORS = {
    Distribution.RANDOM:   _random,
    Distribution.FRONT:    _front,
    Distribution.MIDDLE:   _middle,
    Distribution.BACK:     _back,
    Distribution.REVERSED: _reversed,
    Distribution.BITONIC:  _bitonic,
    Distribution.ROTATED:  _rotated,
}


def generate(distribution, size, rng=None) -> list:
    """Build `size` integers shaped like `distribution`, as a plain list."""
    if size <= 0:
        return []
    if rng is None:
        rng = np.random.default_rng()
    arr = _GENERATORS[Distribution.parse(distribution)](size, rng)
    return [int(v) for v in arr]
