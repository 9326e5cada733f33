# ============================================================
# SuperSorter - dispatch
# ============================================================

import enum
import operator

from supersorter import algorithms


class Algorithm(enum.Enum):
    DEFAULT   = "default"
    BUBBLE    = "bubble"
    SELECTION = "selection"
    INSERTION = "insertion"
    MERGE     = "merge"
    QUICK     = "quick"

    @property
    def display_name(self) -> str:
        return f"{self.name.title()} Sort"

    @property
    def stable(self) -> bool:
        return self not in (Algorithm.QUICK, Algorithm.DEFAULT)

    @classmethod
    def parse(cls, value) -> "Algorithm":
        """Accept a member, its value ("quick") or its name ("QUICK")."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        for member in cls:
            if key in (member.value, member.name.lower()):
                return member
        raise ValueError(f"Unknown algorithm: {value!r}")


# Resolved at call time, so a patched algorithms module takes effect.
STRATEGIES = {
    Algorithm.DEFAULT:   lambda: algorithms.default_sort,
    Algorithm.BUBBLE:    lambda: algorithms.bubble_sort,
    Algorithm.SELECTION: lambda: algorithms.selection_sort,
    Algorithm.INSERTION: lambda: algorithms.insertion_sort,
    Algorithm.MERGE:     lambda: algorithms.merge_sort,
    Algorithm.QUICK:     lambda: algorithms.quick_sort,
}


def get_strategy(algorithm):
    return STRATEGIES[Algorithm.parse(algorithm)]()


def sort(seq, comparator=operator.gt, algorithm=Algorithm.DEFAULT, begin=0, end=None):
    """
    Sort seq[begin:end] in place.

    comparator(a, b) returns True when a must not precede b, so the default
    operator.gt sorts ascending and operator.lt descending. The comparator
    must be a strict weak ordering; anything it raises propagates as-is.
    """
    strategy = get_strategy(algorithm)
    if end is None:
        end = len(seq)
    if end - begin < 2:
        return
    strategy(seq, begin, end, comparator)


def is_sorted(seq, comparator=operator.gt, begin=0, end=None) -> bool:
    if end is None:
        end = len(seq)
    return not any(comparator(seq[i], seq[i + 1]) for i in range(begin, end - 1))
