"""SuperSorter - six interchangeable in-place sorting strategies."""

from supersorter.algorithms import INSERTION_THRESHOLD
from supersorter.engine import Algorithm, is_sorted, sort

__version__ = "1.0.0"

__all__ = ["Algorithm", "INSERTION_THRESHOLD", "is_sorted", "sort"]
