"""
Feature Subsampling Primitives
==============================

Pure functions behind the random feature filters: how many positions to keep,
which positions to keep, and how to project a vector onto them.

Functions:
- sample_size: Number of features retained for a vector length and fraction.
- generate_random_indexes: Unique, ascending pseudorandom positions.
- copy_from_indexes: Projection of a vector onto a set of positions.
"""

import logging
import math
from typing import List, Sequence

import numpy as np

from ..errors import InvalidArgumentError, NullReferenceError

__all__ = ["sample_size", "generate_random_indexes", "copy_from_indexes"]

logger = logging.getLogger(__name__)


def sample_size(length: int, x: float) -> int:
    """Number of features kept from a vector of ``length`` features.

    The raw product is floored, and the result is never below one feature.

    :param int length: Length of the vector.
    :param float x: Fraction of features to keep.
    :return int: ``max(floor(length * x), 1)``.
    """
    return max(int(math.floor(length * x)), 1)


def generate_random_indexes(max_exclusive: int, amount: int, random) -> List[int]:
    """Draw ``amount`` unique pseudorandom positions in ``[0, max_exclusive)``.

    Positions are drawn one at a time from ``random`` until enough distinct
    ones are collected; repeated draws are discarded.

    :param int max_exclusive: Upper bound (exclusive) of the positions.
    :param int amount: Number of distinct positions required.
    :param random: Random source exposing ``next_int(max_exclusive)``.
    :return List[int]: The selected positions, ascending.
    """
    if random is None:
        raise NullReferenceError("A random source is required to generate indexes.")
    if amount > max_exclusive:
        raise InvalidArgumentError(
            f"Required amount {amount} exceeds the maximum index {max_exclusive}."
        )
    if amount < 1:
        raise InvalidArgumentError(f"Required amount must be positive, got {amount}.")

    indexes = set()
    draws = 0
    while len(indexes) < amount:
        index = int(random.next_int(max_exclusive))
        if not 0 <= index < max_exclusive:
            raise InvalidArgumentError(
                f"Random source drew {index}, outside [0, {max_exclusive})."
            )
        indexes.add(index)
        draws += 1

    logger.debug("Selected %d of %d positions in %d draws", amount, max_exclusive, draws)
    return sorted(indexes)


def copy_from_indexes(vector, indexes: Sequence[int]) -> np.ndarray:
    """Build a new vector holding only the values at ``indexes``.

    :param vector: Source vector (any 1-D sequence of numbers).
    :param Sequence[int] indexes: Ascending positions to copy.
    :return np.ndarray: ``out[i] == vector[indexes[i]]``, a fresh float64 array.
    """
    src = np.asarray(vector, dtype=np.float64)
    return src[np.asarray(indexes, dtype=np.intp)]
