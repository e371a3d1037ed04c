r"""
Random X% Feature Filter
========================

Overview
--------

``RandomSampler`` keeps ``X%`` of the features of a pattern, picked
pseudorandomly. It is meant for feature-reduction experiments in pattern
recognition, where most dimensions of a pattern are discarded and only a
random fraction is kept.

For a vector of length :math:`n` and fraction :math:`x` the number of kept
features is

.. math::

    m = \max(\lfloor n \cdot x \rfloor, 1)

and the kept features stay in their original relative order.

Single patterns draw new positions on every call. A batch draws one set of
positions, from the length of its first pattern, and applies it to every
pattern, so the reduced vectors remain column-aligned and comparable.

Example
-------

.. code-block:: python

    import random
    from pattern_filters import Pattern, RandomSampler

    sampler = RandomSampler(0.4, random.Random(42))
    batch = [Pattern([10, 20, 30, 40, 50]), Pattern([1, 2, 3, 4, 5])]
    reduced = sampler.filter_batch_copy(batch)
"""

import logging
import numbers
from typing import List, Sequence

from ..algorithms.sampling import copy_from_indexes, generate_random_indexes, sample_size
from ..base_filter import BaseFilter
from ..errors import InvalidArgumentError, LengthMismatchError, NullReferenceError
from ..pattern import PatternLike
from ..utils.random_source import as_random_source

__all__ = ["RandomSampler"]

logger = logging.getLogger(__name__)


class RandomSampler(BaseFilter):
    r"""
    Filter that keeps a random ``x`` fraction of the features of patterns.

    The random source is shared by reference: it is neither copied nor
    reseeded, and concurrent use from several threads needs external locking.

    :param float x: Fraction of features to keep, strictly between 0 and 1.
    :param random: ``random.Random``, numpy ``Generator``/``RandomState``,
        ``torch.Generator`` or any object with ``next_int(max_exclusive)``.
    """

    def __init__(self, x: float, random):
        if random is None:
            raise NullReferenceError("A random source is required.")
        if isinstance(x, bool) or not isinstance(x, numbers.Real) or not 0.0 < x < 1.0:
            raise InvalidArgumentError(f"x must satisfy 0 < x < 1, got {x!r}.")
        self._x = float(x)
        self._random = as_random_source(random)

    @property
    def x(self) -> float:
        """Fraction of features kept."""
        return self._x

    @property
    def random(self):
        """Random source the positions are drawn from."""
        return self._random

    def select_indexes(self, length: int) -> List[int]:
        """Draw the ascending positions kept from a vector of ``length`` features.

        :param int length: Length of the vector to reduce.
        :return List[int]: ``max(floor(length * x), 1)`` unique positions.
        """
        amount = sample_size(length, self._x)
        return generate_random_indexes(length, amount, self._random)

    def filter(self, pattern: PatternLike) -> None:
        if pattern is None:
            raise NullReferenceError("Pattern must not be None.")
        vector = pattern.get_vector()
        indexes = self.select_indexes(len(vector))
        pattern.set_vector(copy_from_indexes(vector, indexes))

    def filter_batch(self, patterns: Sequence[PatternLike]) -> None:
        if patterns is None:
            raise NullReferenceError("Pattern batch must not be None.")
        if len(patterns) == 0:
            raise InvalidArgumentError("Pattern batch must not be empty.")

        vectors = []
        for position, pattern in enumerate(patterns):
            if pattern is None:
                raise NullReferenceError(f"Pattern at position {position} is None.")
            vectors.append(pattern.get_vector())

        # Validate everything before touching any pattern
        reference = len(vectors[0])
        for position, vector in enumerate(vectors):
            if len(vector) != reference:
                raise LengthMismatchError(position, reference, len(vector))

        indexes = self.select_indexes(reference)
        logger.debug("Filtering batch of %d patterns down to %d of %d features",
                     len(vectors), len(indexes), reference)

        for pattern, vector in zip(patterns, vectors):
            pattern.set_vector(copy_from_indexes(vector, indexes))

    def __repr__(self) -> str:
        return f"RandomSampler(x={self._x!r}, random={self._random!r})"
