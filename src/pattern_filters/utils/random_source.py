"""
Random Sources
==============

The filters only need one thing from a pseudorandom generator: a uniformly
distributed integer in ``[0, n)``. This module defines that contract and
adapts the generators found in a typical numeric stack to it.

Supported generators:
- ``random.Random``
- ``numpy.random.Generator`` and ``numpy.random.RandomState``
- ``torch.Generator``

The generator is shared by reference, never copied: seeding or advancing it
outside the filter is visible to the filter and vice versa. Sharing one
source across threads requires external synchronization.
"""

import random as _random
from abc import ABC, abstractmethod
from typing import Any

import numpy as np
import torch

from ..errors import InvalidArgumentError, NullReferenceError

__all__ = [
    "RandomSource",
    "PythonRandomSource",
    "NumpyRandomSource",
    "TorchRandomSource",
    "as_random_source",
]


class RandomSource(ABC):
    """Uniform integer generator used to pick feature positions."""

    @abstractmethod
    def next_int(self, max_exclusive: int) -> int:
        """Return a uniformly distributed integer in ``[0, max_exclusive)``."""
        pass


class PythonRandomSource(RandomSource):
    """Adapter over :class:`random.Random`."""

    def __init__(self, generator: _random.Random):
        self.generator = generator

    def next_int(self, max_exclusive: int) -> int:
        return self.generator.randrange(max_exclusive)


class NumpyRandomSource(RandomSource):
    """Adapter over ``np.random.Generator`` or the legacy ``np.random.RandomState``."""

    def __init__(self, generator):
        self.generator = generator

    def next_int(self, max_exclusive: int) -> int:
        if isinstance(self.generator, np.random.Generator):
            return int(self.generator.integers(0, max_exclusive))
        return int(self.generator.randint(0, max_exclusive))


class TorchRandomSource(RandomSource):
    """Adapter over :class:`torch.Generator`."""

    def __init__(self, generator: torch.Generator):
        self.generator = generator

    def next_int(self, max_exclusive: int) -> int:
        return int(torch.randint(0, max_exclusive, (1,), generator=self.generator).item())


def as_random_source(random: Any) -> RandomSource:
    """Wrap ``random`` into a :class:`RandomSource` when needed.

    Objects already exposing ``next_int`` are returned unchanged.

    :param Any random: A random source or one of the supported generators.
    :return RandomSource: The source to draw positions from.
    """
    if random is None:
        raise NullReferenceError("A random source is required.")
    if callable(getattr(random, "next_int", None)):
        return random
    if isinstance(random, _random.Random):
        return PythonRandomSource(random)
    if isinstance(random, (np.random.Generator, np.random.RandomState)):
        return NumpyRandomSource(random)
    if isinstance(random, torch.Generator):
        return TorchRandomSource(random)
    raise InvalidArgumentError(
        f"Unsupported random source of type {type(random).__name__}."
    )
