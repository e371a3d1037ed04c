"""Seeding helpers and seeded random sources for reproducible filtering."""

import random
from typing import Optional

import numpy as np
import torch

from ..errors import InvalidArgumentError
from .random_source import (
    NumpyRandomSource,
    PythonRandomSource,
    RandomSource,
    TorchRandomSource,
)

BACKENDS = ("python", "numpy", "torch")


def set_global_seed(seed: int) -> None:
    """Set the random seed of every global generator for reproducibility.

    :param int seed: Random seed to set.
    """
    random.seed(seed)
    np.random.seed(seed)
    torch.manual_seed(seed)


def make_random_source(seed: Optional[int] = None, backend: str = "python") -> RandomSource:
    """Create a fresh random source, seeded when ``seed`` is given.

    :param Optional[int] seed: Seed of the new generator, ``None`` for OS entropy.
    :param str backend: One of ``"python"``, ``"numpy"`` or ``"torch"``.
    :return RandomSource: Source owning its own generator.
    """
    if backend == "python":
        return PythonRandomSource(random.Random(seed))
    if backend == "numpy":
        return NumpyRandomSource(np.random.default_rng(seed))
    if backend == "torch":
        generator = torch.Generator()
        if seed is None:
            generator.seed()
        else:
            generator.manual_seed(seed)
        return TorchRandomSource(generator)
    raise InvalidArgumentError(
        f"Unknown random backend: {backend}. Use one of {', '.join(BACKENDS)}."
    )
