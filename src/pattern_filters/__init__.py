"""
Pattern Filters
===============

Feature-reduction filters for pattern-recognition workflows. A filter takes
patterns (named numeric feature vectors) and keeps only part of their
features, either in place or on deep copies.

Core Modules
------------

- **filters**:
  Concrete filters, currently :class:`RandomSampler`, which keeps a
  pseudorandom ``X%`` of the features and keeps batches column-aligned.

- **algorithms**:
  Pure sampling primitives (sample size, index generation, projection).

- **utils**:
  Random source adapters, seeding, logging and configuration loading.
  `get_logger()` configures the logger every module of the package reports to.

- **base_filter**:
  Abstract base class (`BaseFilter`) defining the in-place and copying
  operations every filter exposes.

Usage
-----

.. code-block:: python

  import random
  from pattern_filters import Pattern, RandomSampler

  sampler = RandomSampler(0.25, random.Random(7))
  pattern = Pattern(range(100), name="sample-0")
  reduced = sampler.filter_copy(pattern)   # 25 features, pattern untouched
"""

from . import algorithms, filters, utils
from ._version import __version__
from .base_filter import BaseFilter
from .errors import (
    InvalidArgumentError,
    LengthMismatchError,
    NullReferenceError,
    PatternFilterError,
)
from .filters import RandomSampler
from .pattern import Pattern, PatternLike
from .utils.logging import get_logger

__all__ = [
    "algorithms",
    "filters",
    "utils",
    "BaseFilter",
    "RandomSampler",
    "Pattern",
    "PatternLike",
    "PatternFilterError",
    "InvalidArgumentError",
    "NullReferenceError",
    "LengthMismatchError",
    "get_logger",
]
