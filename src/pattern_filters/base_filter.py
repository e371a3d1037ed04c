r"""
Pattern Filter Base Interface
=============================

Overview
--------

This module defines the abstract base class for every pattern filter. A filter
reduces the feature vectors of patterns, either in place or on deep copies, one
pattern at a time or over a batch that must stay column-aligned.

Key Concepts
^^^^^^^^^^^^

- **In-place vs. copy**:
  ``filter`` and ``filter_batch`` replace the vectors of the given patterns;
  ``filter_copy`` and ``filter_batch_copy`` clone first and leave the inputs untouched.

- **Batch symmetry**:
  ``filter_batch`` must reduce every pattern of the batch the same way, so position
  ``i`` of every output vector comes from the same source column.

- **Callable Filters**:
  ``filter(x)`` style usage through ``__call__`` which never mutates its argument.
"""

from abc import ABC, abstractmethod
from typing import List, Sequence

from .errors import NullReferenceError
from .pattern import PatternLike

__all__ = ["BaseFilter"]


class BaseFilter(ABC):
    r"""
    BaseFilter: Abstract Interface for Pattern Filters

    Subclasses implement the two in-place operations; the copying variants are
    derived from them by cloning.
    """

    @abstractmethod
    def filter(self, pattern: PatternLike) -> None:
        r"""
        Filter the vector of ``pattern`` in place.

        :param PatternLike pattern: Pattern whose vector is replaced.
        """
        pass

    @abstractmethod
    def filter_batch(self, patterns: Sequence[PatternLike]) -> None:
        r"""
        Filter every pattern of ``patterns`` in place, symmetrically.

        :param Sequence[PatternLike] patterns: Non-empty batch of equal-length patterns.
        """
        pass

    def filter_copy(self, pattern: PatternLike) -> PatternLike:
        r"""
        Filter a deep copy of ``pattern``; the original is left untouched.

        :param PatternLike pattern: Pattern to copy and filter.
        :return PatternLike: The filtered clone.
        """
        if pattern is None:
            raise NullReferenceError("Pattern must not be None.")
        clone = pattern.clone()
        self.filter(clone)
        return clone

    def filter_batch_copy(self, patterns: Sequence[PatternLike]) -> List[PatternLike]:
        r"""
        Filter deep copies of ``patterns``; the list and its elements are untouched.

        :param Sequence[PatternLike] patterns: Batch to copy and filter.
        :return List[PatternLike]: The filtered clones, in input order.
        """
        if patterns is None:
            raise NullReferenceError("Pattern batch must not be None.")
        # Clone the whole batch before filtering so every copy shares the same positions
        copies = [None if pattern is None else pattern.clone() for pattern in patterns]
        self.filter_batch(copies)
        return copies

    def __call__(self, patterns):
        r"""
        Callable interface for filters.

        A list or tuple is treated as a batch, anything else as a single pattern.
        Inputs are never mutated.
        """
        if isinstance(patterns, (list, tuple)):
            return self.filter_batch_copy(patterns)
        return self.filter_copy(patterns)
