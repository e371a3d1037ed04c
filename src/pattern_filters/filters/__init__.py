"""
Pattern Filters
===============

- **RandomSampler**: keeps a random ``X%`` of the features, column-aligned across batches.
"""

from .random_sampler import RandomSampler

__all__ = ["RandomSampler"]
