import logging

import numpy as np

from pattern_filters import Pattern, RandomSampler, get_logger
from pattern_filters.utils.seed import make_random_source

logger = get_logger(level=logging.INFO)

# 1) PATTERNS: three classes, 40 features each
rng = np.random.default_rng(0)
patterns = [Pattern(rng.normal(loc=k, size=40), name=f"class-{k}") for k in range(3)]

# 2) FILTER: keep 25% of the features, same columns for every pattern
sampler = RandomSampler(0.25, make_random_source(seed=42, backend="numpy"))
reduced = sampler.filter_batch_copy(patterns)

for original, small in zip(patterns, reduced):
    logger.info(f"{original.name}: {len(original)} -> {len(small)} features, "
                f"mean {original.get_vector().mean():.3f} -> {small.get_vector().mean():.3f}")

# 3) SINGLE PATTERNS draw their own columns on every call
a = sampler.filter_copy(patterns[0])
b = sampler.filter_copy(patterns[0])
logger.info("independent draws differ: %s", not np.array_equal(a.get_vector(), b.get_vector()))
