"""
Utilities
=========

- random_source: Uniform integer sources and generator adapters
- seed: Global seeding and seeded random sources
- logging: Logger setup
- config_loader: YAML / JSON / TOML configuration and filter construction
"""

from .logging import get_logger

__all__ = ["get_logger"]
