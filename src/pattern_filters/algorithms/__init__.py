"""
Pattern Filter Algorithms
=========================

Algorithmic building blocks shared by the filters.

Core Components:
- sampling: Sample-size computation, index generation and projection
"""

from .sampling import *
