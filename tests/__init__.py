"""
Test Package
============

This package contains the tests for the pattern_filters library.

Test modules cover:
- Sampling primitives and random sources
- The base filter interface and the random X% filter
- Pattern container, configuration and logging utilities
- Edge cases and import verification

Usage:
    Run all tests: pytest tests/
    Run specific test: pytest tests/test_random_sampler.py
"""

__all__ = []
