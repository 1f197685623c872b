"""Testing utilities for BSTreeLib consumers."""

from .fixtures import TreeTestHelper

__all__ = ['TreeTestHelper']
