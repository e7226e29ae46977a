"""Recursive directory traversal with pruning, filtering and partial-failure tolerance.

This module provides the TreeWalker class, which enumerates the regular files beneath a
root directory while consulting exclusion rules for pruning and an include predicate for
emission.
"""
