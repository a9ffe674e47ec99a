"""Core type definitions for objectmeta."""

type Owned[T] = T
"""Type alias indicating a value is a fresh instance owned by the caller.

When you see `Owned[T]` in a return type, nothing else holds a reference to
the returned value. In particular an object created from a blueprint shares
no mutable state with the blueprint or with previously created objects.
"""
