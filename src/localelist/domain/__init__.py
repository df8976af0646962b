"""Domain layer: the immutable locale list value type.

Everything here is immutable; the only shared mutable state is the
lock-guarded default list cache.
"""
