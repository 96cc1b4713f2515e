"""adminbrowser helper classes, not for direct use."""

from .logadapter import PrefixLogAdapter

__all__ = ["PrefixLogAdapter"]
