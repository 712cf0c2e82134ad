"""
Abstract base classes for ordered maps.
"""

from bstmap.interfaces.range_iterable import RangeIterable
from bstmap.interfaces.simple_map import SimpleMap

__all__ = ["RangeIterable", "SimpleMap"]
