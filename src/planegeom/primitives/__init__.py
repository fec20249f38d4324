"""
Lines and circles.
"""

from .line import Line
from .circle import Circle, PointPair, LinePair, incentre, circumcentre

__all__ = [
    'Line',
    'Circle',
    'PointPair',
    'LinePair',
    'incentre',
    'circumcentre',
]
