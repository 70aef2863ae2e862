"""
Vertex module.

Public API:
    Vertex       - numeric vector with a row/column orientation
    Orientation  - ROW | COLUMN
"""

from pyslal.vertex.vertex import Orientation, Vertex

__all__ = [
    "Orientation",
    "Vertex",
]
