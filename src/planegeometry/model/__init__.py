"""
The MODEL layer contains the geometric value types and the trigonometry behind them.
It deals with points, vectors and triangles in the plane; nothing else.
"""
from planegeometry.model.geometry_primitives import Point, Triangle, Vector
from planegeometry.model.geometry_utils import DegenerateGeometryError

__all__ = ["Point", "Vector", "Triangle", "DegenerateGeometryError"]
