"""Lengths and angles of points, vectors and triangles in the plane."""
from importlib.metadata import version, PackageNotFoundError

from planegeometry.logging_config import install_null_handler
from planegeometry.model import DegenerateGeometryError, Point, Triangle, Vector

try:
    __version__ = version("planegeometry")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

install_null_handler()

__all__ = ["Point", "Vector", "Triangle", "DegenerateGeometryError", "__version__"]
