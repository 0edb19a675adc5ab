from ridt.geometry import Vector2D, Edge2D, Distance, Triangle2D
from ridt.triangulation import TriangulationGuibas, compute_delaunay, make_outer_triangle

__version__ = "0.1.0"
