from ridt.triangulation.bounding import make_outer_triangle, SUPER_TRIANGLE_SCALE, SUPER_TRIANGLE_ROTATION
from ridt.triangulation.guibas import TriangulationGuibas, compute_delaunay
