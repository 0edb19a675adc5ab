from collections import defaultdict

import numpy as np
from scipy.spatial import ConvexHull, Delaunay

from ridt.geometry.predicates import in_circle_test

# tolerance of the global empty-circle test
DELAUNAY_EPS = 1e-9


def global_test_delaunay(triangulation, eps=DELAUNAY_EPS, debug=False):
    """
    Checks every triangle against every point: no point other than the
    triangle's own corners may lie inside its circumcircle. eps is relative
    to the fourth power of the triangle's extent.
    """
    triangles = triangulation.get_triangles()
    points = triangulation.get_points()

    for triangle in triangles:
        A, B, C = triangle.points
        extent = max(max(A.x, B.x, C.x) - min(A.x, B.x, C.x),
                     max(A.y, B.y, C.y) - min(A.y, B.y, C.y))
        tolerance = eps * extent ** 4
        for point in points:
            if triangle.has_vertex(point):
                continue
            certifi = in_circle_test(A, B, C, point)
            if certifi > tolerance:
                if debug:
                    print("Triangle:", points.index(A), "",
                          points.index(B), "",
                          points.index(C), "are INCLUDE a Point:",
                          points.index(point), certifi)
                return False
    return True


def triangle_area(triangle):
    return triangle.area()


def total_area(triangles):
    return float(sum(t.area() for t in triangles))


def _as_array(points):
    return np.array([[p.x, p.y] for p in points], dtype=float)


def convex_hull_area(points):
    # for 2D input ConvexHull.volume is the enclosed area
    return float(ConvexHull(_as_array(points)).volume)


def convex_hull_size(points):
    return len(ConvexHull(_as_array(points)).vertices)


def expected_triangle_count(points):
    """2n - h - 2 for n points in general position, h of them on the hull."""
    return 2 * len(points) - convex_hull_size(points) - 2


def edge_multiplicity(triangles):
    """Maps each undirected edge (pair of point ids) to the number of triangles using it."""
    counts = defaultdict(int)
    for t in triangles:
        for e in t.edges():
            counts[frozenset((id(e.a), id(e.b)))] += 1
    return counts


def compare_with_scipy(triangulation):
    """True iff the triangulation has the same triangles as scipy.spatial.Delaunay."""
    pts, simplices = triangulation.to_arrays()
    reference = Delaunay(pts)
    ours = {tuple(sorted(s)) for s in simplices.tolist()}
    theirs = {tuple(sorted(s)) for s in reference.simplices.tolist()}
    return ours == theirs
