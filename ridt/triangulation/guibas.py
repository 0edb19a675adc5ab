import random
import warnings
import numpy as np

from ridt.geometry.vector import Vector2D
from ridt.geometry.edge import Edge2D
from ridt.geometry.triangle import Triangle2D
from ridt.triangulation.bounding import make_outer_triangle


class TriangulationGuibas:
    """
    Randomized incremental Delaunay triangulation after

        L. J. Guibas, D. E. Knuth, and M. Sharir, "Randomized incremental
        construction of Delaunay and Voronoi diagrams", Algorithmica 7,
        pp. 381-413 (1992).

    The triangulation is kept as a plain list of Triangle2D ("triangle soup").
    Point location and neighbour lookup scan the whole list.
    """

    def __init__(self, points, shuffle=False, *, seed=None,
                 bounding_triangle=make_outer_triangle,
                 check_duplicates=True, debug=False):
        if points is None:
            raise ValueError("Point set must contain at least 3 points.")
        points = [Vector2D.from_any(p) for p in points]
        if len(points) < 3:
            raise ValueError("Point set must contain at least 3 points.")
        if check_duplicates:
            self._check_duplicates(points)

        self.points = points
        if shuffle:
            random.Random(seed).shuffle(self.points)
        self.debug = debug
        self.outer_triangle = Triangle2D(*bounding_triangle(self.points))
        self.triangles = []
        self.triangulate()

    @staticmethod
    def _check_duplicates(points):
        seen = {}
        for i, p in enumerate(points):
            key = (p.x, p.y)
            if key in seen:
                raise ValueError(
                    f"Points {seen[key]} and {i} coincide at {p}; "
                    f"remove duplicates first (see ridt.sampling.unique_points).")
            seen[key] = i

    # -----------------------------------------------------------------------------

    def size(self) -> int:
        return len(self.triangles)

    def __len__(self):
        return len(self.triangles)

    def get_triangles(self):
        return tuple(self.triangles)

    def get_points(self):
        return self.points

    def to_arrays(self):
        """
        Returns (points, simplices) laid out like scipy.spatial.Delaunay:
        an (n, 2) float array and an (m, 3) int array of row indices into it.
        """
        index = {id(p): i for i, p in enumerate(self.points)}
        pts = np.array([[p.x, p.y] for p in self.points], dtype=float)
        simplices = np.array([[index[id(v)] for v in t.points] for t in self.triangles],
                             dtype=int).reshape(-1, 3)
        return pts, simplices

    # -----------------------------------------------------------------------------

    def triangulate(self):
        self.triangles.append(self.outer_triangle)

        for pnt in self.points:
            self.insert_point(pnt)

        # remove every triangle touching a corner of the outer triangle
        for v in self.outer_triangle.points:
            self.remove_triangles_using(v)

        if not self.triangles:
            warnings.warn("Triangulation is empty; the input points are probably collinear.")

    def insert_point(self, pnt: Vector2D):
        triangle = self.find_containing_triangle(pnt)
        if triangle is None:
            # pnt is on an edge (or missed by rounding): split the two
            # triangles sharing the nearest edge into four
            self._insert_on_edge(pnt)
        else:
            self._insert_in_triangle(triangle, pnt)

    def _insert_in_triangle(self, triangle: Triangle2D, pnt: Vector2D):
        a, b, c = triangle.points
        self.triangles.remove(triangle)

        triangle1 = Triangle2D(a, b, pnt)
        triangle2 = Triangle2D(b, c, pnt)
        triangle3 = Triangle2D(c, a, pnt)
        self.triangles.extend((triangle1, triangle2, triangle3))
        if self.debug:
            print("split", triangle, "at", pnt)

        self.legalize_edge(triangle1, Edge2D(a, b), pnt)
        self.legalize_edge(triangle2, Edge2D(b, c), pnt)
        self.legalize_edge(triangle3, Edge2D(c, a), pnt)

    def _insert_on_edge(self, pnt: Vector2D):
        edge = self.find_nearest_edge(pnt)

        tr1 = self.find_one_triangle_sharing(edge)
        tr2 = self.find_neighbour(tr1, edge)
        if tr2 is None:
            raise RuntimeError(f"Point {pnt} lies outside the outer triangle {self.outer_triangle}")

        none_edge_vertex1 = tr1.opposite_vertex(edge)
        none_edge_vertex2 = tr2.opposite_vertex(edge)

        self.triangles.remove(tr1)
        self.triangles.remove(tr2)

        triangle1 = Triangle2D(edge.a, none_edge_vertex1, pnt)
        triangle2 = Triangle2D(edge.b, none_edge_vertex1, pnt)
        triangle3 = Triangle2D(edge.a, none_edge_vertex2, pnt)
        triangle4 = Triangle2D(edge.b, none_edge_vertex2, pnt)
        self.triangles.extend((triangle1, triangle2, triangle3, triangle4))
        if self.debug:
            print("split edge", edge, "at", pnt)

        self.legalize_edge(triangle1, Edge2D(edge.a, none_edge_vertex1), pnt)
        self.legalize_edge(triangle2, Edge2D(edge.b, none_edge_vertex1), pnt)
        self.legalize_edge(triangle3, Edge2D(edge.a, none_edge_vertex2), pnt)
        self.legalize_edge(triangle4, Edge2D(edge.b, none_edge_vertex2), pnt)

    def legalize_edge(self, triangle: Triangle2D, edge: Edge2D, new_vertex: Vector2D):
        """
        Flips edge (and, transitively, the edges uncovered by each flip)
        until every edge opposite new_vertex is locally Delaunay.

        Uses an explicit stack; edges are visited in the same depth-first
        order as the recursive formulation.
        """
        stack = [(triangle, edge)]
        while stack:
            triangle, edge = stack.pop()
            neighbour = self.find_neighbour(triangle, edge)
            if neighbour is None or not neighbour.in_circumcircle(new_vertex):
                continue

            self.triangles.remove(triangle)
            self.triangles.remove(neighbour)

            none_edge_vertex = neighbour.opposite_vertex(edge)

            triangle1 = Triangle2D(none_edge_vertex, edge.a, new_vertex)
            triangle2 = Triangle2D(none_edge_vertex, edge.b, new_vertex)
            self.triangles.append(triangle1)
            self.triangles.append(triangle2)
            if self.debug:
                print("flip edge:", edge.a, edge.b, "instead by", none_edge_vertex, new_vertex)

            stack.append((triangle2, Edge2D(none_edge_vertex, edge.b)))
            stack.append((triangle1, Edge2D(none_edge_vertex, edge.a)))

    # triangle-related methods ---------------------------

    def find_containing_triangle(self, point: Vector2D):
        for triangle in self.triangles:
            if triangle.contains_point(point):
                return triangle
        return None

    def find_neighbour(self, tri1: Triangle2D, edge: Edge2D):
        for tri2 in self.triangles:
            if tri2 is not tri1 and tri2.contains_edge(edge):
                return tri2
        return None

    def find_one_triangle_sharing(self, edge: Edge2D):
        for triangle in self.triangles:
            if triangle.contains_edge(edge):
                return triangle
        return None

    def find_nearest_edge(self, point: Vector2D) -> Edge2D:
        min_edge = None
        min_dist = float("inf")
        for tri in self.triangles:
            ed = tri.nearest_edge_distance(point)
            if ed.distance < min_dist:
                min_dist = ed.distance
                min_edge = ed.edge
        return min_edge

    def remove_triangles_using(self, point: Vector2D):
        self.triangles = [t for t in self.triangles if not t.has_vertex(point)]

    def __repr__(self):
        return f"TriangulationGuibas(points={len(self.points)}, triangles={len(self.triangles)})"


def compute_delaunay(points, shuffle=False, **kwargs) -> TriangulationGuibas:
    return TriangulationGuibas(points, shuffle, **kwargs)
