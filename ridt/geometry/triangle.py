from ridt.geometry.vector import Vector2D
from ridt.geometry.edge import Edge2D, Distance


def _sign(x: float) -> int:
    if x > 0.0:
        return 1
    if x < 0.0:
        return -1
    return 0


class Triangle2D:
    """
    Immutable triangle with corner points a, b, c.

    The orientation is computed once at construction. All membership tests
    (has_vertex, contains_edge, opposite_vertex) compare points by identity.
    """
    __slots__ = ("a", "b", "c", "_ccw")

    def __init__(self, a: Vector2D, b: Vector2D, c: Vector2D):
        self.a = a
        self.b = b
        self.c = c
        self._ccw = self._find_if_oriented_ccw()

    @classmethod
    def from_points(cls, points) -> "Triangle2D":
        a, b, c = (Vector2D.from_any(p) for p in points)
        return cls(a, b, c)

    @property
    def points(self):
        return self.a, self.b, self.c

    def _find_if_oriented_ccw(self) -> bool:
        a11 = self.a.x - self.c.x
        a21 = self.b.x - self.c.x
        a12 = self.a.y - self.c.y
        a22 = self.b.y - self.c.y
        det = a11 * a22 - a12 * a21
        return det > 0.0

    def is_oriented_ccw(self) -> bool:
        return self._ccw

    def contains_point(self, point: Vector2D) -> bool:
        """
        Half-plane test (Ericson, Real-Time Collision Detection, p. 206).
        No tolerance is applied: a zero cross product only agrees with
        another zero, so points on an edge are usually rejected.
        """
        pab = point.sub(self.a).cross(self.b.sub(self.a))
        pbc = point.sub(self.b).cross(self.c.sub(self.b))
        if _sign(pab) != _sign(pbc):
            return False
        pca = point.sub(self.c).cross(self.a.sub(self.c))
        if _sign(pab) != _sign(pca):
            return False
        return True

    def in_circumcircle(self, point: Vector2D) -> bool:
        """
        Tests if point lies strictly inside the circle through a, b and c.

        For a CCW triangle the point is inside when det > 0, for a CW
        triangle when det < 0. Cocircular points (det == 0) are outside.
        """
        a11 = self.a.x - point.x
        a21 = self.b.x - point.x
        a31 = self.c.x - point.x

        a12 = self.a.y - point.y
        a22 = self.b.y - point.y
        a32 = self.c.y - point.y

        a13 = a11 * a11 + a12 * a12
        a23 = a21 * a21 + a22 * a22
        a33 = a31 * a31 + a32 * a32

        det = (a11 * a22 * a33 + a12 * a23 * a31 + a13 * a21 * a32
               - a13 * a22 * a31 - a12 * a21 * a33 - a11 * a23 * a32)

        return det > 0.0 if self._ccw else det < 0.0

    def has_vertex(self, vertex: Vector2D) -> bool:
        return self.a is vertex or self.b is vertex or self.c is vertex

    def contains_edge(self, edge: Edge2D) -> bool:
        return self.has_vertex(edge.a) and self.has_vertex(edge.b)

    def opposite_vertex(self, edge: Edge2D) -> Vector2D:
        if (self.a is edge.a and self.b is edge.b) or (self.a is edge.b and self.b is edge.a):
            return self.c
        if (self.b is edge.a and self.c is edge.b) or (self.b is edge.b and self.c is edge.a):
            return self.a
        if (self.a is edge.a and self.c is edge.b) or (self.a is edge.b and self.c is edge.a):
            return self.b
        raise ValueError(f"Specified edge {edge} is not part of triangle {self}")

    def edges(self):
        return Edge2D(self.a, self.b), Edge2D(self.b, self.c), Edge2D(self.c, self.a)

    def nearest_edge_distance(self, point: Vector2D) -> Distance:
        distances = sorted(e.distance_from_point(point) for e in self.edges())
        return distances[0]

    def area(self) -> float:
        return abs(self.b.sub(self.a).cross(self.c.sub(self.a))) / 2.0

    def __iter__(self):
        return iter((self.a, self.b, self.c))

    def __repr__(self):
        return f"Triangle2D({self.a}, {self.b}, {self.c})"
