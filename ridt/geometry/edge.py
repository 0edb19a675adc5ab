from ridt.geometry.vector import Vector2D


class Distance:
    """Distance of a point to an edge; instances order by distance."""
    __slots__ = ("edge", "distance")

    def __init__(self, edge: "Edge2D", distance: float):
        self.edge = edge
        self.distance = distance

    def get_edge(self) -> "Edge2D":
        return self.edge

    def get_distance(self) -> float:
        return self.distance

    def __lt__(self, other):
        return self.distance < other.distance

    def __repr__(self):
        return f"Distance({self.edge}, {self.distance:.4f})"


class Edge2D:
    """Immutable segment between the points a and b."""
    __slots__ = ("a", "b")

    def __init__(self, a: Vector2D, b: Vector2D):
        self.a = a
        self.b = b

    def closest_point_on_segment(self, point: Vector2D) -> Vector2D:
        ab = self.b.sub(self.a)
        denom = ab.dot(ab)
        if denom == 0.0:
            # a and b coincide
            return self.a
        t = point.sub(self.a).dot(ab) / denom
        if t < 0.0:
            t = 0.0
        elif t > 1.0:
            t = 1.0
        return self.a.add(ab.mult(t))

    def min_distance(self, point: Vector2D) -> float:
        return self.closest_point_on_segment(point).sub(point).mag()

    def distance_from_point(self, point: Vector2D) -> Distance:
        return Distance(self, self.min_distance(point))

    def __repr__(self):
        return f"Edge2D({self.a}, {self.b})"
