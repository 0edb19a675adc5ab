import math


class Vector2D:
    """
    Immutable 2D point / vector.

    Two Vector2D objects are the same point only if they are the same object;
    equal coordinates do not make two points equal.
    """
    __slots__ = ("_x", "_y")

    def __init__(self, x: float, y: float):
        object.__setattr__(self, "_x", float(x))
        object.__setattr__(self, "_y", float(y))

    @classmethod
    def from_any(cls, p) -> "Vector2D":
        if isinstance(p, Vector2D):
            return p
        return cls(p[0], p[1])

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    def __setattr__(self, name, value):
        raise AttributeError("Vector2D is immutable")

    def sub(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self._x - other.x, self._y - other.y)

    def add(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self._x + other.x, self._y + other.y)

    def mult(self, scalar: float) -> "Vector2D":
        return Vector2D(self._x * scalar, self._y * scalar)

    def dot(self, other: "Vector2D") -> float:
        return self._x * other.x + self._y * other.y

    def cross(self, other: "Vector2D") -> float:
        # z component of the 3D cross product
        return self._x * other.y - self._y * other.x

    def mag(self) -> float:
        return math.hypot(self._x, self._y)

    __add__ = add
    __sub__ = sub
    __mul__ = mult
    __rmul__ = mult

    def __iter__(self):
        yield self._x
        yield self._y

    def __hash__(self):
        return id(self)

    def __eq__(self, other):
        return self is other

    def __repr__(self):
        return f"Vector2D({self._x!r}, {self._y!r})"
