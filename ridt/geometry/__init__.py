from ridt.geometry.vector import Vector2D
from ridt.geometry.edge import Edge2D, Distance
from ridt.geometry.triangle import Triangle2D
from ridt.geometry.predicates import orientation, in_circle_test, centroid, circumcircle
