import math
import numpy as np
from ridt.geometry.vector import Vector2D


def orientation(p, q, r):
    """
    ToLeft(p, q, r) = | p.x p.y 1 |
                      | q.x q.y 1 |
                      | r.x r.y 1 |

    > 0: r lies left of p->q, = 0: collinear, < 0: r lies right of p->q.
    """
    return (q.x - p.x) * (r.y - p.y) - (q.y - p.y) * (r.x - p.x)


def in_circle_test(p, q, r, d):
    """
    Lifted InCircle determinant, sign-corrected by the orientation of
    p, q, r: the result is > 0 iff d lies inside the circle through p, q, r,
    whichever way the triangle is wound. Returns 0.0 for collinear p, q, r.

    The 4x4 determinant is reduced to 3x3 in coordinates relative to d, so
    the result does not depend on where the points sit in the plane.
    """
    turn = orientation(p, q, r)
    if turn == 0:
        return 0.0
    rows = []
    for v in (p, q, r):
        dx, dy = v.x - d.x, v.y - d.y
        rows.append([dx, dy, dx * dx + dy * dy])
    det = np.linalg.det(np.array(rows))
    return det if turn > 0 else -det


def centroid(points):
    xs = [v.x for v in points]
    ys = [v.y for v in points]
    return Vector2D(sum(xs) / len(xs), sum(ys) / len(ys))


def circumcircle(a, b, c):
    """
    Circle through a, b and c as (center, radius).

    Computed in coordinates relative to a. Raises ValueError when the
    points are collinear.
    """
    bx, by = b.x - a.x, b.y - a.y
    cx, cy = c.x - a.x, c.y - a.y
    d = 2.0 * (bx * cy - by * cx)
    if d == 0.0:
        raise ValueError(f"Points {a}, {b}, {c} are collinear; circumcircle is undefined.")
    b2 = bx * bx + by * by
    c2 = cx * cx + cy * cy
    ux = (cy * b2 - by * c2) / d
    uy = (bx * c2 - cx * b2) / d
    return Vector2D(a.x + ux, a.y + uy), math.hypot(ux, uy)
