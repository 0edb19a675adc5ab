import math
from ridt.geometry.vector import Vector2D

# circumradius of the outer triangle in units of the point set's radius
SUPER_TRIANGLE_SCALE = 1e5
# rotation (radians) of the outer triangle's first corner away from +y
SUPER_TRIANGLE_ROTATION = 0.1


def make_outer_triangle(points, scale=SUPER_TRIANGLE_SCALE, rotation=SUPER_TRIANGLE_ROTATION):
    """
    Builds a counterclockwise equilateral triangle that strictly encloses
    every point.

    The triangle is centred on the bounding box centre and its inscribed
    circle has radius scale/2 times half the box diagonal, so it contains
    the box for any scale > 2. The three corners are new Vector2D objects.
    """
    xs = [p.x for p in points]
    ys = [p.y for p in points]
    if not xs:
        raise ValueError("Cannot enclose an empty point set.")
    if scale <= 2.0:
        raise ValueError(f"scale must be > 2, got {scale}")

    minx, maxx = min(xs), max(xs)
    miny, maxy = min(ys), max(ys)
    cx = (minx + maxx) / 2.0
    cy = (miny + maxy) / 2.0
    r = math.hypot(maxx - minx, maxy - miny) / 2.0
    if r == 0.0:
        r = 1.0

    R = scale * r
    corners = []
    for k in range(3):
        phi = math.pi / 2 + rotation + k * 2 * math.pi / 3
        corners.append(Vector2D(cx + R * math.cos(phi), cy + R * math.sin(phi)))
    return tuple(corners)
