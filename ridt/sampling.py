import numpy as np

from ridt.geometry.vector import Vector2D


def random_points_in_triangle(n, A, B, C, seed=42):
    """
    n points uniformly distributed in triangle ABC, as an (n, 2) array.
    """
    rng = np.random.default_rng(seed)
    A, B, C = (np.asarray(v, dtype=float) for v in (A, B, C))
    u = rng.random(n)
    v = rng.random(n)
    # reflect (u, v) back into u + v <= 1
    mask = u + v > 1
    u[mask] = 1 - u[mask]
    v[mask] = 1 - v[mask]
    return A + u[:, None] * (B - A) + v[:, None] * (C - A)


def random_points_in_box(n, xmin=0.0, ymin=0.0, xmax=1.0, ymax=1.0, seed=42):
    rng = np.random.default_rng(seed)
    return np.column_stack((rng.uniform(xmin, xmax, n), rng.uniform(ymin, ymax, n)))


def random_points_in_disc(n, center=(0.0, 0.0), radius=1.0, seed=42):
    rng = np.random.default_rng(seed)
    r = radius * np.sqrt(rng.random(n))
    phi = rng.uniform(0.0, 2 * np.pi, n)
    return np.column_stack((center[0] + r * np.cos(phi), center[1] + r * np.sin(phi)))


def to_vectors(points):
    return [Vector2D.from_any(p) for p in points]


def unique_points(points):
    """
    Drops points whose coordinates repeat an earlier point. The first
    occurrence is kept, order is preserved.
    """
    seen = set()
    result = []
    for p in to_vectors(points):
        key = (p.x, p.y)
        if key in seen:
            continue
        seen.add(key)
        result.append(p)
    return result
