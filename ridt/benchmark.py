import time

import pandas as pd

from ridt.sampling import random_points_in_box
from ridt.triangulation.guibas import compute_delaunay


def benchmark_triangulation(ns, shuffle=True, seed=42, csv_filename="benchmark_results.csv"):
    """
    Times compute_delaunay for every point count in ns, saves the results as
    CSV and returns them as a DataFrame with columns n, triangles, time_s.
    """
    results = []

    for n in ns:
        points = random_points_in_box(n, seed=seed)

        start = time.perf_counter()
        tri = compute_delaunay(points, shuffle, seed=seed)
        end = time.perf_counter()

        elapsed = end - start
        print(f"n={n}: {elapsed:.6f} seconds")
        results.append({"n": n, "triangles": tri.size(), "time_s": elapsed})

    df = pd.DataFrame(results)
    if csv_filename is not None:
        df.to_csv(csv_filename, index=False)
        print(f"Benchmark results saved to {csv_filename}")
    return df


if __name__ == "__main__":
    ns = [10, 50, 100, 250, 500, 1000]
    benchmark_triangulation(ns)
