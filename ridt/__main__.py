from ridt.draw import draw_triangulation
from ridt.sampling import random_points_in_box
from ridt.triangulation.guibas import compute_delaunay
from ridt.validation import global_test_delaunay


def main():
    points = random_points_in_box(30, 0.0, 0.0, 100.0, 100.0)
    tri = compute_delaunay(points, shuffle=True)

    print("Triangles in final triangulation:", tri.size())
    for t in tri.get_triangles():
        print(t)
    print("Delaunay:", global_test_delaunay(tri, debug=True))
    draw_triangulation(tri, draw_circumcircles=True)


if __name__ == "__main__":
    main()
