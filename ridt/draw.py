import matplotlib.pyplot as plt
from matplotlib.lines import Line2D
from matplotlib.patches import Circle

from ridt.geometry.predicates import circumcircle


def draw_triangulation(triangulation, ax=None, show=True,
                       draw_vertices=True,
                       draw_circumcircles=False,
                       draw_outer=False,
                       title="Delaunay Triangulation (Randomized Incremental)"):
    """
    Plots the triangles of a TriangulationGuibas and returns the axes.

    Edges are drawn at zorder 1, circumcircles at 0 and vertices at 2.
    With draw_outer the outer (super) triangle is outlined as well.
    """
    if ax is None:
        plt.figure()
        ax = plt.gca()

    cmap = plt.get_cmap('tab10')
    face_color = cmap(2)
    vertex_color = cmap(0)
    circle_color = cmap(1)

    for triangle in triangulation.get_triangles():
        verts = list(triangle.points) + [triangle.a]
        ax.plot([v.x for v in verts], [v.y for v in verts],
                color=face_color, linewidth=1.5, zorder=1)
        if draw_circumcircles:
            center, radius = circumcircle(*triangle.points)
            ax.add_patch(Circle((center.x, center.y), radius, fill=False,
                                color=circle_color, linewidth=0.5, alpha=0.5, zorder=0))

    if draw_vertices:
        points = triangulation.get_points()
        ax.plot([p.x for p in points], [p.y for p in points],
                'o', color=vertex_color, markersize=3, zorder=2)

    if draw_outer:
        outer = list(triangulation.outer_triangle.points)
        outer.append(outer[0])
        ax.plot([v.x for v in outer], [v.y for v in outer], '--', color='gray', zorder=1)

    ax.set_aspect('equal', adjustable='box')
    ax.set_title(title)

    legend_handles = [Line2D([0], [0], color=face_color, linewidth=2, label='Triangle edge')]
    if draw_vertices:
        legend_handles.append(
            Line2D([0], [0], marker='o', color=vertex_color, linestyle='None', label='Vertex'))
    if draw_circumcircles:
        legend_handles.append(Line2D([0], [0], color=circle_color, label='Circumcircle'))
    ax.legend(handles=legend_handles, loc='best')

    if show:
        plt.show()
    return ax
