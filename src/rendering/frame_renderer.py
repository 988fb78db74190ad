"""Draws one frame of the rotating tesseract."""
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from config.render_config import RenderConfig
from geometry.hypercube import EDGES, VERTICES, Edge, Vertex4D
from geometry.projection import project_to_2d, project_to_3d, to_screen
from geometry.rotation import rotate_vertex
from rendering.depth_sort import mean_depth, sort_edges
from rendering.surface import DrawingSurface


@dataclass(frozen=True)
class ProjectedVertex:
    x: float
    y: float
    depth: float


class FrameRenderer:
    """Rotates, projects, depth-sorts and draws the hypercube.

    Edges are stroked far-to-near so nearer edges cover farther ones; vertices
    are drawn afterwards as filled discs.
    """

    def __init__(self, config: Optional[RenderConfig] = None,
                 vertices: Sequence[Vertex4D] = VERTICES,
                 edges: Sequence[Edge] = EDGES) -> None:
        self.config = config if config is not None else RenderConfig()
        self.config.validate()
        self.vertices = vertices
        self.edges = edges

    def edge_width(self, depth: float) -> float:
        c = self.config
        return max(0.0, c.thickness_base + (depth + c.depth_offset) * c.thickness_depth_factor)

    def vertex_radius(self, depth: float) -> float:
        c = self.config
        return max(c.radius_min, c.radius_base + (depth + c.depth_offset) * c.radius_depth_factor)

    def project_vertices(self, phase: float, size: Tuple[int, int]) -> List[ProjectedVertex]:
        """Rotate every base vertex by ``phase`` and map it to screen pixels."""
        width, height = size
        projected = []
        for vertex in self.vertices:
            v4 = rotate_vertex(vertex, phase)
            x, y, depth = project_to_2d(project_to_3d(v4, self.config.focal_w), self.config.focal_z)
            screen_x, screen_y = to_screen(x, y, width, height, self.config.screen_scale)
            projected.append(ProjectedVertex(screen_x, screen_y, depth))
        return projected

    def render(self, surface: DrawingSurface, phase: float) -> List[ProjectedVertex]:
        """Draw a complete frame and return the projected vertices."""
        surface.resize_to_display_size()
        surface.clear(self.config.background)

        projected = self.project_vertices(phase, surface.get_size())
        depths = [p.depth for p in projected]

        for edge in sort_edges(self.edges, depths):
            a, b = edge
            depth = mean_depth(edge, depths)
            color = self.config.near_color if depth > 0 else self.config.far_color
            surface.draw_line((projected[a].x, projected[a].y), (projected[b].x, projected[b].y),
                              self.edge_width(depth), color)

        for p in projected:
            surface.draw_disc((p.x, p.y), self.vertex_radius(p.depth), self.config.near_color)

        return projected
