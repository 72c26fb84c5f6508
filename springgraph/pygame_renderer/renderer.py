"""
Pygame Renderer for spring-graph layouts

Pure consumer of the layout read-out: node positions (N, 2) and spring
endpoints (E, 2). World coordinates are screen pixels with y pointing down,
the same convention as a browser canvas, so positions drawn from
[0, width) x [0, height) fill the window.

Usage:
    from springgraph.pygame_renderer import Renderer

    renderer = Renderer(window_width=1000, window_height=700)

    # In render loop:
    canvas = renderer.create_canvas()
    renderer.draw_springs(canvas, system.edge_indices(), system.positions())
    renderer.draw_nodes(canvas, system.positions())
    renderer.draw_info_text(canvas, [("tick 10", renderer.GREY)])
"""

import numpy as np
import pygame
from typing import List, Optional, Tuple


class Renderer:
    """
    Pygame renderer for graph layout visualization.

    All methods work with pygame surfaces and numpy arrays.
    """

    # ========================================================================
    # COLOR CONSTANTS
    # ========================================================================

    WHITE = (255, 255, 255)
    BLACK = (0, 0, 0)
    GREY = (100, 100, 100)

    NODE_FILL = (0x25, 0x25, 0x25)     # #252525
    NODE_OUTLINE = (0x25, 0x25, 0x25)
    SPRING_COLOR = (0, 0, 255)         # Blue

    # ========================================================================
    # INITIALIZATION
    # ========================================================================

    def __init__(
        self,
        window_width: int = 1000,
        window_height: int = 700,
        node_radius: int = 20,
        node_outline: int = 2,
        spring_width: int = 2,
        font_size_small: int = 18,
    ):
        """
        Initialize the renderer.

        Args:
            window_width: Window width in pixels
            window_height: Window height in pixels
            node_radius: Node circle radius
            node_outline: Node outline stroke width
            spring_width: Spring line width
            font_size_small: Font size for info text
        """
        self.window_width = window_width
        self.window_height = window_height

        self.node_radius = node_radius
        self.node_outline = node_outline
        self.spring_width = spring_width

        # Fonts (initialized lazily)
        self._font_small = None
        self._font_size_small = font_size_small

    @property
    def font_small(self):
        """Lazy small font initialization."""
        if self._font_small is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font_small = pygame.font.Font(None, self._font_size_small)
        return self._font_small

    # ========================================================================
    # COORDINATE CONVERSION
    # ========================================================================

    @staticmethod
    def to_screen_array(positions: np.ndarray) -> np.ndarray:
        """Round (N, 2) world positions to integer pixel coordinates."""
        return np.rint(np.asarray(positions, dtype=np.float64).reshape(-1, 2)).astype(np.int32)

    # ========================================================================
    # CANVAS CREATION
    # ========================================================================

    def create_canvas(self, background_color=None) -> pygame.Surface:
        """
        Create a new canvas (pygame Surface) with background color.

        Args:
            background_color: RGB tuple or None for white

        Returns:
            pygame.Surface
        """
        canvas = pygame.Surface((self.window_width, self.window_height))
        canvas.fill(background_color or self.WHITE)
        return canvas

    # ========================================================================
    # SPRING RENDERING
    # ========================================================================

    def draw_springs(
        self,
        canvas: pygame.Surface,
        edge_indices: np.ndarray,
        positions: np.ndarray,
        color=None,
    ):
        """
        Draw one straight line per spring.

        Args:
            canvas: pygame Surface to draw on
            edge_indices: Array of shape (E, 2) with (source, target) node indices
            positions: Array of shape (N, 2) with node positions
            color: Line color (default: blue)
        """
        if edge_indices is None or len(edge_indices) == 0:
            return

        color = color or self.SPRING_COLOR
        edge_indices = np.asarray(edge_indices).reshape(-1, 2)
        screen = self.to_screen_array(positions)

        screen_i = screen[edge_indices[:, 0]]
        screen_j = screen[edge_indices[:, 1]]

        for a, b in zip(screen_i, screen_j):
            pygame.draw.line(canvas, color, tuple(a), tuple(b), self.spring_width)

    # ========================================================================
    # NODE RENDERING
    # ========================================================================

    def draw_nodes(
        self,
        canvas: pygame.Surface,
        positions: np.ndarray,
        fill_color=None,
        outline_color=None,
    ):
        """
        Draw nodes as filled circles with an outline stroke.

        Args:
            canvas: pygame Surface to draw on
            positions: Array of shape (N, 2) with node positions
            fill_color: Node fill color (default: #252525)
            outline_color: Node outline color (default: #252525)
        """
        fill_color = fill_color or self.NODE_FILL
        outline_color = outline_color or self.NODE_OUTLINE

        positions = np.asarray(positions).reshape(-1, 2)
        finite = np.all(np.isfinite(positions), axis=1)

        for pos in self.to_screen_array(positions[finite]):
            center = (int(pos[0]), int(pos[1]))
            pygame.draw.circle(canvas, fill_color, center, self.node_radius)
            pygame.draw.circle(canvas, outline_color, center, self.node_radius, self.node_outline)

    # ========================================================================
    # UI TEXT
    # ========================================================================

    def draw_info_text(
        self,
        canvas: pygame.Surface,
        lines: List[Tuple[str, Tuple[int, int, int]]],
        position: Tuple[int, int] = (10, 10),
        line_spacing: int = 17,
    ):
        """
        Draw multiple lines of info text.

        Args:
            canvas: pygame Surface to draw on
            lines: List of (text, color) tuples
            position: Top-left position
            line_spacing: Vertical spacing between lines
        """
        x, y = position

        for i, (text, color) in enumerate(lines):
            text_surface = self.font_small.render(text, True, color)
            canvas.blit(text_surface, (x, y + i * line_spacing))

    # ========================================================================
    # FRAME
    # ========================================================================

    def render_frame(
        self,
        positions: np.ndarray,
        edge_indices: np.ndarray,
        info_lines: Optional[List[Tuple[str, Tuple[int, int, int]]]] = None,
    ) -> pygame.Surface:
        """Clear, draw springs under nodes, then optional info text."""
        canvas = self.create_canvas()
        self.draw_springs(canvas, edge_indices, positions)
        self.draw_nodes(canvas, positions)
        if info_lines:
            self.draw_info_text(canvas, info_lines)
        return canvas

    @staticmethod
    def to_rgb_array(canvas: pygame.Surface) -> np.ndarray:
        """Pixel array of shape (height, width, 3)."""
        return np.transpose(np.array(pygame.surfarray.pixels3d(canvas)), axes=(1, 0, 2))
