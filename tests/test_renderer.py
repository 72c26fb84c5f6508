"""
Tests for the pygame Renderer (headless, draws to off-screen surfaces)

Run with pytest or directly:
    python tests/test_renderer.py
"""

import os
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import numpy as np
import pygame

from springgraph import SpringSystem
from springgraph.pygame_renderer import Renderer


def pixel(frame, x, y):
    return tuple(int(c) for c in frame[y, x])


def test_frame_shape_and_background():
    renderer = Renderer(window_width=120, window_height=80)
    canvas = renderer.render_frame(np.zeros((0, 2)), np.zeros((0, 2), dtype=np.int32))
    frame = renderer.to_rgb_array(canvas)

    assert frame.shape == (80, 120, 3)
    assert np.all(frame == 255)


def test_nodes_and_springs_drawn():
    """Springs are blue lines, nodes #252525 circles on top"""
    print("Test: nodes and springs... ", end="")
    renderer = Renderer(window_width=200, window_height=100, node_radius=10)
    positions = np.array([[30.0, 50.0], [170.0, 50.0]], dtype=np.float32)
    edges = np.array([[0, 1]], dtype=np.int32)

    frame = renderer.to_rgb_array(renderer.render_frame(positions, edges))

    assert pixel(frame, 30, 50) == Renderer.NODE_FILL
    assert pixel(frame, 170, 50) == Renderer.NODE_FILL
    assert pixel(frame, 100, 50) == Renderer.SPRING_COLOR
    assert pixel(frame, 100, 10) == Renderer.WHITE
    print("✓ PASSED")


def test_non_finite_nodes_skipped():
    renderer = Renderer(window_width=50, window_height=50, node_radius=5)
    canvas = renderer.create_canvas()
    renderer.draw_nodes(canvas, np.array([[np.nan, 10.0], [25.0, 25.0]]))
    frame = renderer.to_rgb_array(canvas)

    assert pixel(frame, 25, 25) == Renderer.NODE_FILL


def test_info_text():
    renderer = Renderer(window_width=200, window_height=60)
    canvas = renderer.create_canvas()
    renderer.draw_info_text(canvas, [("tick 1", Renderer.BLACK)])
    frame = renderer.to_rgb_array(canvas)

    # Some pixels in the text area are no longer white
    assert np.any(frame[10:27, 10:80] != 255)


def test_render_from_system():
    """The renderer only needs the layout read-out"""
    print("Test: render from SpringSystem... ", end="")
    nodes = [{"id": "a"}, {"id": "b"}, {"id": "c"}]
    edges = [{"source": "a", "target": "b"}, {"source": "b", "target": "c"}]
    system = SpringSystem(nodes, edges, width=300, height=200, seed=2, device="cpu")
    system.update()

    renderer = Renderer(window_width=300, window_height=200)
    canvas = renderer.render_frame(system.positions(), system.edge_indices())
    frame = renderer.to_rgb_array(canvas)
    assert frame.shape == (200, 300, 3)
    print("✓ PASSED")


def main():
    """Run all tests"""
    print("=" * 60)
    print("Running Renderer Tests")
    print("=" * 60)

    pygame.init()
    test_frame_shape_and_background()
    test_nodes_and_springs_drawn()
    test_non_finite_nodes_skipped()
    test_info_text()
    test_render_from_system()
    pygame.quit()

    print("=" * 60)
    print("✓ All tests passed!")
    print("=" * 60)


if __name__ == "__main__":
    main()
