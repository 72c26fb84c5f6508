#!/usr/bin/env python3
"""
Demo script for force-directed graph layout
Generates a scale-free graph and lets its springs settle, one update()
and one render per frame.
"""

import argparse
import time

import numpy as np
import warp as wp

from .models import ScaleFreeModel
from .plotting import save_layout
from .sim import SpringConfig
from .spring_system import SpringSystem


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Spring Graph Layout Demo")
    parser.add_argument('--nodes', '-n', type=int, default=20,
                        help='Number of nodes in the generated graph (default: 20)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for topology and placement')
    parser.add_argument('--steps', type=int, default=0,
                        help='Number of ticks, 0 = run until the window is closed')
    parser.add_argument('--fps', type=int, default=60,
                        help='Frame rate cap, 0 = unlimited (default: 60)')
    parser.add_argument('--width', type=int, default=1000,
                        help='Window width in pixels (default: 1000)')
    parser.add_argument('--height', type=int, default=700,
                        help='Window height in pixels (default: 700)')
    parser.add_argument('--stiffness', type=float, default=10.0,
                        help='Spring stiffness (default: 10.0)')
    parser.add_argument('--damping', type=float, default=0.03,
                        help='Spring damping (default: 0.03)')
    parser.add_argument('--rest-length', type=float, default=150.0,
                        help='Spring rest length (default: 150.0)')
    parser.add_argument('--repulsion', type=float, default=0.0,
                        help='All-pairs repulsion strength, 0 = off (default: 0.0)')
    parser.add_argument('--no-render', action='store_true',
                        help='Run without visualization')
    parser.add_argument('--save', type=str, default=None,
                        help='Save a PNG of the final layout to this path')
    parser.add_argument('--profile', action='store_true',
                        help='Print update/render timing every 100 ticks')
    parser.add_argument('--device', type=str, default='cpu',
                        choices=['cpu', 'cuda'], help='Computation device')
    return parser.parse_args(argv)


def build_system(args) -> SpringSystem:
    """Create the layout described by the command-line arguments."""
    config = SpringConfig(
        stiffness=args.stiffness,
        damping=args.damping,
        rest_length=args.rest_length,
        with_pairs=args.repulsion != 0.0,
        repulsion=args.repulsion,
    )
    model = ScaleFreeModel(
        count=args.nodes,
        width=args.width,
        height=args.height,
        config=config,
        seed=args.seed,
        device=args.device,
    )
    return SpringSystem.from_model(model)


def main(argv=None):
    """Run the layout with a caller-owned frame loop."""
    args = parse_args(argv)
    if args.no_render and args.steps <= 0:
        args.steps = 1000

    wp.init()
    system = build_system(args)

    print("=" * 60)
    print("Spring Graph Layout Demo")
    print("=" * 60)
    print(f"Nodes: {system.node_count}")
    print(f"Springs: {system.edge_count}")
    print(f"Spring params: k={args.stiffness}, d={args.damping}, rest={args.rest_length}")
    if args.repulsion != 0.0:
        print(f"Pair repulsion: {args.repulsion} ({system.model.pair_count} pairs)")
    print(f"Device: {args.device}")
    print(f"Visualization: {'Yes' if not args.no_render else 'No'}")
    if not args.no_render:
        print(f"  - Window size: {args.width}×{args.height}")
        print(f"  - FPS: {args.fps if args.fps > 0 else 'Unlimited'}")
    print("=" * 60)

    renderer = None
    window = None
    clock = None
    if not args.no_render:
        import pygame
        from .pygame_renderer import Renderer

        pygame.init()
        window = pygame.display.set_mode((args.width, args.height))
        pygame.display.set_caption("Spring Graph Layout (Warp)")
        clock = pygame.time.Clock()
        renderer = Renderer(window_width=args.width, window_height=args.height)

    update_times = []
    render_times = []
    running = True
    step = 0

    try:
        while running and (args.steps <= 0 or step < args.steps):
            t0 = time.perf_counter()
            system.update()
            positions = system.positions()
            t1 = time.perf_counter()
            update_times.append((t1 - t0) * 1000)

            if renderer is not None:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False

                t2 = time.perf_counter()
                canvas = renderer.render_frame(
                    positions,
                    system.edge_indices(),
                    info_lines=[(f"tick {system.tick_count}", renderer.GREY)],
                )
                window.blit(canvas, canvas.get_rect())
                pygame.display.flip()
                render_times.append((time.perf_counter() - t2) * 1000)

                clock.tick(args.fps)

            step += 1

            if args.profile and step % 100 == 0:
                avg_update = np.mean(update_times)
                avg_render = np.mean(render_times) if render_times else 0.0
                speed = np.abs(system.velocities()).sum()
                print(f"Tick {step} | |v| sum: {speed:.4f}")
                print(f"  ⏱️  Update: {avg_update:.3f}ms | Render: {avg_render:.3f}ms")
                update_times = []
                render_times = []
    except KeyboardInterrupt:
        pass
    finally:
        if renderer is not None:
            pygame.display.quit()
            pygame.quit()

    print("\n" + "=" * 60)
    print(f"Layout stopped after {system.tick_count} ticks")
    print("=" * 60)

    if args.save:
        save_layout(args.save, system.positions(), system.edge_indices(),
                    width=args.width, height=args.height,
                    title=f"{system.node_count} nodes, tick {system.tick_count}")
    return system


if __name__ == "__main__":
    main()
