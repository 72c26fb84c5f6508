# SPDX-FileCopyrightText: Copyright (c) 2025 NBEL
# SPDX-License-Identifier: Apache-2.0
#
# Static snapshots of a layout with matplotlib

import numpy as np


def save_layout(filepath: str, positions: np.ndarray, edge_indices: np.ndarray,
                width: float = None, height: float = None, title: str = None,
                node_size: float = 60.0):
    """
    Save a picture of the current layout to an image file.

    Springs are drawn as blue segments under #252525 nodes. The y axis is
    inverted so the picture matches the on-screen (y-down) view.

    Args:
        filepath: Output path, format from the extension
        positions: (N, 2) node positions
        edge_indices: (E, 2) spring endpoints
        width: Viewport width, axis limits follow the data when None
        height: Viewport height
        title: Optional figure title
        node_size: Marker area in points^2
    """
    from matplotlib.backends.backend_agg import FigureCanvasAgg
    from matplotlib.collections import LineCollection
    from matplotlib.figure import Figure

    positions = np.asarray(positions, dtype=np.float64).reshape(-1, 2)
    edge_indices = np.asarray(edge_indices, dtype=np.int64).reshape(-1, 2)

    fig = Figure(figsize=(8, 6))
    FigureCanvasAgg(fig)
    ax = fig.add_subplot(1, 1, 1)

    if len(edge_indices) > 0:
        segments = np.stack([positions[edge_indices[:, 0]], positions[edge_indices[:, 1]]], axis=1)
        ax.add_collection(LineCollection(segments, colors="blue", linewidths=1.5, zorder=1))
    if len(positions) > 0:
        ax.scatter(positions[:, 0], positions[:, 1], s=node_size, c="#252525", zorder=2)

    if width is not None and height is not None:
        ax.set_xlim(0, width)
        ax.set_ylim(height, 0)
    else:
        ax.autoscale()
        ax.invert_yaxis()
    ax.set_aspect("equal")
    ax.set_xlabel("X (px)")
    ax.set_ylabel("Y (px)")
    if title:
        ax.set_title(title)

    fig.tight_layout()
    fig.savefig(filepath, dpi=100)
    print(f"Saved layout to: {filepath}")
