# SPDX-FileCopyrightText: Copyright (c) 2025 NBEL
# SPDX-License-Identifier: Apache-2.0
#
# 2D spring and integration kernels for graph layouts

import warp as wp


@wp.kernel
def eval_spring_2d(
    x: wp.array(dtype=wp.vec2),
    v: wp.array(dtype=wp.vec2),
    spring_indices: wp.array(dtype=int),
    spring_rest_lengths: wp.array(dtype=float),
    spring_stiffness: wp.array(dtype=float),
    spring_damping: wp.array(dtype=float),
    degenerate_distance: float,
    dt: float,
    dv: wp.array(dtype=wp.vec2),
):
    """
    Accumulate damped spring impulses into both endpoints.

    Each thread processes one spring (i, j). The force on i is

        f_i = ke * (L - rest) * (dir / L) - kd * (v_i - v_j)

    with dir the unit vector from i to j, and j receives -f_i.
    Coincident endpoints use L = degenerate_distance.
    """
    tid = wp.tid()

    i = spring_indices[tid * 2 + 0]
    j = spring_indices[tid * 2 + 1]

    ke = spring_stiffness[tid]
    kd = spring_damping[tid]
    rest = spring_rest_lengths[tid]

    xij = x[j] - x[i]
    vij = v[i] - v[j]

    l = wp.length(xij)
    if l == 0.0:
        l = degenerate_distance

    dir = xij / l

    fs = ke * (l - rest) * (dir / l) - kd * vij
    impulse = fs * dt

    wp.atomic_add(dv, i, impulse)
    wp.atomic_sub(dv, j, impulse)


@wp.kernel
def eval_pair_repulsion_2d(
    x: wp.array(dtype=wp.vec2),
    pair_indices: wp.array(dtype=int),
    strength: float,
    degenerate_distance: float,
    dt: float,
    dv: wp.array(dtype=wp.vec2),
):
    """
    Inverse-square repulsion between every node pair (i < j).

    f_j = strength / L^2 * dir,  f_i = -f_j
    """
    tid = wp.tid()

    i = pair_indices[tid * 2 + 0]
    j = pair_indices[tid * 2 + 1]

    xij = x[j] - x[i]

    l = wp.length(xij)
    if l == 0.0:
        l = degenerate_distance

    dir = xij / l
    impulse = dir * (strength / (l * l)) * dt

    wp.atomic_sub(dv, i, impulse)
    wp.atomic_add(dv, j, impulse)


@wp.kernel
def apply_velocity_deltas_2d(
    v: wp.array(dtype=wp.vec2),
    dv: wp.array(dtype=wp.vec2),
):
    """Add the accumulated deltas once every spring has been evaluated."""
    tid = wp.tid()
    v[tid] = v[tid] + dv[tid]


@wp.kernel
def integrate_nodes_2d(
    x: wp.array(dtype=wp.vec2),
    v: wp.array(dtype=wp.vec2),
    velocity_floor: float,
    dt: float,
):
    """
    Explicit Euler drift with a per-component velocity floor.

    |v_x| <= floor and |v_y| <= floor are snapped to exactly zero
    independently, stored back, then x += v * dt.
    """
    tid = wp.tid()

    vel = v[tid]
    vx = vel[0]
    vy = vel[1]

    if wp.abs(vx) <= velocity_floor:
        vx = 0.0
    if wp.abs(vy) <= velocity_floor:
        vy = 0.0

    vel = wp.vec2(vx, vy)
    v[tid] = vel
    x[tid] = x[tid] + vel * dt


# ============================================================================
# High-level wrapper functions
# ============================================================================

def eval_spring_forces_2d(model, state, dt: float):
    """
    Spring pass: zero the delta buffer, accumulate every spring, then
    apply the deltas to the velocities.

    Positions are not touched. With the optional pairwise term enabled the
    repulsion is accumulated into the same deltas before they are applied.

    Args:
        model: The layout Model containing spring properties
        state: The current State, velocities are updated in place
        dt: Time step scaling the impulses
    """
    if model.node_count == 0:
        return

    config = model.config
    state.node_dv.zero_()

    if model.spring_count > 0:
        wp.launch(
            kernel=eval_spring_2d,
            dim=model.spring_count,
            inputs=[
                state.node_q,
                state.node_qd,
                model.spring_indices,
                model.spring_rest_length,
                model.spring_stiffness,
                model.spring_damping,
                config.degenerate_distance,
                dt,
            ],
            outputs=[state.node_dv],
            device=model.device,
        )

    if model.pair_count > 0 and config.repulsion != 0.0:
        wp.launch(
            kernel=eval_pair_repulsion_2d,
            dim=model.pair_count,
            inputs=[
                state.node_q,
                model.pair_indices,
                config.repulsion,
                config.degenerate_distance,
                dt,
            ],
            outputs=[state.node_dv],
            device=model.device,
        )

    wp.launch(
        kernel=apply_velocity_deltas_2d,
        dim=model.node_count,
        inputs=[state.node_qd, state.node_dv],
        device=model.device,
    )


def integrate_nodes(model, state, dt: float):
    """
    Node pass: floor small velocity components and advance positions.

    Args:
        model: The layout Model
        state: The current State, positions and velocities updated in place
        dt: Time step
    """
    if model.node_count == 0:
        return

    wp.launch(
        kernel=integrate_nodes_2d,
        dim=model.node_count,
        inputs=[
            state.node_q,
            state.node_qd,
            model.config.velocity_floor,
            dt,
        ],
        device=model.device,
    )
