import numpy as np
import matplotlib.pyplot as plt

import config

MARKER_SIZE = 1.5


def axis_bounds(*series, pad_frac=0.1, min_pad=1.0):
    """
    (x_min, x_max, y_min, y_max) covering every point in the given Nx2
    arrays, padded so nothing sits on the frame.
    """
    all_p = np.vstack([np.asarray(s, dtype=float).reshape(-1, 2) for s in series])
    lo = all_p.min(axis=0)
    hi = all_p.max(axis=0)
    pad = np.maximum((hi - lo) * pad_frac, min_pad)
    lo, hi = lo - pad, hi + pad
    return lo[0], hi[0], lo[1], hi[1]


def draw_collision_marker(ax, x, y, qualified, size=MARKER_SIZE):
    """Green check mark for a qualified approach angle, red X otherwise."""
    if qualified:
        ax.plot([x - size * 0.5, x - size * 0.2], [y, y - size * 0.3], color='green', linewidth=4)
        ax.plot([x - size * 0.2, x + size * 0.7], [y - size * 0.3, y + size * 0.5], color='green', linewidth=4)
    else:
        ax.plot([x - size, x + size], [y - size, y + size], color='red', linewidth=4)
        ax.plot([x + size, x - size], [y - size, y + size], color='red', linewidth=4)


def plot_engagement(target_traj, interceptor_traj, collision=None, params=None):
    """
    Build the engagement figure:
      left  - both paths in the x/y plane
      right - altitude against time step
    Returns the matplotlib Figure.
    """
    params = params or config.SimParams()
    t_data = np.asarray(target_traj, dtype=float).reshape(-1, 2)
    m_data = np.asarray(interceptor_traj, dtype=float).reshape(-1, 2)

    fig, (ax_xy, ax_alt) = plt.subplots(1, 2, figsize=(14, 9))
    fig.suptitle(f"Projectile Collision Simulation (Stop at <{params.collision_threshold:g}m distance)")

    # 1. Plane view
    ax_xy.plot(t_data[:, 0], t_data[:, 1], 'r-', linewidth=2, label=f'Target ({params.reference_altitude:g}m reference)')
    ax_xy.plot(m_data[:, 0], m_data[:, 1], 'g-', linewidth=2, label='Interceptor (pursuing)')
    ax_xy.plot(t_data[:, 0], t_data[:, 1], 'ro', markersize=3)
    ax_xy.plot(m_data[:, 0], m_data[:, 1], 'go', markersize=3)

    # 2. Altitude vs time step
    t_steps = np.arange(len(t_data))
    m_steps = np.arange(len(m_data))
    ax_alt.plot(t_steps, t_data[:, 1], 'r-', linewidth=2, label='Target')
    ax_alt.plot(m_steps, m_data[:, 1], 'g-', linewidth=2, label='Interceptor')
    ax_alt.plot(t_steps, t_data[:, 1], 'ro', markersize=3)
    ax_alt.plot(m_steps, m_data[:, 1], 'go', markersize=3)

    # 3. Collision marker
    if collision is not None:
        cx, cy = collision.point
        draw_collision_marker(ax_xy, cx, cy, collision.qualified)
        draw_collision_marker(ax_alt, collision.tick, cy, collision.qualified)

    # 4. Axis formatting
    x_min, x_max, y_min, y_max = axis_bounds(t_data, m_data)
    ax_xy.set_xlim(x_min, x_max)
    ax_xy.set_ylim(y_min, y_max)
    ax_xy.set_xlabel('Range X (m)')
    ax_xy.set_ylabel('Height (m)')
    ax_xy.legend()

    ax_alt.set_xlim(0, max(len(t_data), len(m_data)))
    ax_alt.set_ylim(y_min, y_max)
    ax_alt.set_xlabel('Time step')
    ax_alt.set_ylabel('Height (m)')
    ax_alt.legend()

    return fig


def save_engagement(path, target_traj, interceptor_traj, collision=None, params=None, show=False):
    fig = plot_engagement(target_traj, interceptor_traj, collision, params)
    try:
        fig.savefig(path, dpi=100)
        if show:
            plt.show()
    finally:
        plt.close(fig)
    return path
