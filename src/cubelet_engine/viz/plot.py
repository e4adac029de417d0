from __future__ import annotations

from collections.abc import Sequence

import matplotlib.pyplot as plt

from cubelet_engine.core.interpolator import cell_positions
from cubelet_engine.core.labels import CELL_INDEX, CELL_SPACING


def plot_cells(
    seq: Sequence[str],
    t: float = 1.0,
    *,
    ax=None,
    title: str | None = None,
    spacing: float = CELL_SPACING,
):
    """3D scatter of the 27 cell centres at progress t, colored by original label."""
    if ax is None:
        fig = plt.figure()
        ax = fig.add_subplot(111, projection="3d")

    positions = cell_positions(seq, t, spacing=spacing)
    labels = list(positions)
    xs = [positions[c][0] for c in labels]
    ys = [positions[c][1] for c in labels]
    zs = [positions[c][2] for c in labels]
    colors = [CELL_INDEX[c] for c in labels]

    sc = ax.scatter(xs, ys, zs, c=colors, cmap="viridis", s=60)
    plt.colorbar(sc, ax=ax, shrink=0.7, pad=0.1)

    lim = 1.6 * spacing
    ax.set_xlim(-lim, lim)
    ax.set_ylim(-lim, lim)
    ax.set_zlim(-lim, lim)
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.set_zlabel("z")
    ax.set_title(title or f"{' '.join(seq) or '(empty)'}  t={t:.2f}")
    ax.set_box_aspect((1, 1, 1))
    return ax
