"""
Matplotlib previews of a truncated icosahedron and its flattened faces.
"""

from __future__ import annotations

import math
from pathlib import Path
from typing import Sequence

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
from matplotlib import patches
from mpl_toolkits.mplot3d.art3d import Poly3DCollection

from ..geometry.projection import ProjectedFace
from ..geometry.truncation import Face, FaceKind

FACE_COLORS = {FaceKind.PENTAGON: "#222222", FaceKind.HEXAGON: "#f4f4f4"}


def _ensure_parent(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def render_preview(
    faces: Sequence[Face],
    flats: Sequence[ProjectedFace],
    png_path: Path,
    title: str = "Truncated icosahedron",
    columns: int = 8,
) -> None:
    """Solid on the left, every projected face in its unit box on the right."""
    _ensure_parent(png_path)
    rows = math.ceil(len(flats) / columns)
    fig = plt.figure(figsize=(16, 8))
    grid = fig.add_gridspec(rows, columns * 2)

    ax = fig.add_subplot(grid[:, :columns], projection="3d")
    poly = Poly3DCollection(
        [f.verts for f in faces],
        facecolors=[FACE_COLORS[f.kind] for f in faces],
        edgecolors="k",
        linewidths=0.6,
        alpha=0.9,
    )
    ax.add_collection3d(poly)
    for setter in (ax.set_xlim, ax.set_ylim, ax.set_zlim):
        setter(-1.0, 1.0)
    ax.set_box_aspect((1, 1, 1))
    ax.set_title(title)
    ax.axis("off")

    for idx, (face, flat) in enumerate(zip(faces, flats)):
        r, c = divmod(idx, columns)
        sub = fig.add_subplot(grid[r, columns + c])
        sub.add_patch(
            patches.Polygon(
                flat.points01,
                closed=True,
                facecolor=FACE_COLORS[face.kind],
                edgecolor="black",
                linewidth=0.5,
            )
        )
        sub.set_xlim(0.0, 1.0)
        sub.set_ylim(0.0, 1.0)
        sub.set_aspect(flat.height / flat.width if flat.width else 1.0)
        sub.set_title(f"{face.kind.value} {face.source}", fontsize=6)
        sub.axis("off")

    fig.savefig(png_path, dpi=220)
    plt.close(fig)
