"""Drawing primitives ("grobs") and grob trees bound to viewports.

Grobs describe shapes in viewport coordinates and emit matplotlib artists when
drawn. A ``GTree`` binds a list of grobs to a ``Viewport``; drawing it on a
page creates the viewport's axes and draws every child into it, clipped to the
viewport when the viewport clips.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple, Union

import numpy as np
from matplotlib.collections import LineCollection, PatchCollection
from matplotlib.patches import PathPatch, Polygon, Rectangle
from matplotlib.path import Path

from genobox.viewport import Viewport, parse_just

if TYPE_CHECKING:
    from matplotlib.artist import Artist
    from matplotlib.axes import Axes

    from genobox.page import Page


@dataclass(frozen=True)
class Gpar:
    """Graphical parameters shared by the primitives of a grob."""

    col: Optional[str] = "black"
    fill: Union[str, Sequence[str], None] = None
    alpha: Optional[float] = None
    lwd: float = 1.0
    lty: str = "solid"
    fontsize: float = 10.0
    fontcolor: str = "black"

    def patch_kwargs(self) -> dict:
        return dict(
            facecolor=self.fill if self.fill is not None else "none",
            edgecolor=self.col if self.col is not None else "none",
            alpha=self.alpha,
            linewidth=self.lwd,
            linestyle=self.lty,
        )

    def line_kwargs(self) -> dict:
        return dict(
            colors=self.col if self.col is not None else "none",
            alpha=self.alpha,
            linewidths=self.lwd,
            linestyles=self.lty,
        )


class Grob:
    """Base class for drawing primitives."""

    gp: Gpar

    def __len__(self) -> int:
        raise NotImplementedError

    def draw(self, ax: "Axes", vp: Viewport) -> List["Artist"]:
        raise NotImplementedError

    @staticmethod
    def _finish(artist, ax: "Axes", vp: Viewport) -> "Artist":
        artist.set_clip_on(vp.clip)
        if isinstance(artist, (PatchCollection, LineCollection)):
            ax.add_collection(artist, autolim=False)
        else:
            ax.add_artist(artist)
        return artist


@dataclass(eq=False)
class RectGrob(Grob):
    """One rectangle per element of ``x``; sizes broadcast against positions."""

    x: np.ndarray
    y: np.ndarray
    width: np.ndarray
    height: np.ndarray
    just: Tuple[float, float] = (0.0, 0.0)
    x_units: str = "native"
    y_units: str = "npc"
    gp: Gpar = field(default_factory=Gpar)

    def __post_init__(self):
        self.x, self.y, self.width, self.height = np.broadcast_arrays(
            np.atleast_1d(np.asarray(self.x, dtype=float)),
            np.atleast_1d(np.asarray(self.y, dtype=float)),
            np.atleast_1d(np.asarray(self.width, dtype=float)),
            np.atleast_1d(np.asarray(self.height, dtype=float)),
        )
        self.just = parse_just(self.just)

    def __len__(self) -> int:
        return len(self.x)

    def draw(self, ax: "Axes", vp: Viewport) -> List["Artist"]:
        x = vp.to_native(self.x, self.x_units, "x")
        y = vp.to_native(self.y, self.y_units, "y")
        w = vp.to_native_size(self.width, self.x_units, "x")
        h = vp.to_native_size(self.height, self.y_units, "y")
        left = x - self.just[0] * w
        bottom = y - self.just[1] * h

        rects = [Rectangle((l, b), wi, hi) for l, b, wi, hi in zip(left, bottom, w, h)]
        return [self._finish(PatchCollection(rects, **self.gp.patch_kwargs()), ax, vp)]


@dataclass(eq=False)
class SegmentsGrob(Grob):
    """Straight line segments from (x0, y0) to (x1, y1)."""

    x0: np.ndarray
    y0: np.ndarray
    x1: np.ndarray
    y1: np.ndarray
    x_units: str = "native"
    y_units: str = "npc"
    gp: Gpar = field(default_factory=Gpar)

    def __post_init__(self):
        self.x0, self.y0, self.x1, self.y1 = np.broadcast_arrays(
            *(np.atleast_1d(np.asarray(v, dtype=float)) for v in (self.x0, self.y0, self.x1, self.y1))
        )

    def __len__(self) -> int:
        return len(self.x0)

    def draw(self, ax: "Axes", vp: Viewport) -> List["Artist"]:
        x0 = vp.to_native(self.x0, self.x_units, "x")
        x1 = vp.to_native(self.x1, self.x_units, "x")
        y0 = vp.to_native(self.y0, self.y_units, "y")
        y1 = vp.to_native(self.y1, self.y_units, "y")
        segments = [[(a, b), (c, d)] for a, b, c, d in zip(x0, y0, x1, y1)]
        return [self._finish(LineCollection(segments, **self.gp.line_kwargs()), ax, vp)]


@dataclass(eq=False)
class PolygonGrob(Grob):
    """Closed polygons, each given as a sequence of (x, y) vertices."""

    polygons: Sequence[np.ndarray]
    x_units: str = "native"
    y_units: str = "npc"
    gp: Gpar = field(default_factory=Gpar)

    def __len__(self) -> int:
        return len(self.polygons)

    def draw(self, ax: "Axes", vp: Viewport) -> List["Artist"]:
        patches = []
        for vertices in self.polygons:
            vertices = np.asarray(vertices, dtype=float)
            xy = np.column_stack([
                vp.to_native(vertices[:, 0], self.x_units, "x"),
                vp.to_native(vertices[:, 1], self.y_units, "y"),
            ])
            patches.append(Polygon(xy, closed=True))
        return [self._finish(PatchCollection(patches, **self.gp.patch_kwargs()), ax, vp)]


@dataclass(eq=False)
class PathGrob(Grob):
    """Arbitrary matplotlib paths expressed in native coordinates."""

    paths: Sequence[Path]
    gp: Gpar = field(default_factory=Gpar)

    def __len__(self) -> int:
        return len(self.paths)

    def draw(self, ax: "Axes", vp: Viewport) -> List["Artist"]:
        patches = [PathPatch(path) for path in self.paths]
        return [self._finish(PatchCollection(patches, **self.gp.patch_kwargs()), ax, vp)]


@dataclass(eq=False)
class TextGrob(Grob):
    """Text labels; ``just`` is applied to every label."""

    labels: Sequence[str]
    x: np.ndarray
    y: np.ndarray
    just: Tuple[float, float] = (0.5, 0.5)
    rot: float = 0.0
    x_units: str = "native"
    y_units: str = "npc"
    gp: Gpar = field(default_factory=Gpar)

    def __post_init__(self):
        self.labels = [str(label) for label in np.atleast_1d(self.labels)]
        self.x, self.y = np.broadcast_arrays(
            np.atleast_1d(np.asarray(self.x, dtype=float)),
            np.atleast_1d(np.asarray(self.y, dtype=float)),
        )
        self.just = parse_just(self.just)

    def __len__(self) -> int:
        return len(self.labels)

    def draw(self, ax: "Axes", vp: Viewport) -> List["Artist"]:
        ha = {0.0: "left", 0.5: "center", 1.0: "right"}.get(self.just[0], "center")
        va = {0.0: "bottom", 0.5: "center", 1.0: "top"}.get(self.just[1], "center")
        x = vp.to_native(self.x, self.x_units, "x")
        y = vp.to_native(self.y, self.y_units, "y")

        artists = []
        for label, xi, yi in zip(self.labels, x, y):
            text = ax.text(
                xi, yi, label,
                ha=ha, va=va, rotation=self.rot,
                fontsize=self.gp.fontsize, color=self.gp.fontcolor, alpha=self.gp.alpha,
            )
            text.set_clip_on(vp.clip)
            artists.append(text)
        return artists


@dataclass(eq=False)
class RasterGrob(Grob):
    """A matrix of values rendered as an image covering ``extent`` (native units)."""

    values: np.ndarray
    extent: Tuple[float, float, float, float]
    cmap: str = "YlOrRd"
    vmin: Optional[float] = None
    vmax: Optional[float] = None
    gp: Gpar = field(default_factory=Gpar)

    def __len__(self) -> int:
        return int(np.asarray(self.values).size)

    def draw(self, ax: "Axes", vp: Viewport) -> List["Artist"]:
        image = ax.imshow(
            np.ma.masked_invalid(np.asarray(self.values, dtype=float)),
            cmap=self.cmap,
            vmin=self.vmin,
            vmax=self.vmax,
            extent=self.extent,
            origin="upper",
            aspect="auto",
            interpolation="nearest",
            alpha=self.gp.alpha,
        )
        image.set_clip_on(vp.clip)
        # imshow resets the limits to the image extent
        ax.set_xlim(*vp.xscale)
        ax.set_ylim(*vp.yscale)
        return [image]


@dataclass(eq=False)
class GTree:
    """A viewport with its child grobs, and the artists they produced."""

    vp: Viewport
    children: List[Grob] = field(default_factory=list)
    artists: List["Artist"] = field(default_factory=list, repr=False)
    ax: Optional["Axes"] = field(default=None, repr=False)

    @property
    def name(self) -> str:
        return self.vp.name

    def draw(self, page: "Page") -> "GTree":
        """Create the viewport on ``page`` and draw every child into it."""
        self.ax = page.push_viewport(self.vp)
        for child in self.children:
            self.artists.extend(child.draw(self.ax, self.vp))
        return self
