"""Named rectangular drawing regions on a page."""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple, Union

import numpy as np

HJUST = {"left": 0.0, "right": 1.0, "centre": 0.5, "center": 0.5}
VJUST = {"bottom": 0.0, "top": 1.0, "centre": 0.5, "center": 0.5}

Just = Union[str, float, Sequence[Union[str, float]]]


def _just_value(value, table: dict, label: str) -> float:
    if isinstance(value, numbers.Real) and not isinstance(value, bool):
        return float(value)
    if value in table:
        return table[value]
    raise ValueError(f"Invalid {label} justification: {value!r}")


def parse_just(just: Just) -> Tuple[float, float]:
    """
    Convert a justification into numeric (hjust, vjust).

    A single value justifies along its own axis and centres the other, so
    ``"top"`` is ``(0.5, 1)`` and ``"left"`` is ``(0, 0.5)``. With two values
    the first is horizontal and the second vertical; a vertical/horizontal
    pair given the other way around is accepted too.

    Args:
        just: One or two of left, right, centre, center, bottom, top or numbers

    Returns:
        (hjust, vjust) in [0, 1] for the named positions

    Raises:
        ValueError: If a value is not a recognised justification
    """
    if isinstance(just, (str, numbers.Real)):
        if just in ("left", "right"):
            return HJUST[just], 0.5
        if just in ("top", "bottom"):
            return 0.5, VJUST[just]
        value = _just_value(just, HJUST, "horizontal")
        return value, value

    just = list(just)
    if len(just) == 1:
        return parse_just(just[0])
    if len(just) != 2:
        raise ValueError(f"Justification takes one or two values, got {len(just)}")

    first, second = just
    if first in ("top", "bottom") and second in ("left", "right", "centre", "center"):
        first, second = second, first
    return _just_value(first, HJUST, "horizontal"), _just_value(second, VJUST, "vertical")


def viewport_name(prefix: str, current: Iterable[str]) -> str:
    """Next free name for a prefix: ``prefix`` + (names containing it + 1)."""
    count = sum(1 for name in current if prefix in name)
    return f"{prefix}{count + 1}"


@dataclass(frozen=True)
class Viewport:
    """
    A named region placed on the page.

    ``x`` and ``y`` locate the justification point in page units measured
    from the bottom-left corner of the page; ``width`` and ``height`` are in
    page units as well. ``xscale``/``yscale`` give the native coordinate
    range of the region, usually a genomic interval along x.
    """

    x: float
    y: float
    width: float
    height: float
    name: str
    just: Tuple[float, float] = (0.5, 0.5)
    xscale: Tuple[float, float] = (0.0, 1.0)
    yscale: Tuple[float, float] = (0.0, 1.0)
    clip: bool = True

    @classmethod
    def create(cls, x, y, width, height, name, just="centre", xscale=(0, 1), yscale=(0, 1), clip=True):
        return cls(
            x=float(x),
            y=float(y),
            width=float(width),
            height=float(height),
            name=name,
            just=parse_just(just),
            xscale=(float(xscale[0]), float(xscale[1])),
            yscale=(float(yscale[0]), float(yscale[1])),
            clip=bool(clip),
        )

    @property
    def left(self) -> float:
        return self.x - self.just[0] * self.width

    @property
    def bottom(self) -> float:
        return self.y - self.just[1] * self.height

    def bounds(self, page_width: float, page_height: float) -> Tuple[float, float, float, float]:
        """Figure-fraction rectangle ``(left, bottom, width, height)``."""
        return (
            self.left / page_width,
            self.bottom / page_height,
            self.width / page_width,
            self.height / page_height,
        )

    def to_native(self, values, units: str = "native", axis: str = "x") -> np.ndarray:
        """Map ``npc`` or ``native`` coordinates onto the viewport's native scale."""
        values = np.asarray(values, dtype=float)
        if units == "native":
            return values
        if units != "npc":
            raise ValueError(f"Grob coordinates must be 'native' or 'npc', got {units!r}")
        lo, hi = self.xscale if axis == "x" else self.yscale
        return lo + values * (hi - lo)

    def to_native_size(self, values, units: str = "native", axis: str = "x") -> np.ndarray:
        """Like ``to_native`` for extents (widths, heights) rather than positions."""
        values = np.asarray(values, dtype=float)
        if units == "native":
            return values
        if units != "npc":
            raise ValueError(f"Grob sizes must be 'native' or 'npc', got {units!r}")
        lo, hi = self.xscale if axis == "x" else self.yscale
        return values * (hi - lo)
