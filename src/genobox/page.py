"""The page: a fixed-size matplotlib figure that plots are placed onto.

Page coordinates are given in physical units with the origin at the top-left
corner, so ``y=0.5`` means half an inch below the top edge. Viewports are
matplotlib axes created at those coordinates. One page at a time is
"current"; every public function also accepts an explicit ``page``.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

import numpy as np
from matplotlib.figure import Figure
from matplotlib.patches import Rectangle

from genobox.units import Unit, as_unit, normalize_units
from genobox.utils.config import DEFAULT_UNITS
from genobox.viewport import Viewport

logger = logging.getLogger(__name__)

GUIDES_LABEL = "page_guides"

_current_page: Optional["Page"] = None


class Page:
    """A drawing page backed by a matplotlib figure."""

    def __init__(
        self,
        width: Unit,
        height: Unit,
        default_units: str = DEFAULT_UNITS,
        xgrid: float = 0.5,
        ygrid: float = 0.5,
        showguides: bool = True,
    ):
        units = normalize_units(default_units)
        if units in ("npc", "native"):
            raise ValueError(f"Page units must be physical, got '{units}'.")

        self.units = units
        self.width = width.convert(units).value
        self.height = height.convert(units).value
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Page width and height must be positive.")

        self.figure = Figure(figsize=(width.inches(), height.inches()))
        self._viewports: Dict[str, Viewport] = {}
        self._axes = {}
        self._guides = self._draw_guides(xgrid, ygrid)
        self.set_guides_visible(showguides)

    def __repr__(self) -> str:
        return f"Page({self.width:g}{self.units} x {self.height:g}{self.units}, {len(self._viewports)} viewports)"

    def _draw_guides(self, xgrid: float, ygrid: float):
        ax = self.figure.add_axes((0, 0, 1, 1), label=GUIDES_LABEL, zorder=-10)
        ax.set_xlim(0, self.width)
        ax.set_ylim(self.height, 0)
        ax.set_axis_off()

        guide_kw = dict(color="#D1D1D1", linewidth=0.5, linestyle="--")
        if xgrid and xgrid > 0:
            for xpos in np.arange(xgrid, self.width, xgrid):
                ax.axvline(xpos, **guide_kw)
        if ygrid and ygrid > 0:
            for ypos in np.arange(ygrid, self.height, ygrid):
                ax.axhline(ypos, **guide_kw)
        ax.add_patch(self._border())
        return ax

    def _border(self):
        return Rectangle((0, 0), self.width, self.height, fill=False, edgecolor="#D1D1D1", linewidth=1)

    @property
    def guides_visible(self) -> bool:
        return self._guides.get_visible()

    def set_guides_visible(self, visible: bool) -> None:
        self._guides.set_visible(visible)

    def current_viewports(self) -> List[str]:
        """Names of the viewports drawn on this page, in creation order."""
        return list(self._viewports)

    def get_axes(self, name: str):
        return self._axes[name]

    def convert(
        self,
        x: Optional[Unit] = None,
        y: Optional[Unit] = None,
        width: Optional[Unit] = None,
        height: Optional[Unit] = None,
    ) -> Dict[str, Optional[float]]:
        """
        Convert placement units to page units.

        ``y`` is flipped so that the result is measured from the bottom edge,
        which is what viewports use.

        Args:
            x: Horizontal position from the left edge
            y: Vertical position from the top edge
            width: Width of the object
            height: Height of the object

        Returns:
            Dictionary with x, y, width, height as floats (None where not given)
        """
        page_width = Unit(self.width, self.units)
        page_height = Unit(self.height, self.units)

        def _to_page(value: Optional[Unit], reference: Unit) -> Optional[float]:
            if value is None:
                return None
            if value.units == "native":
                raise ValueError("Native units cannot be used for page placement.")
            return value.convert(self.units, reference=reference).value

        converted = {
            "x": _to_page(x, page_width),
            "y": _to_page(y, page_height),
            "width": _to_page(width, page_width),
            "height": _to_page(height, page_height),
        }
        if converted["y"] is not None:
            converted["y"] = self.height - converted["y"]
        return converted

    def push_viewport(self, viewport: Viewport):
        """
        Create the axes for a viewport.

        Args:
            viewport: Viewport to place

        Returns:
            The matplotlib Axes covering the viewport

        Raises:
            ValueError: If a viewport with the same name already exists
        """
        if viewport.name in self._viewports:
            raise ValueError(f"Viewport '{viewport.name}' already exists on this page.")

        ax = self.figure.add_axes(viewport.bounds(self.width, self.height), label=viewport.name)
        ax.set_xlim(*viewport.xscale)
        ax.set_ylim(*viewport.yscale)
        ax.set_axis_off()

        self._viewports[viewport.name] = viewport
        self._axes[viewport.name] = ax
        logger.debug(f"Pushed viewport {viewport.name} at {viewport.bounds(self.width, self.height)}")
        return ax

    def save(self, path: Union[str, Path], **kwargs) -> Path:
        """Render the page to a file through matplotlib's ``savefig``."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.figure.savefig(path, **kwargs)
        logger.info(f"Saved page to {path}")
        return path

    def close(self) -> None:
        """Release the figure; the page stops being current."""
        global _current_page
        self.figure.clear()
        if _current_page is self:
            _current_page = None


def page_create(
    width=None,
    height=None,
    default_units: str = DEFAULT_UNITS,
    xgrid: float = 0.5,
    ygrid: float = 0.5,
    showguides: bool = True,
) -> Page:
    """
    Create a page and make it the current page.

    Args:
        width: Page width, a Unit or a number in ``default_units``
        height: Page height, a Unit or a number in ``default_units``
        default_units: Units of the page and of plain numbers
        xgrid: Spacing of the vertical guide lines (page units, 0 for none)
        ygrid: Spacing of the horizontal guide lines (page units, 0 for none)
        showguides: Draw the guides

    Returns:
        The new current Page

    Raises:
        ValueError: If width or height is missing
    """
    global _current_page

    if width is None:
        raise ValueError('argument "width" is missing, with no default.')
    if height is None:
        raise ValueError('argument "height" is missing, with no default.')

    page = Page(
        as_unit(width, default_units, "Page width"),
        as_unit(height, default_units, "Page height"),
        default_units=default_units,
        xgrid=xgrid,
        ygrid=ygrid,
        showguides=showguides,
    )
    _current_page = page
    logger.info(f"Created page {page.width:g} x {page.height:g} {page.units}")
    return page


def current_page() -> Optional[Page]:
    return _current_page


def check_page(error: str, page: Optional[Page] = None) -> Page:
    """Return ``page`` or the current page, raising RuntimeError(error) if neither exists."""
    page = page if page is not None else _current_page
    if page is None:
        raise RuntimeError(error)
    return page


def page_guide_hide(page: Optional[Page] = None) -> None:
    check_page("Cannot hide page guides without a genobox page.", page).set_guides_visible(False)


def page_guide_show(page: Optional[Page] = None) -> None:
    check_page("Cannot show page guides without a genobox page.", page).set_guides_visible(True)


def current_viewports(page: Optional[Page] = None) -> List[str]:
    return check_page("No genobox page is active.", page).current_viewports()
