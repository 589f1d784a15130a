"""Shaded highlight of a genomic region of a plot."""

import logging
from dataclasses import dataclass
from typing import Optional

from genobox.grobs import Gpar, RectGrob
from genobox.page import Page, check_page
from genobox.params import Params, fill_defaults, parse_params
from genobox.plotting.base import PlotObject, draw_grobs, make_viewport, parse_placement
from genobox.units import Unit
from genobox.utils.config import DEFAULT_JUST, DEFAULT_UNITS
from genobox.viewport import parse_just

logger = logging.getLogger(__name__)

HIGHLIGHT_DEFAULTS = {
    "fill": "grey",
    "linecolor": None,
    "alpha": 0.4,
    "just": DEFAULT_JUST,
    "default_units": DEFAULT_UNITS,
}


@dataclass(frozen=True, eq=False)
class Highlight(PlotObject):
    pass


def anno_highlight(
    plot=None,
    chrom: Optional[str] = None,
    chromstart: Optional[int] = None,
    chromend: Optional[int] = None,
    fill=None,
    linecolor=None,
    alpha: Optional[float] = None,
    y=None,
    height=None,
    just=None,
    default_units: Optional[str] = None,
    params: Optional[Params] = None,
    page: Optional[Page] = None,
) -> Highlight:
    """
    Shade ``chrom:chromstart-chromend`` across the width of a plot.

    Args:
        plot: Placed plot object
        chrom: Chromosome of the highlighted region
        chromstart: Region start (bp); whole plot when omitted
        chromend: Region end (bp); whole plot when omitted
        fill: Fill color
        linecolor: Outline color (default: none)
        alpha: Transparency
        y: Vertical position
        height: Height of the highlight
        just: Vertical justification is taken from ``just``; horizontally the
            highlight always lines up with the plot
        default_units: Units of plain-number placement values
        params: Shared parameters for unset arguments
        page: Page to draw on (default: current page)

    Returns:
        Highlight with the highlighted region and drawn grobs (None when the
        region lies outside the plot)
    """
    values = parse_params(params, dict(
        plot=plot, chrom=chrom, chromstart=chromstart, chromend=chromend, fill=fill,
        linecolor=linecolor, alpha=alpha, y=y, height=height, just=just,
        default_units=default_units,
    ))
    values = fill_defaults(values, HIGHLIGHT_DEFAULTS)

    page = check_page("Cannot annotate highlight without a genobox page.", page)
    for key in ("plot", "chrom", "y", "height"):
        if values[key] is None:
            raise ValueError(f'argument "{key}" is missing, with no default.')
    if (values["chromstart"] is None) != (values["chromend"] is None):
        raise ValueError("Give both 'chromstart' and 'chromend' or neither.")

    plot = values["plot"]
    if plot.width is None:
        raise ValueError("Cannot annotate a highlight for a plot that has not been placed.")

    xscale = plot.xscale
    start = xscale[0] if values["chromstart"] is None else values["chromstart"]
    end = xscale[1] if values["chromend"] is None else values["chromend"]
    if start >= end:
        raise ValueError("'chromstart' must be less than 'chromend'.")

    # line up with the plot's left edge whatever its justification
    coords = page.convert(x=plot.x, width=plot.width)
    left = coords["x"] - parse_just(plot.just)[0] * coords["width"]
    placement = parse_placement(values, values["default_units"], required=("y", "height"))
    placement["x"] = Unit(left, page.units)
    placement["width"] = plot.width
    vp = make_viewport(
        page, "highlight", placement, (0.0, parse_just(values["just"])[1]), xscale, clip=True
    )

    grobs = None
    outside = (
        (plot.chrom is not None and str(values["chrom"]) != str(plot.chrom))
        or end <= xscale[0]
        or start >= xscale[1]
    )
    if outside:
        logger.warning("Highlight region is outside of the plot region.")
        logger.info(f"highlight[{vp.name}]")
    else:
        rect = RectGrob(
            start, 0, end - start, 1, just=("left", "bottom"),
            gp=Gpar(col=values["linecolor"], fill=values["fill"], alpha=values["alpha"]),
        )
        grobs = draw_grobs(page, vp, [rect])

    return Highlight(
        chrom=values["chrom"],
        chromstart=values["chromstart"],
        chromend=values["chromend"],
        assembly=plot.assembly,
        x=placement["x"],
        y=placement["y"],
        width=placement["width"],
        height=placement["height"],
        just=values["just"],
        grobs=grobs,
    )
