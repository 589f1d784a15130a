"""Highlight boxes over the anchors of BEDPE elements."""

import logging
from dataclasses import dataclass
from typing import Optional

from genobox.grobs import Gpar, RectGrob
from genobox.page import Page, check_page
from genobox.params import Params, fill_defaults, parse_params
from genobox.plotting.base import PLACEMENT_LABELS, PlotObject, draw_grobs, make_viewport
from genobox.units import as_unit
from genobox.utils.config import DEFAULT_JUST, DEFAULT_UNITS
from genobox.viewport import viewport_name

logger = logging.getLogger(__name__)

ANCHOR_DEFAULTS = {
    "fill": "lightgrey",
    "linecolor": None,
    "alpha": 0.4,
    "just": DEFAULT_JUST,
    "default_units": DEFAULT_UNITS,
}


@dataclass(frozen=True, eq=False)
class BedpeAnchor(PlotObject):
    """Anchor highlight boxes drawn below or over a BEDPE plot."""


def anno_bedpe_anchors(
    plot=None,
    fill=None,
    linecolor=None,
    alpha: Optional[float] = None,
    x=None,
    y=None,
    height=None,
    just=None,
    default_units: Optional[str] = None,
    params: Optional[Params] = None,
    page: Optional[Page] = None,
) -> BedpeAnchor:
    """
    Annotate vertical boxes at both anchors of every BEDPE element of a plot.

    The annotation spans the genomic scale and width of ``plot`` and is
    clipped to it; only its vertical placement is chosen here.

    Args:
        plot: A bedpe or bedpe arches plot object
        fill: Box fill color
        linecolor: Box outline color (default: none)
        alpha: Fill transparency
        x: Horizontal position
        y: Vertical position
        height: Height of the boxes
        just: Justification of the annotation at (x, y)
        default_units: Units of plain-number placement values
        params: Shared parameters for unset arguments
        page: Page to draw on (default: current page)

    Returns:
        BedpeAnchor with the plot's region, the placement and the drawn grobs
        (None when the plot has no elements)

    Raises:
        RuntimeError: If there is no page
        ValueError: If plot, y or height is missing, or plot has no bedpe data
        TypeError: If x is missing, or x, y or height is neither a Unit nor a number
    """
    values = parse_params(params, dict(
        plot=plot, fill=fill, linecolor=linecolor, alpha=alpha,
        x=x, y=y, height=height, just=just, default_units=default_units,
    ))
    values = fill_defaults(values, ANCHOR_DEFAULTS)

    page = check_page("Cannot annotate bedpe anchors without a genobox page.", page)
    for key in ("plot", "y", "height"):
        if values[key] is None:
            raise ValueError(f'argument "{key}" is missing, with no default.')

    plot = values["plot"]
    if not hasattr(plot, "bedpe"):
        raise ValueError("Cannot annotate bedpe anchors of a plot that does not use bedpe data.")

    placement = {
        key: as_unit(values[key], values["default_units"], PLACEMENT_LABELS[key])
        for key in ("x", "y", "height")
    }
    if plot.width is None:
        raise ValueError("Cannot annotate bedpe anchors of a plot that has not been placed.")
    placement["width"] = plot.width

    bedpe = plot.bedpe
    grobs = None
    if bedpe is not None and len(bedpe) > 0:
        vp = make_viewport(page, "bedpe_anchor", placement, values["just"], plot.xscale, clip=True)
        gp = Gpar(col=values["linecolor"], fill=values["fill"], alpha=values["alpha"])
        children = [
            RectGrob(bedpe["start1"], 0, bedpe["end1"] - bedpe["start1"], 1, just=("left", "bottom"), gp=gp),
            RectGrob(bedpe["start2"], 0, bedpe["end2"] - bedpe["start2"], 1, just=("left", "bottom"), gp=gp),
        ]
        grobs = draw_grobs(page, vp, children)
    else:
        logger.warning("No bedpe elements found in region.")
        logger.info(f"bedpe_anchor[{viewport_name('bedpe_anchor', page.current_viewports())}]")

    return BedpeAnchor(
        chrom=plot.chrom,
        chromstart=plot.chromstart,
        chromend=plot.chromend,
        assembly=plot.assembly,
        x=placement["x"],
        y=placement["y"],
        width=placement["width"],
        height=placement["height"],
        just=values["just"],
        grobs=grobs,
    )
