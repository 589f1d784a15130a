"""Genomic coordinate axis drawn under a plot."""

import logging
from dataclasses import dataclass
from typing import List, Optional

import numpy as np
from matplotlib.ticker import MaxNLocator

from genobox.grobs import Gpar, SegmentsGrob, TextGrob
from genobox.page import Page, check_page
from genobox.params import Params, fill_defaults, parse_params
from genobox.plotting.base import PlotObject, draw_grobs, make_viewport, parse_placement
from genobox.utils.config import DEFAULT_JUST, DEFAULT_UNITS

logger = logging.getLogger(__name__)

SCALES = {"bp": 1, "Kb": 1_000, "Mb": 1_000_000}

LABEL_DEFAULTS = {
    "scale": "bp",
    "commas": True,
    "fontsize": 10.0,
    "fontcolor": "black",
    "linecolor": "black",
    "ticks": 5,
    "height": 0.18,
    "just": DEFAULT_JUST,
    "default_units": DEFAULT_UNITS,
}


@dataclass(frozen=True, eq=False)
class GenomeLabel(PlotObject):
    scale: str = "bp"


def tick_labels(positions, scale: str = "bp", commas: bool = True) -> List[str]:
    """
    Format genomic positions for an axis.

    Args:
        positions: Positions in bp
        scale: One of bp, Kb, Mb
        commas: Group thousands with commas

    Returns:
        One label per position

    Raises:
        ValueError: If the scale is unknown
    """
    if scale not in SCALES:
        raise ValueError(f"Invalid scale: {scale}. Choose one of {list(SCALES)}")

    labels = []
    for position in np.asarray(positions, dtype=float) / SCALES[scale]:
        if float(position).is_integer():
            labels.append(f"{int(position):,}" if commas else f"{int(position)}")
        else:
            labels.append(f"{position:,.3f}".rstrip("0") if commas else f"{position:.3f}".rstrip("0"))
    return labels


def anno_genome_label(
    plot=None,
    scale: Optional[str] = None,
    commas: Optional[bool] = None,
    fontsize: Optional[float] = None,
    fontcolor=None,
    linecolor=None,
    ticks: Optional[int] = None,
    x=None,
    y=None,
    height=None,
    just=None,
    default_units: Optional[str] = None,
    params: Optional[Params] = None,
    page: Optional[Page] = None,
) -> GenomeLabel:
    """
    Annotate a genome coordinate axis for the region of a plot.

    The axis takes the width and genomic scale of ``plot``; the chromosome
    name is written to the left of the axis.

    Args:
        plot: Placed plot object
        scale: Units of the tick labels (bp, Kb or Mb)
        commas: Group thousands with commas
        fontsize: Label font size
        fontcolor: Label color
        linecolor: Axis and tick color
        ticks: Approximate number of ticks
        x: Left position; defaults to the x of ``plot``
        y: Vertical position
        height: Height of the axis including labels
        just: Justification of the axis at (x, y)
        default_units: Units of plain-number placement values
        params: Shared parameters for unset arguments
        page: Page to draw on (default: current page)

    Returns:
        GenomeLabel with the plot's region and the drawn grobs
    """
    values = parse_params(params, dict(
        plot=plot, scale=scale, commas=commas, fontsize=fontsize, fontcolor=fontcolor,
        linecolor=linecolor, ticks=ticks, x=x, y=y, height=height, just=just,
        default_units=default_units,
    ))
    values = fill_defaults(values, LABEL_DEFAULTS)

    page = check_page("Cannot annotate genome label without a genobox page.", page)
    for key in ("plot", "y"):
        if values[key] is None:
            raise ValueError(f'argument "{key}" is missing, with no default.')
    if values["scale"] not in SCALES:
        raise ValueError(f"Invalid scale: {values['scale']}. Choose one of {list(SCALES)}")

    plot = values["plot"]
    if plot.width is None:
        raise ValueError("Cannot annotate a genome label for a plot that has not been placed.")
    if values["x"] is None:
        values["x"] = plot.x
    placement = parse_placement(values, values["default_units"], required=("x", "y", "height"))
    placement["width"] = plot.width

    xscale = plot.xscale
    vp = make_viewport(page, "genome_label", placement, values["just"], xscale, clip=False)

    positions = MaxNLocator(nbins=values["ticks"], integer=True).tick_values(*xscale)
    positions = positions[(positions >= xscale[0]) & (positions <= xscale[1])]

    line_gp = Gpar(col=values["linecolor"])
    text_gp = Gpar(fontsize=values["fontsize"], fontcolor=values["fontcolor"])
    children = [
        SegmentsGrob(xscale[0], 1, xscale[1], 1, gp=line_gp),
        SegmentsGrob(positions, 1, positions, 0.7, gp=line_gp),
        TextGrob(tick_labels(positions, values["scale"], values["commas"]), positions, 0.55,
                 just=("centre", "top"), gp=text_gp),
    ]
    if plot.chrom is not None:
        children.append(TextGrob(plot.chrom, 0, 1, just=("right", "centre"), x_units="npc", gp=text_gp))
    if values["scale"] != "bp":
        children.append(TextGrob(values["scale"], 1, 1, just=("left", "centre"), x_units="npc", gp=text_gp))

    grobs = draw_grobs(page, vp, children)

    return GenomeLabel(
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
        scale=values["scale"],
    )
