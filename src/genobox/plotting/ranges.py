"""BED range pileups."""

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np
import pandas as pd

from genobox.grobs import Gpar, RectGrob
from genobox.page import Page, check_page
from genobox.params import Params, fill_defaults, parse_params
from genobox.plotting.base import (
    PlotObject,
    draw_grobs,
    make_viewport,
    parse_placement,
    placement_fields,
    region_scale,
    resolve_data,
)
from genobox.utils.config import DEFAULT_ASSEMBLY, DEFAULT_JUST, DEFAULT_UNITS, resolve_assembly
from genobox.utils.validation import BED_REQUIRED_COLS, filter_region, validate_region

logger = logging.getLogger(__name__)

RANGES_DEFAULTS = {
    "assembly": DEFAULT_ASSEMBLY,
    "fill": "#7ecdbb",
    "linecolor": None,
    "alpha": 1.0,
    "collapse": False,
    "space_height": 0.3,
    "just": DEFAULT_JUST,
    "default_units": DEFAULT_UNITS,
}


@dataclass(frozen=True, eq=False)
class RangesPlot(PlotObject):
    bed: Optional[pd.DataFrame] = None


def assign_rows(starts, ends) -> np.ndarray:
    """
    Greedy pileup: each interval goes to the lowest row whose last interval
    ends before it starts. Intervals must be sorted by start.

    Args:
        starts: Interval starts
        ends: Interval ends

    Returns:
        Zero-based row index per interval
    """
    row_ends = []
    rows = np.zeros(len(starts), dtype=int)
    for i, (start, end) in enumerate(zip(starts, ends)):
        for row, last_end in enumerate(row_ends):
            if start > last_end:
                row_ends[row] = end
                rows[i] = row
                break
        else:
            row_ends.append(end)
            rows[i] = len(row_ends) - 1
    return rows


def _strand_fill(fill, strands) -> object:
    # a pair of colors splits + and - strands
    if isinstance(fill, (list, tuple)) and len(fill) == 2 and strands is not None:
        return [fill[0] if strand == "+" else fill[1] for strand in strands]
    if isinstance(fill, (list, tuple)):
        return fill[0]
    return fill


def plot_ranges(
    data=None,
    chrom: Optional[str] = None,
    chromstart: Optional[int] = None,
    chromend: Optional[int] = None,
    assembly: Optional[str] = None,
    fill=None,
    linecolor=None,
    alpha: Optional[float] = None,
    collapse: Optional[bool] = None,
    space_height: Optional[float] = None,
    x=None,
    y=None,
    width=None,
    height=None,
    just=None,
    default_units: Optional[str] = None,
    params: Optional[Params] = None,
    page: Optional[Page] = None,
) -> RangesPlot:
    """
    Plot BED intervals piled up into non-overlapping rows.

    ``fill`` may be one color or a pair of colors for + and - strand
    elements. With ``collapse`` every element is drawn in a single row.

    Args:
        data: BED DataFrame or bundled dataset name
        chrom: Chromosome of the region
        chromstart: Region start (bp)
        chromend: Region end (bp)
        assembly: Genome assembly
        fill: Box color, or (plus, minus) strand colors
        linecolor: Box outline color
        alpha: Transparency
        collapse: Draw all elements in one row
        space_height: Fraction of each row left empty
        x, y, width, height: Placement on the page (Units or numbers)
        just: Justification of the plot at (x, y)
        default_units: Units of plain-number placement values
        params: Shared parameters for unset arguments
        page: Page to draw on (default: current page)

    Returns:
        RangesPlot with the filtered intervals (and their ``row``) and drawn grobs
    """
    values = parse_params(params, dict(
        data=data, chrom=chrom, chromstart=chromstart, chromend=chromend, assembly=assembly,
        fill=fill, linecolor=linecolor, alpha=alpha, collapse=collapse, space_height=space_height,
        x=x, y=y, width=width, height=height, just=just, default_units=default_units,
    ))
    values = fill_defaults(values, RANGES_DEFAULTS)

    assembly = resolve_assembly(values["assembly"])
    chromstart, chromend = validate_region(values["chrom"], values["chromstart"], values["chromend"], assembly)
    ranges = resolve_data(values["data"], BED_REQUIRED_COLS, "bed")
    ranges = filter_region(ranges, values["chrom"], chromstart, chromend)
    ranges = ranges.sort_values(["start", "end"]).reset_index(drop=True)
    if values["collapse"]:
        ranges["row"] = 0
    else:
        ranges["row"] = assign_rows(ranges["start"].to_numpy(), ranges["end"].to_numpy())

    xscale = region_scale(
        values["chrom"], chromstart, chromend, assembly,
        fallback_end=ranges["end"].max() if len(ranges) else None,
        required=len(ranges) > 0,
    )
    placement = parse_placement(values, values["default_units"])

    grobs = None
    if placement is not None:
        page = check_page("Cannot plot ranges without a genobox page.", page)

        if len(ranges) > 0:
            vp = make_viewport(page, "ranges_plot", placement, values["just"], xscale)
            n_rows = int(ranges["row"].max()) + 1
            row_height = 1.0 / n_rows
            strands = ranges["strand"] if "strand" in ranges.columns else None
            gp = Gpar(
                col=values["linecolor"],
                fill=_strand_fill(values["fill"], strands),
                alpha=values["alpha"],
            )
            rects = RectGrob(
                ranges["start"], ranges["row"] * row_height, ranges["end"] - ranges["start"],
                row_height * (1 - values["space_height"]), just=("left", "bottom"), gp=gp,
            )
            grobs = draw_grobs(page, vp, [rects])
        else:
            logger.warning("No ranges found in region.")

    return RangesPlot(
        chrom=values["chrom"], chromstart=chromstart, chromend=chromend, assembly=assembly,
        **placement_fields(placement),
        just=values["just"], grobs=grobs, genomic_scale=xscale, bed=ranges,
    )
