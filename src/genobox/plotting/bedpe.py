"""BEDPE plots: paired anchors drawn as boxes or as arches."""

import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np
import pandas as pd
from matplotlib.path import Path

from genobox.grobs import Gpar, PathGrob, RectGrob, SegmentsGrob
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
from genobox.utils.validation import BEDPE_REQUIRED_COLS, filter_bedpe_region, validate_region

logger = logging.getLogger(__name__)

BEDPE_DEFAULTS = {
    "assembly": DEFAULT_ASSEMBLY,
    "fill": "#1f4297",
    "linecolor": None,
    "alpha": 1.0,
    "spacer": 0.1,
    "just": DEFAULT_JUST,
    "default_units": DEFAULT_UNITS,
}

ARCHES_DEFAULTS = {
    "assembly": DEFAULT_ASSEMBLY,
    "fill": None,
    "linecolor": "black",
    "alpha": 1.0,
    "lwd": 1.0,
    "flip": False,
    "just": DEFAULT_JUST,
    "default_units": DEFAULT_UNITS,
}


@dataclass(frozen=True, eq=False)
class BedpePlot(PlotObject):
    bedpe: Optional[pd.DataFrame] = None


@dataclass(frozen=True, eq=False)
class BedpeArchesPlot(PlotObject):
    bedpe: Optional[pd.DataFrame] = None


def _load_region(values: dict):
    assembly = resolve_assembly(values["assembly"])
    chromstart, chromend = validate_region(
        values["chrom"], values["chromstart"], values["chromend"], assembly
    )
    bedpe = resolve_data(values["data"], BEDPE_REQUIRED_COLS, "bedpe")
    bedpe = filter_bedpe_region(bedpe, values["chrom"], chromstart, chromend)
    xscale = region_scale(
        values["chrom"], chromstart, chromend, assembly,
        fallback_end=bedpe[["end1", "end2"]].to_numpy().max() if len(bedpe) else None,
        required=len(bedpe) > 0,
    )
    return assembly, chromstart, chromend, bedpe, xscale


def plot_bedpe(
    data=None,
    chrom: Optional[str] = None,
    chromstart: Optional[int] = None,
    chromend: Optional[int] = None,
    assembly: Optional[str] = None,
    fill=None,
    linecolor=None,
    alpha: Optional[float] = None,
    spacer: Optional[float] = None,
    x=None,
    y=None,
    width=None,
    height=None,
    just=None,
    default_units: Optional[str] = None,
    params: Optional[Params] = None,
    page: Optional[Page] = None,
) -> BedpePlot:
    """
    Plot paired anchors as boxes joined by a line, one element per row.

    Elements are sorted by their first anchor and stacked top to bottom.

    Args:
        data: BEDPE DataFrame or bundled dataset name
        chrom: Chromosome of the region
        chromstart: Region start (bp)
        chromend: Region end (bp)
        assembly: Genome assembly
        fill: Anchor box color
        linecolor: Color of the joining line (defaults to ``fill``)
        alpha: Transparency of the boxes
        spacer: Fraction of each row left empty
        x, y, width, height: Placement on the page (Units or numbers)
        just: Justification of the plot at (x, y)
        default_units: Units of plain-number placement values
        params: Shared parameters for unset arguments
        page: Page to draw on (default: current page)

    Returns:
        BedpePlot with the filtered data and drawn grobs
    """
    values = parse_params(params, dict(
        data=data, chrom=chrom, chromstart=chromstart, chromend=chromend, assembly=assembly,
        fill=fill, linecolor=linecolor, alpha=alpha, spacer=spacer,
        x=x, y=y, width=width, height=height, just=just, default_units=default_units,
    ))
    values = fill_defaults(values, BEDPE_DEFAULTS)

    assembly, chromstart, chromend, bedpe, xscale = _load_region(values)
    placement = parse_placement(values, values["default_units"])

    grobs = None
    if placement is not None:
        page = check_page("Cannot plot bedpe without a genobox page.", page)

        if len(bedpe) > 0:
            vp = make_viewport(page, "bedpe_plot", placement, values["just"], xscale)
            bedpe = bedpe.sort_values(["start1", "start2"]).reset_index(drop=True)
            n = len(bedpe)
            row_height = 1.0 / n
            box_height = row_height * (1 - values["spacer"])
            centers = 1 - (np.arange(n) + 0.5) * row_height

            box_gp = Gpar(col=None, fill=values["fill"], alpha=values["alpha"])
            children = [
                RectGrob(bedpe["start1"], centers, bedpe["end1"] - bedpe["start1"], box_height,
                         just=("left", "centre"), gp=box_gp),
                RectGrob(bedpe["start2"], centers, bedpe["end2"] - bedpe["start2"], box_height,
                         just=("left", "centre"), gp=box_gp),
                SegmentsGrob(bedpe["end1"], centers, bedpe["start2"], centers,
                             gp=Gpar(col=values["linecolor"] or values["fill"], alpha=values["alpha"])),
            ]
            grobs = draw_grobs(page, vp, children)
        else:
            logger.warning("No bedpe elements found in region.")

    return BedpePlot(
        chrom=values["chrom"], chromstart=chromstart, chromend=chromend, assembly=assembly,
        **placement_fields(placement),
        just=values["just"], grobs=grobs, genomic_scale=xscale, bedpe=bedpe,
    )


def _arch_path(mid1: float, mid2: float, peak: float, flip: bool) -> Path:
    # a quadratic bezier peaks at half its control point height
    base, control = (1.0, 1.0 - 2 * peak) if flip else (0.0, 2 * peak)
    verts = [(mid1, base), ((mid1 + mid2) / 2, control), (mid2, base)]
    return Path(verts, [Path.MOVETO, Path.CURVE3, Path.CURVE3])


def plot_bedpe_arches(
    data=None,
    chrom: Optional[str] = None,
    chromstart: Optional[int] = None,
    chromend: Optional[int] = None,
    assembly: Optional[str] = None,
    fill=None,
    linecolor=None,
    alpha: Optional[float] = None,
    lwd: Optional[float] = None,
    flip: Optional[bool] = None,
    x=None,
    y=None,
    width=None,
    height=None,
    just=None,
    default_units: Optional[str] = None,
    params: Optional[Params] = None,
    page: Optional[Page] = None,
) -> BedpeArchesPlot:
    """
    Plot paired anchors as arches between anchor midpoints.

    Arch heights are proportional to the distance between the anchors, so the
    longest element in the region spans the full plot height.

    Args:
        data: BEDPE DataFrame or bundled dataset name
        chrom: Chromosome of the region
        chromstart: Region start (bp)
        chromend: Region end (bp)
        assembly: Genome assembly
        fill: Arch fill color (default: outline only)
        linecolor: Arch line color
        alpha: Transparency
        lwd: Line width
        flip: Draw arches hanging from the top of the plot
        x, y, width, height: Placement on the page (Units or numbers)
        just: Justification of the plot at (x, y)
        default_units: Units of plain-number placement values
        params: Shared parameters for unset arguments
        page: Page to draw on (default: current page)

    Returns:
        BedpeArchesPlot with the filtered data and drawn grobs
    """
    values = parse_params(params, dict(
        data=data, chrom=chrom, chromstart=chromstart, chromend=chromend, assembly=assembly,
        fill=fill, linecolor=linecolor, alpha=alpha, lwd=lwd, flip=flip,
        x=x, y=y, width=width, height=height, just=just, default_units=default_units,
    ))
    values = fill_defaults(values, ARCHES_DEFAULTS)

    assembly, chromstart, chromend, bedpe, xscale = _load_region(values)
    placement = parse_placement(values, values["default_units"])

    grobs = None
    if placement is not None:
        page = check_page("Cannot plot bedpe arches without a genobox page.", page)

        if len(bedpe) > 0:
            vp = make_viewport(page, "bedpe_arches", placement, values["just"], xscale)
            mid1 = (bedpe["start1"] + bedpe["end1"]).to_numpy() / 2
            mid2 = (bedpe["start2"] + bedpe["end2"]).to_numpy() / 2
            span = np.abs(mid2 - mid1)
            peaks = span / span.max() if span.max() > 0 else np.ones_like(span)

            paths = [_arch_path(a, b, p, values["flip"]) for a, b, p in zip(mid1, mid2, peaks)]
            gp = Gpar(col=values["linecolor"], fill=values["fill"], alpha=values["alpha"], lwd=values["lwd"])
            grobs = draw_grobs(page, vp, [PathGrob(paths, gp=gp)])
        else:
            logger.warning("No bedpe elements found in region.")

    return BedpeArchesPlot(
        chrom=values["chrom"], chromstart=chromstart, chromend=chromend, assembly=assembly,
        **placement_fields(placement),
        just=values["just"], grobs=grobs, genomic_scale=xscale, bedpe=bedpe,
    )
