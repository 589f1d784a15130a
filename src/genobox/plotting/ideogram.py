"""Chromosome ideograms from cytoband tables."""

import logging
from dataclasses import dataclass
from typing import Optional

import pandas as pd

from genobox.datasets import load_cytobands
from genobox.grobs import Gpar, PolygonGrob, RectGrob
from genobox.page import Page, check_page
from genobox.params import Params, fill_defaults, parse_params
from genobox.plotting.base import (
    PlotObject,
    draw_grobs,
    make_viewport,
    parse_placement,
    placement_fields,
)
from genobox.utils.config import DEFAULT_ASSEMBLY, DEFAULT_JUST, DEFAULT_UNITS, STAIN_COLORS, resolve_assembly
from genobox.utils.validation import validate_columns

logger = logging.getLogger(__name__)

CYTOBAND_REQUIRED_COLS = ["seqnames", "start", "end", "name", "gieStain"]

IDEOGRAM_DEFAULTS = {
    "assembly": DEFAULT_ASSEMBLY,
    "linecolor": "grey",
    "just": DEFAULT_JUST,
    "default_units": DEFAULT_UNITS,
}


@dataclass(frozen=True, eq=False)
class IdeogramPlot(PlotObject):
    cytobands: Optional[pd.DataFrame] = None


def stain_colors(stains) -> list:
    """Fill color per Giemsa stain; unknown stains are drawn white."""
    return [STAIN_COLORS.get(stain, STAIN_COLORS["gneg"]) for stain in stains]


def centromere_triangles(bands: pd.DataFrame) -> list:
    """
    Triangles for the centromere bands, pointing at the centromere.

    The p-arm band narrows towards its end and the q-arm band towards its
    start, giving the pinched outline of the centromere.
    """
    triangles = []
    for band in bands.itertuples(index=False):
        if str(band.name).startswith("p"):
            triangles.append([(band.start, 0.0), (band.start, 1.0), (band.end, 0.5)])
        else:
            triangles.append([(band.end, 0.0), (band.end, 1.0), (band.start, 0.5)])
    return triangles


def plot_ideogram(
    chrom: Optional[str] = None,
    assembly: Optional[str] = None,
    data=None,
    linecolor=None,
    x=None,
    y=None,
    width=None,
    height=None,
    just=None,
    default_units: Optional[str] = None,
    params: Optional[Params] = None,
    page: Optional[Page] = None,
) -> IdeogramPlot:
    """
    Plot the cytoband ideogram of one chromosome.

    Args:
        chrom: Chromosome to draw
        assembly: Genome assembly of the bundled cytobands
        data: Cytoband DataFrame to use instead of the bundled table
        linecolor: Outline color of the chromosome arms
        x, y, width, height: Placement on the page (Units or numbers)
        just: Justification of the plot at (x, y)
        default_units: Units of plain-number placement values
        params: Shared parameters for unset arguments
        page: Page to draw on (default: current page)

    Returns:
        IdeogramPlot with the chromosome's cytobands and drawn grobs

    Raises:
        ValueError: If chrom is missing or has no cytobands
    """
    values = parse_params(params, dict(
        chrom=chrom, assembly=assembly, data=data, linecolor=linecolor,
        x=x, y=y, width=width, height=height, just=just, default_units=default_units,
    ))
    values = fill_defaults(values, IDEOGRAM_DEFAULTS)

    if values["chrom"] is None:
        raise ValueError('argument "chrom" is missing, with no default.')

    assembly = resolve_assembly(values["assembly"])
    if values["data"] is None:
        cytobands = load_cytobands(assembly)
    else:
        cytobands = validate_columns(values["data"], CYTOBAND_REQUIRED_COLS, "cytoband")

    bands = cytobands[cytobands["seqnames"].astype(str) == str(values["chrom"])]
    bands = bands.sort_values("start").reset_index(drop=True)
    if len(bands) == 0:
        raise ValueError(f"No cytobands found for {values['chrom']} in {assembly}.")

    chromstart, chromend = int(bands["start"].min()), int(bands["end"].max())
    placement = parse_placement(values, values["default_units"])

    grobs = None
    if placement is not None:
        page = check_page("Cannot plot ideogram without a genobox page.", page)
        vp = make_viewport(page, "ideogram", placement, values["just"], (chromstart, chromend))

        acen = bands["gieStain"] == "acen"
        arms = bands[~acen]
        centromere = bands[acen]
        outline = Gpar(col=values["linecolor"], fill=None)
        children = [
            RectGrob(
                arms["start"], 0, arms["end"] - arms["start"], 1,
                gp=Gpar(col=None, fill=stain_colors(arms["gieStain"])),
            ),
        ]
        if len(centromere) > 0:
            children.append(PolygonGrob(
                centromere_triangles(centromere),
                gp=Gpar(col=None, fill=STAIN_COLORS["acen"]),
            ))
            p_end = int(centromere["start"].min())
            q_start = int(centromere["end"].max())
            children.append(RectGrob([chromstart, q_start], 0, [p_end - chromstart, chromend - q_start], 1, gp=outline))
        else:
            children.append(RectGrob(chromstart, 0, chromend - chromstart, 1, gp=outline))
        grobs = draw_grobs(page, vp, children)

    return IdeogramPlot(
        chrom=values["chrom"], chromstart=chromstart, chromend=chromend, assembly=assembly,
        **placement_fields(placement),
        just=values["just"], grobs=grobs, cytobands=bands,
    )
