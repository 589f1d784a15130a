"""Square Hi-C contact heatmaps."""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
import pandas as pd

from genobox.grobs import Gpar, RasterGrob
from genobox.page import Page, check_page
from genobox.params import Params, fill_defaults, parse_params
from genobox.plotting.base import (
    PlotObject,
    draw_grobs,
    make_viewport,
    parse_placement,
    placement_fields,
    resolve_data,
)
from genobox.utils.config import DEFAULT_ASSEMBLY, DEFAULT_JUST, DEFAULT_UNITS, resolve_assembly
from genobox.utils.validation import validate_region

logger = logging.getLogger(__name__)

HIC_REQUIRED_COLS = ["pos1", "pos2", "counts"]

HIC_DEFAULTS = {
    "assembly": DEFAULT_ASSEMBLY,
    "palette": "YlOrRd",
    "resolution": None,
    "zrange": None,
    "alpha": 1.0,
    "just": DEFAULT_JUST,
    "default_units": DEFAULT_UNITS,
}


@dataclass(frozen=True, eq=False)
class HicSquarePlot(PlotObject):
    hic: Optional[pd.DataFrame] = None
    resolution: Optional[int] = None
    zrange: Optional[Tuple[float, float]] = None


def infer_resolution(hic: pd.DataFrame) -> int:
    """Smallest positive distance between bin positions."""
    positions = np.unique(np.concatenate([hic["pos1"].to_numpy(), hic["pos2"].to_numpy()]))
    steps = np.diff(positions)
    steps = steps[steps > 0]
    if steps.size == 0:
        raise ValueError("Cannot infer Hi-C resolution from a single bin; give 'resolution'.")
    return int(steps.min())


def contact_matrix(hic: pd.DataFrame, chromstart: int, chromend: int, resolution: int) -> np.ndarray:
    """
    Dense symmetric matrix of a region from sparse upper-triangular counts.

    Bins with no record are NaN so they render as background.

    Args:
        hic: Sparse counts with pos1, pos2 and counts columns
        chromstart: Region start (bp)
        chromend: Region end (bp)
        resolution: Bin size (bp)

    Returns:
        Square matrix whose first bin is the one containing ``chromstart``
    """
    first = chromstart - chromstart % resolution
    n_bins = int(np.ceil((chromend - first) / resolution))
    matrix = np.full((n_bins, n_bins), np.nan)

    i = ((hic["pos1"].to_numpy() - first) // resolution).astype(int)
    j = ((hic["pos2"].to_numpy() - first) // resolution).astype(int)
    keep = (i >= 0) & (i < n_bins) & (j >= 0) & (j < n_bins)
    counts = hic["counts"].to_numpy(dtype=float)[keep]
    matrix[i[keep], j[keep]] = counts
    matrix[j[keep], i[keep]] = counts
    return matrix


def plot_hic_square(
    data=None,
    chrom: Optional[str] = None,
    chromstart: Optional[int] = None,
    chromend: Optional[int] = None,
    assembly: Optional[str] = None,
    resolution: Optional[int] = None,
    zrange=None,
    palette: Optional[str] = None,
    alpha: Optional[float] = None,
    x=None,
    y=None,
    width=None,
    height=None,
    just=None,
    default_units: Optional[str] = None,
    params: Optional[Params] = None,
    page: Optional[Page] = None,
) -> HicSquarePlot:
    """
    Plot a square Hi-C heatmap of a region.

    The region runs left to right along x and top to bottom along y, so the
    diagonal goes from the top-left to the bottom-right corner.

    Args:
        data: Sparse Hi-C DataFrame (pos1, pos2, counts) or bundled dataset name
        chrom: Chromosome of the region
        chromstart: Region start (bp), required
        chromend: Region end (bp), required
        assembly: Genome assembly
        resolution: Bin size (bp); inferred from the data when omitted
        zrange: (low, high) of the color scale; defaults to 0 up to the maximum count
        palette: Name of a matplotlib colormap
        alpha: Transparency
        x, y, width, height: Placement on the page (Units or numbers)
        just: Justification of the plot at (x, y)
        default_units: Units of plain-number placement values
        params: Shared parameters for unset arguments
        page: Page to draw on (default: current page)

    Returns:
        HicSquarePlot with the filtered counts, resolution, zrange and drawn grobs

    Raises:
        ValueError: If the region is incomplete or ``zrange`` is not an increasing pair
    """
    values = parse_params(params, dict(
        data=data, chrom=chrom, chromstart=chromstart, chromend=chromend, assembly=assembly,
        resolution=resolution, zrange=zrange, palette=palette, alpha=alpha,
        x=x, y=y, width=width, height=height, just=just, default_units=default_units,
    ))
    values = fill_defaults(values, HIC_DEFAULTS)

    assembly = resolve_assembly(values["assembly"])
    chromstart, chromend = validate_region(values["chrom"], values["chromstart"], values["chromend"], assembly)
    if chromstart is None:
        raise ValueError("Hi-C plots need a region: give 'chromstart' and 'chromend'.")

    hic = resolve_data(values["data"], HIC_REQUIRED_COLS, "hic")
    res = int(values["resolution"]) if values["resolution"] is not None else infer_resolution(hic)
    binstart = chromstart - chromstart % res
    hic = hic[
        (hic["pos1"] >= binstart) & (hic["pos1"] < chromend)
        & (hic["pos2"] >= binstart) & (hic["pos2"] < chromend)
    ].reset_index(drop=True)

    if values["zrange"] is not None:
        zrange = tuple(float(v) for v in values["zrange"])
        if len(zrange) != 2 or zrange[0] >= zrange[1]:
            raise ValueError("'zrange' must be two increasing numbers.")
    elif len(hic) > 0:
        zrange = (0.0, float(max(hic["counts"].max(), 1)))
    else:
        zrange = None

    placement = parse_placement(values, values["default_units"])

    grobs = None
    if placement is not None:
        page = check_page("Cannot plot Hi-C square without a genobox page.", page)
        xscale = (float(chromstart), float(chromend))
        vp = make_viewport(
            page, "hic_square", placement, values["just"], xscale,
            yscale=(float(chromend), float(chromstart)),
        )

        if len(hic) > 0:
            matrix = contact_matrix(hic, chromstart, chromend, res)
            binend = binstart + matrix.shape[0] * res
            raster = RasterGrob(
                matrix,
                extent=(binstart, binend, binend, binstart),
                cmap=values["palette"],
                vmin=zrange[0],
                vmax=zrange[1],
                gp=Gpar(alpha=values["alpha"]),
            )
            grobs = draw_grobs(page, vp, [raster])
        else:
            logger.warning("No Hi-C data found in region.")

    return HicSquarePlot(
        chrom=values["chrom"], chromstart=chromstart, chromend=chromend, assembly=assembly,
        **placement_fields(placement),
        just=values["just"], grobs=grobs, hic=hic, resolution=res, zrange=zrange,
    )
