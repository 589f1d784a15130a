"""Binned signal tracks."""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
import pandas as pd

from genobox.grobs import Gpar, PolygonGrob, SegmentsGrob
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
from genobox.utils.validation import filter_region, validate_region

logger = logging.getLogger(__name__)

SIGNAL_REQUIRED_COLS = ["chrom", "start", "end", "score"]

SIGNAL_DEFAULTS = {
    "assembly": DEFAULT_ASSEMBLY,
    "linecolor": "#37a7db",
    "fill": None,
    "alpha": 1.0,
    "lwd": 1.0,
    "just": DEFAULT_JUST,
    "default_units": DEFAULT_UNITS,
}


@dataclass(frozen=True, eq=False)
class SignalPlot(PlotObject):
    signal: Optional[pd.DataFrame] = None
    range: Optional[Tuple[float, float]] = None


def default_range(scores) -> Tuple[float, float]:
    """Y range of a signal: from 0 (or the minimum when negative) to the maximum."""
    scores = np.asarray(scores, dtype=float)
    if scores.size == 0:
        return 0.0, 1.0
    low = min(0.0, float(scores.min()))
    high = float(scores.max())
    if high <= low:
        high = low + 1.0
    return low, high


def step_outline(starts, ends, scores, baseline: float) -> np.ndarray:
    """Vertices of the closed step shape under a binned signal."""
    xs = np.column_stack([starts, ends]).ravel()
    ys = np.repeat(scores, 2)
    return np.column_stack([
        np.concatenate([[xs[0]], xs, [xs[-1]]]),
        np.concatenate([[baseline], ys, [baseline]]),
    ])


def plot_signal(
    data=None,
    chrom: Optional[str] = None,
    chromstart: Optional[int] = None,
    chromend: Optional[int] = None,
    assembly: Optional[str] = None,
    range=None,
    linecolor=None,
    fill=None,
    alpha: Optional[float] = None,
    lwd: Optional[float] = None,
    x=None,
    y=None,
    width=None,
    height=None,
    just=None,
    default_units: Optional[str] = None,
    params: Optional[Params] = None,
    page: Optional[Page] = None,
) -> SignalPlot:
    """
    Plot a binned signal as a step outline, optionally filled.

    Args:
        data: Signal DataFrame (chrom, start, end, score) or bundled dataset name
        chrom: Chromosome of the region
        chromstart: Region start (bp)
        chromend: Region end (bp)
        assembly: Genome assembly
        range: (low, high) of the y axis; defaults to 0 or the minimum up to the maximum
        linecolor: Outline color
        fill: Fill color under the signal (default: none)
        alpha: Transparency
        lwd: Line width
        x, y, width, height: Placement on the page (Units or numbers)
        just: Justification of the plot at (x, y)
        default_units: Units of plain-number placement values
        params: Shared parameters for unset arguments
        page: Page to draw on (default: current page)

    Returns:
        SignalPlot with the filtered signal, the y range used and drawn grobs

    Raises:
        ValueError: If ``range`` is not an increasing pair
    """
    values = parse_params(params, dict(
        data=data, chrom=chrom, chromstart=chromstart, chromend=chromend, assembly=assembly,
        range=range, linecolor=linecolor, fill=fill, alpha=alpha, lwd=lwd,
        x=x, y=y, width=width, height=height, just=just, default_units=default_units,
    ))
    values = fill_defaults(values, SIGNAL_DEFAULTS)

    assembly = resolve_assembly(values["assembly"])
    chromstart, chromend = validate_region(values["chrom"], values["chromstart"], values["chromend"], assembly)
    signal = resolve_data(values["data"], SIGNAL_REQUIRED_COLS, "signal")
    signal = filter_region(signal, values["chrom"], chromstart, chromend)
    signal = signal.sort_values("start").reset_index(drop=True)

    if values["range"] is not None:
        yrange = tuple(float(v) for v in values["range"])
        if len(yrange) != 2 or yrange[0] >= yrange[1]:
            raise ValueError("'range' must be two increasing numbers.")
    else:
        yrange = default_range(signal["score"])

    xscale = region_scale(
        values["chrom"], chromstart, chromend, assembly,
        fallback_end=signal["end"].max() if len(signal) else None,
        required=len(signal) > 0,
    )
    placement = parse_placement(values, values["default_units"])

    grobs = None
    if placement is not None:
        page = check_page("Cannot plot signal without a genobox page.", page)

        if len(signal) > 0:
            vp = make_viewport(page, "signal_plot", placement, values["just"], xscale, yscale=yrange)
            scores = np.clip(signal["score"].to_numpy(dtype=float), *yrange)
            baseline = 0.0 if yrange[0] < 0 < yrange[1] else yrange[0]
            outline = step_outline(signal["start"].to_numpy(), signal["end"].to_numpy(), scores, baseline)
            children = [
                PolygonGrob(
                    [outline], y_units="native",
                    gp=Gpar(col=values["linecolor"], fill=values["fill"], alpha=values["alpha"], lwd=values["lwd"]),
                ),
            ]
            if yrange[0] < 0:
                children.append(SegmentsGrob(0, baseline, 1, baseline, x_units="npc", y_units="native",
                                             gp=Gpar(col="grey", lwd=0.5)))
            grobs = draw_grobs(page, vp, children)
        else:
            logger.warning("No signal found in region.")

    return SignalPlot(
        chrom=values["chrom"], chromstart=chromstart, chromend=chromend, assembly=assembly,
        **placement_fields(placement),
        just=values["just"], grobs=grobs, genomic_scale=xscale, signal=signal, range=yrange,
    )
