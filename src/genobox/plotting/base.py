"""Plot objects and the placement steps shared by every plot function."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple, Union

import pandas as pd

from genobox.datasets import load_dataset
from genobox.grobs import GTree, Grob
from genobox.page import Page
from genobox.units import Unit, as_unit
from genobox.utils.config import GENOME_SIZES
from genobox.utils.validation import validate_columns
from genobox.viewport import Viewport, viewport_name

logger = logging.getLogger(__name__)

PLACEMENT_LABELS = {
    "x": "x-coordinate",
    "y": "y-coordinate",
    "width": "Width",
    "height": "Height",
}


@dataclass(frozen=True, eq=False)
class PlotObject:
    """
    Result of a plot or annotation call.

    Echoes the genomic region and the page placement, and holds the drawn
    grob tree (``None`` when nothing was drawn).
    """

    chrom: Optional[str]
    chromstart: Optional[int]
    chromend: Optional[int]
    assembly: Optional[str]
    x: Optional[Unit]
    y: Optional[Unit]
    width: Optional[Unit]
    height: Optional[Unit]
    just: Union[str, Sequence[str]]
    grobs: Optional[GTree]
    genomic_scale: Optional[Tuple[float, float]] = None

    @property
    def placed(self) -> bool:
        return self.grobs is not None

    @property
    def xscale(self) -> Tuple[float, float]:
        """Genomic scale of the plot's canvas."""
        if self.grobs is not None:
            return self.grobs.vp.xscale
        if self.genomic_scale is not None:
            return self.genomic_scale
        if self.chromstart is not None and self.chromend is not None:
            return float(self.chromstart), float(self.chromend)
        raise ValueError("Plot has no genomic scale: it was not placed and has no region.")


def resolve_data(data, required_cols: List[str], description: str) -> pd.DataFrame:
    """Accept a DataFrame or the name of a bundled dataset."""
    if data is None:
        raise ValueError('argument "data" is missing, with no default.')
    if isinstance(data, str):
        data = load_dataset(data)
    return validate_columns(data, required_cols, description)


def region_scale(
    chrom: str,
    chromstart: Optional[int],
    chromend: Optional[int],
    assembly: Optional[str],
    fallback_end: Optional[float] = None,
    required: bool = True,
) -> Optional[Tuple[float, float]]:
    """
    Native x-scale for a region; whole chromosomes span 0 to the chromosome size.

    When nothing fixes the length of the chromosome the scale is
    undetermined: ValueError when ``required``, otherwise None.
    """
    if chromstart is not None:
        return float(chromstart), float(chromend)

    sizes = GENOME_SIZES.get(assembly) if assembly is not None else None
    if sizes is not None and chrom in sizes:
        return 0.0, float(sizes[chrom])
    if fallback_end:
        return 0.0, float(fallback_end)
    if not required:
        return None
    raise ValueError(f"Cannot determine the length of {chrom}; give 'chromstart' and 'chromend'.")


def parse_placement(
    values: Dict[str, object],
    default_units: Optional[str],
    required: Sequence[str] = ("x", "y", "width", "height"),
) -> Optional[Dict[str, Unit]]:
    """
    Normalise x, y, width and height to Units.

    Placement is all-or-nothing: when none of the ``required`` arguments are
    given the object stays unplaced and None is returned.

    Args:
        values: Mapping holding the placement arguments
        default_units: Units applied to plain numbers
        required: Placement arguments that must all be given

    Returns:
        Mapping of argument name to Unit, or None when unplaced

    Raises:
        ValueError: If only some of the required arguments are given
    """
    given = [key for key in required if values.get(key) is not None]
    if not given:
        return None

    for key in required:
        if values.get(key) is None:
            raise ValueError(f'argument "{key}" is missing, with no default.')

    return {key: as_unit(values[key], default_units, PLACEMENT_LABELS[key]) for key in required}


def make_viewport(
    page: Page,
    prefix: str,
    placement: Dict[str, Unit],
    just,
    xscale: Tuple[float, float],
    yscale: Tuple[float, float] = (0.0, 1.0),
    clip: bool = True,
) -> Viewport:
    """Name a new viewport after ``prefix`` and place it in page units."""
    name = viewport_name(prefix, page.current_viewports())
    coords = page.convert(**placement)
    return Viewport.create(
        x=coords["x"],
        y=coords["y"],
        width=coords["width"],
        height=coords["height"],
        name=name,
        just=just,
        xscale=xscale,
        yscale=yscale,
        clip=clip,
    )


def draw_grobs(page: Page, vp: Viewport, children: List[Grob]) -> GTree:
    """Bind grobs to a viewport, draw them on the page and report the viewport name."""
    tree = GTree(vp=vp, children=children).draw(page)
    prefix = vp.name.rstrip("0123456789")
    logger.info(f"{prefix}[{vp.name}]")
    return tree


def placement_fields(placement: Optional[Dict[str, Unit]]) -> Dict[str, Optional[Unit]]:
    """Placement keyword arguments for a plot object, None when unplaced."""
    placement = placement or {}
    return {key: placement.get(key) for key in ("x", "y", "width", "height")}
