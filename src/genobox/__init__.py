"""
genobox: place genomic data plots on a fixed-size page.

This package provides:
- A page with physical units and named viewports (matplotlib figure and axes)
- Plots for BED, BEDPE, Hi-C, signal and cytoband data
- Annotations such as anchor highlights and genome coordinate labels
- Shared plot parameters and bundled example datasets
"""

__version__ = "0.1.0"
__author__ = "genobox Team"

from genobox.annotate import anno_bedpe_anchors, anno_genome_label, anno_highlight
from genobox.datasets import list_datasets, load_cytobands, load_dataset
from genobox.page import (
    Page,
    current_page,
    current_viewports,
    page_create,
    page_guide_hide,
    page_guide_show,
)
from genobox.params import Params
from genobox.plotting import (
    plot_bedpe,
    plot_bedpe_arches,
    plot_hic_square,
    plot_ideogram,
    plot_ranges,
    plot_signal,
)
from genobox.units import Unit, unit

__all__ = [
    "Page",
    "Params",
    "Unit",
    "anno_bedpe_anchors",
    "anno_genome_label",
    "anno_highlight",
    "current_page",
    "current_viewports",
    "list_datasets",
    "load_cytobands",
    "load_dataset",
    "page_create",
    "page_guide_hide",
    "page_guide_show",
    "plot_bedpe",
    "plot_bedpe_arches",
    "plot_hic_square",
    "plot_ideogram",
    "plot_ranges",
    "plot_signal",
    "unit",
]
