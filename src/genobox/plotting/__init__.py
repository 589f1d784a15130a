"""Plot functions that place genomic data onto a page."""

from genobox.plotting.base import PlotObject
from genobox.plotting.bedpe import BedpeArchesPlot, BedpePlot, plot_bedpe, plot_bedpe_arches
from genobox.plotting.hic import HicSquarePlot, plot_hic_square
from genobox.plotting.ideogram import IdeogramPlot, plot_ideogram
from genobox.plotting.ranges import RangesPlot, plot_ranges
from genobox.plotting.signal import SignalPlot, plot_signal

__all__ = [
    "PlotObject",
    "BedpePlot",
    "BedpeArchesPlot",
    "HicSquarePlot",
    "IdeogramPlot",
    "RangesPlot",
    "SignalPlot",
    "plot_bedpe",
    "plot_bedpe_arches",
    "plot_hic_square",
    "plot_ideogram",
    "plot_ranges",
    "plot_signal",
]
