"""Tests for BEDPE plots."""

import logging

import pytest

from genobox.grobs import PathGrob, RectGrob, SegmentsGrob
from genobox.params import Params
from genobox.plotting import plot_bedpe, plot_bedpe_arches
from genobox.units import Unit

REGION = dict(chrom="chr21", chromstart=28000000, chromend=30300000, assembly="hg19")
PLACEMENT = dict(x=0.5, y=0.5, width=3, height=1, just=("left", "top"), default_units="inches")


class TestPlotBedpe:
    """Test the boxes-and-lines BEDPE plot."""

    def test_unplaced(self, bedpe_df):
        """Test a plot without placement is returned undrawn."""
        plot = plot_bedpe(data=bedpe_df, **REGION)
        assert plot.grobs is None
        assert not plot.placed
        assert len(plot.bedpe) == 3
        assert plot.xscale == (28000000, 30300000)

    def test_placed(self, page, bedpe_df):
        """Test one box per anchor and one joining line per element."""
        plot = plot_bedpe(data=bedpe_df, **REGION, **PLACEMENT)
        rects = [child for child in plot.grobs.children if isinstance(child, RectGrob)]
        segments = [child for child in plot.grobs.children if isinstance(child, SegmentsGrob)]
        assert [len(r) for r in rects] == [3, 3]
        assert len(segments[0]) == 3
        assert plot.grobs.name == "bedpe_plot1"
        assert plot.x == Unit(0.5, "inches")
        assert plot.width == Unit(3, "inches")

    def test_filters_other_chromosomes(self, bedpe_df):
        """Test elements on other chromosomes are dropped."""
        plot = plot_bedpe(data=bedpe_df, **REGION)
        assert set(plot.bedpe["chrom1"]) == {"chr21"}

    def test_partial_placement(self, page, bedpe_df):
        """Test placement needs all four values."""
        with pytest.raises(ValueError, match='argument "height" is missing'):
            plot_bedpe(data=bedpe_df, **REGION, x=0.5, y=0.5, width=3)

    def test_bundled_dataset(self, page):
        """Test a dataset name loads the bundled table."""
        plot = plot_bedpe(data="bedpe", **REGION, **PLACEMENT)
        assert len(plot.bedpe) > 0
        assert plot.placed

    def test_missing_data(self):
        """Test data is required."""
        with pytest.raises(ValueError, match='argument "data" is missing'):
            plot_bedpe(**REGION)

    def test_no_page(self, bedpe_df):
        """Test placing a plot needs a page."""
        with pytest.raises(RuntimeError, match="without a genobox page"):
            plot_bedpe(data=bedpe_df, **REGION, **PLACEMENT)


class TestPlotBedpeArches:
    """Test the BEDPE arches plot."""

    def test_one_arch_per_element(self, page, bedpe_df):
        """Test an arch is drawn for every element in the region."""
        plot = plot_bedpe_arches(data=bedpe_df, **REGION, **PLACEMENT)
        (arches,) = plot.grobs.children
        assert isinstance(arches, PathGrob)
        assert len(arches) == 3

    def test_params(self, page, bedpe_df):
        """Test region arguments can come from Params."""
        plot = plot_bedpe_arches(data=bedpe_df, params=Params(**REGION), linecolor="red", **PLACEMENT)
        assert plot.chromstart == 28000000
        assert plot.grobs.children[0].gp.col == "red"

    def test_viewport_name_logged(self, page, bedpe_df, caplog):
        """Test the created viewport is reported."""
        caplog.set_level(logging.INFO, logger="genobox")
        plot_bedpe_arches(data=bedpe_df, **REGION, **PLACEMENT)
        plot_bedpe_arches(data=bedpe_df, **REGION, **PLACEMENT)
        assert "bedpe_arches[bedpe_arches1]" in caplog.text
        assert "bedpe_arches[bedpe_arches2]" in caplog.text

    def test_empty_region(self, page, bedpe_df, caplog):
        """Test a region without elements warns and draws nothing."""
        plot = plot_bedpe_arches(data=bedpe_df, chrom="chr21", chromstart=40000000, chromend=41000000,
                                 **PLACEMENT)
        assert plot.grobs is None
        assert len(plot.bedpe) == 0
        assert "No bedpe elements found in region." in caplog.text

    def test_invalid_region(self, bedpe_df):
        """Test inverted regions are rejected."""
        with pytest.raises(ValueError):
            plot_bedpe_arches(data=bedpe_df, chrom="chr21", chromstart=30000000, chromend=29000000)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
