"""Tests for annotations layered onto plots."""

import logging

import pytest

from genobox.annotate import anno_bedpe_anchors, anno_genome_label, anno_highlight, tick_labels
from genobox.grobs import RectGrob
from genobox.params import Params
from genobox.plotting import plot_bedpe_arches, plot_ranges
from genobox.units import Unit

REGION = dict(chrom="chr21", chromstart=28000000, chromend=30300000, assembly="hg19")
PLACEMENT = dict(x=0.5, y=0.5, width=3, height=1, just=("left", "top"), default_units="inches")


@pytest.fixture
def arches(page, bedpe_df):
    """A placed arches plot with three elements."""
    return plot_bedpe_arches(data=bedpe_df, **REGION, **PLACEMENT)


class TestAnnoBedpeAnchors:
    """Test anchor highlight boxes."""

    def test_two_boxes_per_element(self, arches):
        """Test one box is drawn at each anchor of each element."""
        anchors = anno_bedpe_anchors(plot=arches, x=0.5, y=1.7, height=0.5)
        assert all(isinstance(child, RectGrob) for child in anchors.grobs.children)
        assert sum(len(child) for child in anchors.grobs.children) == 2 * len(arches.bedpe)
        assert len(anchors.grobs.artists) == 2
        assert sum(len(artist.get_paths()) for artist in anchors.grobs.artists) == 6

    def test_boxes_cover_anchors(self, arches):
        """Test box extents match the anchor intervals."""
        anchors = anno_bedpe_anchors(plot=arches, x=0.5, y=1.7, height=0.5)
        first, second = anchors.grobs.children
        assert list(first.x) == list(arches.bedpe["start1"])
        assert list(first.width) == list(arches.bedpe["end1"] - arches.bedpe["start1"])
        assert list(second.x) == list(arches.bedpe["start2"])

    def test_shares_plot_scale(self, arches):
        """Test the annotation uses the plot's scale and width and clips."""
        anchors = anno_bedpe_anchors(plot=arches, x=0.5, y=1.7, height=0.5)
        assert anchors.grobs.vp.xscale == arches.grobs.vp.xscale
        assert anchors.grobs.vp.clip
        assert anchors.width == arches.width
        assert anchors.height == Unit(0.5, "inches")
        assert (anchors.chrom, anchors.chromstart, anchors.chromend) == ("chr21", 28000000, 30300000)

    def test_defaults(self, arches):
        """Test default styling and justification."""
        anchors = anno_bedpe_anchors(plot=arches, x=0.5, y=1.7, height=0.5)
        gp = anchors.grobs.children[0].gp
        assert (gp.fill, gp.col, gp.alpha) == ("lightgrey", None, 0.4)
        assert anchors.x == arches.x
        assert anchors.just == ("left", "top")

    def test_params(self, arches):
        """Test styling can come from Params."""
        anchors = anno_bedpe_anchors(plot=arches, x=0.5, y=1.7, height=0.5, params=Params(fill="steelblue", alpha=0.8))
        gp = anchors.grobs.children[0].gp
        assert (gp.fill, gp.alpha) == ("steelblue", 0.8)

    def test_viewport_names_increment(self, arches, caplog):
        """Test each annotation gets the next bedpe_anchor name."""
        caplog.set_level(logging.INFO, logger="genobox")
        first = anno_bedpe_anchors(plot=arches, x=0.5, y=1.7, height=0.5)
        second = anno_bedpe_anchors(plot=arches, x=0.5, y=1.7, height=0.5)
        assert first.grobs.name == "bedpe_anchor1"
        assert second.grobs.name == "bedpe_anchor2"
        assert "bedpe_anchor[bedpe_anchor1]" in caplog.text

    def test_no_page(self, bedpe_df):
        """Test a page is needed before anything else is checked."""
        with pytest.raises(RuntimeError, match="Cannot annotate bedpe anchors without a genobox page."):
            anno_bedpe_anchors(y=1.7, height=0.5)

    def test_missing_arguments(self, arches):
        """Test plot, y and height are required."""
        with pytest.raises(ValueError, match='argument "plot" is missing'):
            anno_bedpe_anchors(y=1.7, height=0.5)
        with pytest.raises(ValueError, match='argument "y" is missing'):
            anno_bedpe_anchors(plot=arches, height=0.5)
        with pytest.raises(ValueError, match='argument "height" is missing'):
            anno_bedpe_anchors(plot=arches, y=1.7)

    def test_not_bedpe_plot(self, page, bed_df):
        """Test plots of other data are rejected."""
        ranges = plot_ranges(data=bed_df, chrom="chr21", chromstart=28000000, chromend=28400000, **PLACEMENT)
        with pytest.raises(ValueError, match="does not use bedpe data"):
            anno_bedpe_anchors(plot=ranges, x=0.5, y=1.7, height=0.5)

    def test_bad_units(self, arches):
        """Test placement values must be numbers or Units."""
        with pytest.raises(TypeError, match="x-coordinate is neither a unit object or a numeric value"):
            anno_bedpe_anchors(plot=arches, x="left", y=1.7, height=0.5)
        with pytest.raises(TypeError, match="Height is neither a unit object or a numeric value"):
            anno_bedpe_anchors(plot=arches, x=0.5, y=1.7, height="tall")

    def test_missing_x(self, arches):
        """Test x is not taken from the plot when omitted."""
        with pytest.raises(TypeError, match="x-coordinate is neither a unit object or a numeric value"):
            anno_bedpe_anchors(plot=arches, y=1.7, height=0.5)

    def test_bad_y(self, arches):
        """Test a non-numeric y cannot be placed."""
        with pytest.raises(TypeError, match="y-coordinate is neither a unit object or a numeric value"):
            anno_bedpe_anchors(plot=arches, x=0.5, y="top", height=0.5)

    def test_unit_placement(self, arches):
        """Test Units in other units are accepted."""
        anchors = anno_bedpe_anchors(plot=arches, x=Unit(1.27, "cm"), y=Unit(1.7, "inches"), height=Unit(12.7, "mm"))
        assert anchors.grobs.vp.height == pytest.approx(0.5)
        assert anchors.grobs.vp.left == pytest.approx(0.5)

    def test_empty_bedpe(self, page, bedpe_df, caplog):
        """Test a plot without elements gives a warning and no grobs."""
        empty = plot_bedpe_arches(data=bedpe_df, chrom="chr21", chromstart=40000000, chromend=41000000,
                                  **PLACEMENT)
        caplog.clear()
        anchors = anno_bedpe_anchors(plot=empty, x=0.5, y=1.7, height=0.5)
        assert anchors.grobs is None
        assert "No bedpe elements found in region." in caplog.text

    def test_empty_whole_chromosome(self, page, bedpe_df, caplog):
        """Test an empty whole-chromosome plot still only warns."""
        empty = plot_bedpe_arches(data=bedpe_df, chrom="chrX", assembly="hg19", **PLACEMENT)
        assert empty.grobs is None
        assert empty.xscale == (0.0, 155270560.0)
        caplog.clear()
        caplog.set_level(logging.INFO, logger="genobox")
        anchors = anno_bedpe_anchors(plot=empty, x=0.5, y=1.7, height=0.5)
        assert anchors.grobs is None
        assert "No bedpe elements found in region." in caplog.text
        assert "bedpe_anchor[bedpe_anchor1]" in caplog.text
        assert page.current_viewports() == []


class TestAnnoGenomeLabel:
    """Test genome coordinate labels."""

    def test_tick_labels(self):
        """Test tick label scales and comma formatting."""
        assert tick_labels([28000000], "bp") == ["28,000,000"]
        assert tick_labels([28000000], "bp", commas=False) == ["28000000"]
        assert tick_labels([28500000, 29000000], "Mb") == ["28.5", "29"]
        assert tick_labels([28500000], "Kb", commas=False) == ["28500"]
        with pytest.raises(ValueError):
            tick_labels([1], "Gb")

    def test_label(self, arches):
        """Test the label spans the plot's region and width."""
        label = anno_genome_label(plot=arches, y=1.5, scale="Mb")
        assert label.grobs.name == "genome_label1"
        assert label.grobs.vp.xscale == arches.grobs.vp.xscale
        assert label.width == arches.width
        assert label.scale == "Mb"

    def test_invalid_scale(self, arches):
        """Test unknown scales are rejected."""
        with pytest.raises(ValueError, match="Invalid scale"):
            anno_genome_label(plot=arches, y=1.5, scale="Gb")


class TestAnnoHighlight:
    """Test region highlights."""

    def test_highlight(self, arches):
        """Test a rectangle is drawn over the region."""
        highlight = anno_highlight(plot=arches, chrom="chr21", chromstart=29000000, chromend=29500000,
                                   y=0.5, height=1)
        (rect,) = highlight.grobs.children
        assert list(rect.x) == [29000000]
        assert list(rect.width) == [500000]
        assert highlight.grobs.vp.xscale == arches.grobs.vp.xscale

    def test_outside_plot(self, arches, caplog):
        """Test regions outside the plot warn and draw nothing."""
        highlight = anno_highlight(plot=arches, chrom="chr22", chromstart=29000000, chromend=29500000,
                                   y=0.5, height=1)
        assert highlight.grobs is None
        assert "outside of the plot region" in caplog.text

    def test_lines_up_with_plot(self, arches):
        """Test the highlight starts at the plot's left edge for any justification."""
        highlight = anno_highlight(plot=arches, chrom="chr21", y=0.5, height=1, just=("centre", "top"))
        assert highlight.grobs.vp.left == pytest.approx(0.5)
        assert highlight.grobs.vp.width == pytest.approx(3)
        assert highlight.grobs.vp.bottom == pytest.approx(arches.grobs.vp.bottom)

    def test_centred_plot(self, page, bedpe_df):
        """Test a plot placed by its centre is highlighted at its left edge."""
        centred = plot_bedpe_arches(data=bedpe_df, **REGION, x=2, y=0.5, width=3, height=1,
                                    just=("centre", "top"))
        highlight = anno_highlight(plot=centred, chrom="chr21", chromstart=29000000, chromend=29500000,
                                   y=1.6, height=0.4, just="top")
        assert centred.grobs.vp.left == pytest.approx(0.5)
        assert highlight.grobs.vp.left == pytest.approx(centred.grobs.vp.left)
        assert highlight.grobs.vp.xscale == centred.grobs.vp.xscale


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
