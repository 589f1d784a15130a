"""Tests for configuration and validation utilities."""

import logging

import pandas as pd
import pytest

from genobox.utils import (
    filter_bedpe_region,
    filter_region,
    get_genome_sizes,
    load_table,
    resolve_assembly,
    validate_columns,
    validate_region,
)


class TestConfig:
    """Test assembly helpers."""

    def test_aliases(self):
        """Test GRC names map to UCSC names."""
        assert resolve_assembly("GRCh38") == "hg38"
        assert resolve_assembly("custom") == "custom"

    def test_genome_sizes(self):
        """Test chromosome sizes per assembly."""
        assert get_genome_sizes("hg19")["chr21"] == 48129895
        with pytest.raises(ValueError, match="Unsupported assembly"):
            get_genome_sizes("mm10")


class TestValidateRegion:
    """Test region validation."""

    def test_whole_chromosome(self):
        """Test a region without bounds."""
        assert validate_region("chr21", None, None, "hg19") == (None, None)

    def test_incomplete(self):
        """Test one bound without the other."""
        with pytest.raises(ValueError, match="Cannot have one 'chromstart'"):
            validate_region("chr21", 100, None, "hg19")

    def test_inverted(self):
        """Test start must be before end."""
        with pytest.raises(ValueError, match="should not be larger"):
            validate_region("chr21", 200, 100, "hg19")

    def test_unknown_chromosome(self):
        """Test chromosomes are checked against the assembly."""
        with pytest.raises(ValueError, match="not found in assembly"):
            validate_region("chr99", 100, 200, "hg19")

    def test_past_end(self, caplog):
        """Test regions past the chromosome end warn."""
        with caplog.at_level(logging.WARNING):
            assert validate_region("chr21", 48000000, 49000000, "hg19") == (48000000, 49000000)
        assert "past the end" in caplog.text


class TestFilters:
    """Test interval filtering."""

    def test_filter_region(self, bed_df):
        """Test overlap filtering keeps partial overlaps."""
        kept = filter_region(bed_df, "chr21", 28140000, 28190000)
        assert sorted(kept["start"]) == [28050000, 28120000]

    def test_filter_bedpe_region(self, bedpe_df):
        """Test elements with one anchor in the region are kept."""
        kept = filter_bedpe_region(bedpe_df, "chr21", 28800000, 28950000)
        assert list(kept["start1"]) == [28300000]

    def test_validate_columns_type(self):
        """Test non-DataFrames are rejected."""
        with pytest.raises(TypeError):
            validate_columns([("chr21", 1, 2)], ["chrom", "start", "end"], "bed")

    def test_load_table(self, tmp_path, bed_df):
        """Test tables round-trip through tab-separated files."""
        path = tmp_path / "ranges.bed"
        bed_df.to_csv(path, sep="\t", index=False)
        assert load_table(path).equals(bed_df)
        with pytest.raises(FileNotFoundError):
            load_table(tmp_path / "missing.bed")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
