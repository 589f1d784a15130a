"""Shared fixtures for genobox tests."""

import matplotlib

matplotlib.use("Agg")

import pandas as pd
import pytest

import genobox.page as page_module
from genobox.page import page_create


@pytest.fixture(autouse=True)
def reset_current_page():
    """Every test starts without a current page."""
    page_module._current_page = None
    yield
    if page_module._current_page is not None:
        page_module._current_page.close()
    page_module._current_page = None


@pytest.fixture
def page():
    """A 4 x 2.5 inch page with guides."""
    return page_create(width=4, height=2.5, default_units="inches")


@pytest.fixture
def bedpe_df():
    """Three loops on chr21, one on chr22."""
    return pd.DataFrame({
        "chrom1": ["chr21", "chr21", "chr21", "chr22"],
        "start1": [28100000, 28300000, 29000000, 28100000],
        "end1": [28110000, 28320000, 29010000, 28110000],
        "chrom2": ["chr21", "chr21", "chr21", "chr22"],
        "start2": [28500000, 28900000, 29800000, 28500000],
        "end2": [28510000, 28920000, 29810000, 28510000],
    })


@pytest.fixture
def bed_df():
    """Overlapping intervals on chr21 with strands."""
    return pd.DataFrame({
        "chrom": ["chr21"] * 4,
        "start": [28000000, 28050000, 28200000, 28120000],
        "end": [28100000, 28150000, 28300000, 28180000],
        "strand": ["+", "-", "+", "-"],
    })
