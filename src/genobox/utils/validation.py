"""Data validation utilities for genobox."""

import logging
from typing import List, Optional, Tuple

import pandas as pd

from genobox.utils.config import GENOME_SIZES

logger = logging.getLogger(__name__)

BED_REQUIRED_COLS = ["chrom", "start", "end"]
BEDPE_REQUIRED_COLS = ["chrom1", "start1", "end1", "chrom2", "start2", "end2"]


def validate_columns(
    df: pd.DataFrame,
    required_cols: List[str],
    description: str = "data",
) -> pd.DataFrame:
    """
    Validate that a DataFrame carries the required interval columns.

    Positional frames (integer or unnamed headers, as produced by
    ``read_csv(header=None)``) are relabelled with ``required_cols`` when they
    have enough columns.

    Args:
        df: DataFrame to validate
        required_cols: List of required column names
        description: Description for error message

    Returns:
        DataFrame with the required columns

    Raises:
        TypeError: If df is not a DataFrame
        ValueError: If required columns are missing
    """
    if not isinstance(df, pd.DataFrame):
        raise TypeError(f"{description} must be a pandas DataFrame, got {type(df).__name__}")

    missing = [col for col in required_cols if col not in df.columns]
    if not missing:
        return df

    if all(isinstance(col, int) for col in df.columns) and df.shape[1] >= len(required_cols):
        renamed = df.copy()
        renamed.columns = list(required_cols) + [
            f"extra{i}" for i in range(df.shape[1] - len(required_cols))
        ]
        logger.debug(f"Relabelled positional {description} columns as {required_cols}")
        return renamed

    raise ValueError(f"Missing required {description} columns: {missing}")


def validate_region(
    chrom: Optional[str],
    chromstart: Optional[int],
    chromend: Optional[int],
    assembly: Optional[str] = None,
) -> Tuple[Optional[int], Optional[int]]:
    """
    Validate a genomic region.

    Args:
        chrom: Chromosome name
        chromstart: Region start (bp)
        chromend: Region end (bp)
        assembly: Assembly used to check the chromosome name and bounds

    Returns:
        (chromstart, chromend) as integers, or (None, None) for whole chromosomes

    Raises:
        ValueError: If the region is incomplete, inverted or off the chromosome
    """
    if chrom is None:
        raise ValueError('argument "chrom" is missing, with no default.')

    if (chromstart is None) != (chromend is None):
        raise ValueError("Cannot have one 'chromstart' without the other 'chromend'.")

    sizes = GENOME_SIZES.get(assembly) if assembly is not None else None
    if sizes is not None and chrom not in sizes:
        raise ValueError(f"'{chrom}' not found in assembly {assembly}.")

    if chromstart is None:
        return None, None

    chromstart, chromend = int(chromstart), int(chromend)
    if chromstart >= chromend:
        raise ValueError("'chromstart' should not be larger than or equal to 'chromend'.")
    if chromstart < 0:
        raise ValueError("'chromstart' must not be negative.")
    if sizes is not None and chromend > sizes[chrom]:
        logger.warning(
            f"Region end {chromend} is past the end of {chrom} ({sizes[chrom]}) in {assembly}."
        )

    return chromstart, chromend


def filter_region(
    df: pd.DataFrame,
    chrom: str,
    chromstart: Optional[int],
    chromend: Optional[int],
    chrom_col: str = "chrom",
    start_col: str = "start",
    end_col: str = "end",
) -> pd.DataFrame:
    """
    Keep the rows that overlap a genomic region.

    Args:
        df: DataFrame with interval columns
        chrom: Chromosome name
        chromstart: Region start, None for the whole chromosome
        chromend: Region end, None for the whole chromosome
        chrom_col: Name of chromosome column
        start_col: Name of start column
        end_col: Name of end column

    Returns:
        Filtered DataFrame with a fresh index
    """
    keep = df[chrom_col].astype(str) == str(chrom)
    if chromstart is not None:
        keep &= (df[end_col] > chromstart) & (df[start_col] < chromend)

    filtered = df[keep].reset_index(drop=True)
    logger.debug(f"Kept {len(filtered)} of {len(df)} records on {chrom}")
    return filtered


def filter_bedpe_region(
    df: pd.DataFrame,
    chrom: str,
    chromstart: Optional[int],
    chromend: Optional[int],
) -> pd.DataFrame:
    """
    Keep intrachromosomal BEDPE elements with at least one anchor in a region.

    Args:
        df: BEDPE DataFrame
        chrom: Chromosome name
        chromstart: Region start, None for the whole chromosome
        chromend: Region end, None for the whole chromosome

    Returns:
        Filtered DataFrame with a fresh index
    """
    keep = (df["chrom1"].astype(str) == str(chrom)) & (df["chrom2"].astype(str) == str(chrom))
    if chromstart is not None:
        first = (df["end1"] > chromstart) & (df["start1"] < chromend)
        second = (df["end2"] > chromstart) & (df["start2"] < chromend)
        keep &= first | second

    filtered = df[keep].reset_index(drop=True)
    logger.debug(f"Kept {len(filtered)} of {len(df)} bedpe elements on {chrom}")
    return filtered
