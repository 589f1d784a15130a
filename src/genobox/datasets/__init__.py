"""Bundled reference datasets.

Example tables cover chr21:28000000-30300000 of the hg19 assembly:

- ``bed``: read intervals (chrom, start, end, strand)
- ``bedpe``: loops as paired anchors (chrom1, start1, end1, chrom2, start2, end2)
- ``gwas``: association p-values (chrom, start, end, pVal)
- ``hic``: sparse upper-triangular 50 kb contact counts (pos1, pos2, counts)
- ``signal``: 5 kb binned signal (chrom, start, end, score)

Cytoband tables (seqnames, start, end, width, strand, name, gieStain) are
loaded per assembly with ``load_cytobands``.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import List

import pandas as pd

from genobox.utils.config import resolve_assembly
from genobox.utils.io import load_table

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"

DATASETS = {
    "bed": ("bed.tsv", {"chrom": "str", "strand": "str"}),
    "bedpe": ("bedpe.tsv", {"chrom1": "str", "chrom2": "str"}),
    "gwas": ("gwas.tsv", {"chrom": "str"}),
    "hic": ("hic.tsv", None),
    "signal": ("signal.tsv", {"chrom": "str"}),
}

CYTOBANDS = {
    "hg19": "cytoband_hg19.tsv",
    "hg38": "cytoband_hg38.tsv",
}
CYTOBAND_DTYPES = {"seqnames": "str", "strand": "str", "name": "str", "gieStain": "str"}


@lru_cache(maxsize=None)
def _read(filename: str, dtypes_key: tuple) -> pd.DataFrame:
    return load_table(DATA_DIR / filename, dtypes=dict(dtypes_key) or None)


def list_datasets() -> List[str]:
    """Names accepted by ``load_dataset``."""
    return sorted(DATASETS)


def load_dataset(name: str) -> pd.DataFrame:
    """
    Load a bundled example dataset.

    Args:
        name: Dataset name (see ``list_datasets``)

    Returns:
        A fresh copy of the dataset

    Raises:
        ValueError: If the dataset does not exist
    """
    if name not in DATASETS:
        raise ValueError(f"Unknown dataset: {name}. Available datasets: {list_datasets()}")

    filename, dtypes = DATASETS[name]
    df = _read(filename, tuple(sorted((dtypes or {}).items())))
    logger.debug(f"Loaded dataset {name} ({len(df)} records)")
    return df.copy()


def load_cytobands(assembly: str = "hg19") -> pd.DataFrame:
    """
    Load the bundled cytoband table of an assembly.

    Args:
        assembly: Assembly name or alias (hg19, GRCh37, hg38, GRCh38)

    Returns:
        A fresh copy of the cytoband table

    Raises:
        ValueError: If no table is bundled for the assembly
    """
    canonical = resolve_assembly(assembly)
    if canonical not in CYTOBANDS:
        raise ValueError(
            f"No cytoband data bundled for assembly: {assembly}. "
            f"Available assemblies: {sorted(CYTOBANDS)}"
        )
    df = _read(CYTOBANDS[canonical], tuple(sorted(CYTOBAND_DTYPES.items())))
    return df.copy()
