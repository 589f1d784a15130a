"""Table loading utilities for genobox's bundled reference data."""

import logging
from pathlib import Path
from typing import Dict, Optional, Union

import pandas as pd

logger = logging.getLogger(__name__)


def load_table(
    filepath: Union[str, Path],
    dtypes: Optional[Dict[str, str]] = None,
    sep: str = "\t",
) -> pd.DataFrame:
    """
    Load a headed tab-separated table.

    Args:
        filepath: Path to the table (plain or .gz)
        dtypes: Column dtypes to enforce
        sep: Field separator

    Returns:
        DataFrame with the table contents

    Raises:
        FileNotFoundError: If file doesn't exist
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"File not found: {filepath}")

    df = pd.read_csv(filepath, sep=sep, dtype=dtypes, comment="#")
    logger.debug(f"Loaded {len(df)} records from {filepath.name}")
    return df
