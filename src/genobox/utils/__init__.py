"""Utility modules for genobox."""

from genobox.utils.config import (
    DEFAULT_ASSEMBLY,
    DEFAULT_JUST,
    DEFAULT_UNITS,
    HG19_GENOME_SIZES,
    HG38_GENOME_SIZES,
    STAIN_COLORS,
    get_genome_sizes,
    resolve_assembly,
)
from genobox.utils.io import load_table
from genobox.utils.validation import (
    BED_REQUIRED_COLS,
    BEDPE_REQUIRED_COLS,
    filter_bedpe_region,
    filter_region,
    validate_columns,
    validate_region,
)
from genobox.utils.logging_utils import get_logger, set_verbosity, setup_logger
