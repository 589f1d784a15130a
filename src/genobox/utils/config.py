"""Configuration constants for genobox."""

# Default parameters
DEFAULT_UNITS = "inches"
DEFAULT_ASSEMBLY = "hg19"
DEFAULT_JUST = ("left", "top")

# Human genome sizes (hg38/GRCh38)
HG38_GENOME_SIZES = {
    "chr1": 248956422,
    "chr2": 242193529,
    "chr3": 198295559,
    "chr4": 190214555,
    "chr5": 181538259,
    "chr6": 170805979,
    "chr7": 159345973,
    "chr8": 145138636,
    "chr9": 138394717,
    "chr10": 133797422,
    "chr11": 135086622,
    "chr12": 133275309,
    "chr13": 114364328,
    "chr14": 107043718,
    "chr15": 101991189,
    "chr16": 90338345,
    "chr17": 83257441,
    "chr18": 80373285,
    "chr19": 58617616,
    "chr20": 64444167,
    "chr21": 46709983,
    "chr22": 50818468,
    "chrX": 156040895,
    "chrY": 57227415,
}

# Human genome sizes (hg19/GRCh37)
HG19_GENOME_SIZES = {
    "chr1": 249250621,
    "chr2": 243199373,
    "chr3": 198022430,
    "chr4": 191154276,
    "chr5": 180915260,
    "chr6": 171115067,
    "chr7": 159138663,
    "chr8": 146364022,
    "chr9": 141213431,
    "chr10": 135534747,
    "chr11": 135006516,
    "chr12": 133851895,
    "chr13": 115169878,
    "chr14": 107349540,
    "chr15": 102531392,
    "chr16": 90354753,
    "chr17": 81195210,
    "chr18": 78077248,
    "chr19": 59128983,
    "chr20": 63025520,
    "chr21": 48129895,
    "chr22": 51304566,
    "chrX": 155270560,
    "chrY": 59373566,
}

# Mapping for assembly names
GENOME_SIZES = {
    "hg38": HG38_GENOME_SIZES,
    "GRCh38": HG38_GENOME_SIZES,
    "hg19": HG19_GENOME_SIZES,
    "GRCh37": HG19_GENOME_SIZES,
}

# Canonical UCSC name for each assembly alias
ASSEMBLY_ALIASES = {
    "hg38": "hg38",
    "GRCh38": "hg38",
    "hg19": "hg19",
    "GRCh37": "hg19",
}

# Giemsa stain colors for ideograms
STAIN_COLORS = {
    "gneg": "#FFFFFF",
    "gpos25": "#D9D9D9",
    "gpos33": "#C0C0C0",
    "gpos50": "#A6A6A6",
    "gpos66": "#8C8C8C",
    "gpos75": "#737373",
    "gpos100": "#595959",
    "gvar": "#BFBFBF",
    "stalk": "#A0A0FF",
    "acen": "#CC3333",
}


def resolve_assembly(assembly: str) -> str:
    """
    Map an assembly alias to its canonical UCSC name.

    Unknown names are returned unchanged so that custom assemblies can
    still be echoed on plot objects.

    Args:
        assembly: Genome assembly name (hg38, hg19, GRCh38, GRCh37, ...)

    Returns:
        Canonical assembly name
    """
    return ASSEMBLY_ALIASES.get(assembly, assembly)


def get_genome_sizes(assembly: str = DEFAULT_ASSEMBLY) -> dict:
    """
    Get chromosome sizes for a given assembly.

    Args:
        assembly: Genome assembly name (hg38, hg19, GRCh38, GRCh37)

    Returns:
        Dictionary mapping chromosome names to sizes

    Raises:
        ValueError: If assembly is not supported
    """
    if assembly not in GENOME_SIZES:
        raise ValueError(
            f"Unsupported assembly: {assembly}. "
            f"Supported assemblies: {list(GENOME_SIZES.keys())}"
        )
    return GENOME_SIZES[assembly].copy()
