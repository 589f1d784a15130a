"""
genobox CLI - Command Line Interface for genobox pages.

Usage:
    genobox <command> [options]
"""

import click

from genobox import __version__


@click.group()
@click.version_option(version=__version__, prog_name="genobox")
@click.option("-v", "--verbose", is_flag=True, help="Show debug messages")
def main(verbose):
    """genobox - place genomic data plots on a page.

    Use 'genobox <command> --help' for detailed usage of each command.
    """
    from genobox.utils.logging_utils import set_verbosity
    set_verbosity(verbose)


@main.command()
def datasets():
    """List the bundled example datasets."""
    from genobox.datasets import list_datasets, load_dataset

    for name in list_datasets():
        click.echo(f"{name}\t{len(load_dataset(name))}")


@main.command()
@click.option("-o", "--output", required=True, help="Output image file (format from extension)")
@click.option("-p", "--params", "params_file", default=None, help="YAML file of shared plot parameters")
@click.option("--dpi", default=300, help="Output resolution")
@click.option("--guides/--no-guides", default=False, help="Keep page guides in the output")
def demo(output, params_file, dpi, guides):
    """Render the example page: BEDPE arches, genome label and anchors.

    Region arguments (chrom, chromstart, chromend, assembly) may be
    overridden with a parameter file.
    """
    from genobox.annotate import anno_bedpe_anchors, anno_genome_label
    from genobox.page import page_create, page_guide_hide
    from genobox.params import Params
    from genobox.plotting import plot_bedpe_arches

    region = Params(chrom="chr21", chromstart=28000000, chromend=30300000, assembly="hg19")
    if params_file:
        region = region + Params.from_yaml(params_file)

    page = page_create(width=4, height=2.5, default_units="inches")
    arches = plot_bedpe_arches(
        data="bedpe", linecolor="black",
        x=0.5, y=0.5, width=3, height=1, just=("left", "top"),
        params=region, page=page,
    )
    anno_genome_label(plot=arches, x=0.5, y=1.5, just=("left", "top"), page=page)
    anno_bedpe_anchors(plot=arches, fill="steelblue", x=0.5, y=1.7, height=0.5, page=page)
    if not guides:
        page_guide_hide(page)

    path = page.save(output, dpi=dpi)
    page.close()
    click.echo(f"Saved {path}")


if __name__ == "__main__":
    main()
