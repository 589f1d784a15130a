"""Annotations layered onto placed plots."""

from genobox.annotate.anchors import BedpeAnchor, anno_bedpe_anchors
from genobox.annotate.genome_label import GenomeLabel, anno_genome_label, tick_labels
from genobox.annotate.highlight import Highlight, anno_highlight

__all__ = [
    "BedpeAnchor",
    "GenomeLabel",
    "Highlight",
    "anno_bedpe_anchors",
    "anno_genome_label",
    "anno_highlight",
    "tick_labels",
]
