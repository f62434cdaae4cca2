"""VAF Chart: plot-ready data for longitudinal variant allele frequency timelines."""

__version__ = "0.1.0"
