"""Random hexagonal maze generation, solving and PostScript rendering."""

__version__ = "0.1.0"