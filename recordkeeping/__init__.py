"""Record-keeping demos: in-memory warehouse inventory and prescription tracking."""

__version__ = "0.1.0"
