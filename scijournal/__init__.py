"""SciJournal Digest - academic journal feed aggregation."""

__version__ = "0.1.0"
