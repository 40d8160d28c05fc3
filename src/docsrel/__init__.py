"""docsrel - list project releases that ship a docs.tar.gz archive."""

__version__ = "0.1.0"
