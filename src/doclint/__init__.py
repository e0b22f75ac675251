"""doclint - API outline extraction and consistency lint for markdown docs."""

__version__ = "0.3.0"
