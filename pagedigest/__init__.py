"""Page Digest: extract a web page's main text and summarise it."""

__version__ = "0.1.0"
