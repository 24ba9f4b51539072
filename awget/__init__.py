"""awget — download and recursively crawl Arch Wiki pages."""

__version__ = "0.1.0"
