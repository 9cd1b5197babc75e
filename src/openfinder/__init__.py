"""OpenFinder — Multi-provider search aggregator for open content.

Fans a single query out to book, public-domain text, stock photo, and media
archive catalogs, and merges their answers into one normalized result list.
"""

__version__ = "0.1.0"
