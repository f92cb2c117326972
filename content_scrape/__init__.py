"""
content_scrape package initializer.
Defines package version; the CLI lives in :mod:`content_scrape.cli`.
"""
__version__ = "0.1.0"
