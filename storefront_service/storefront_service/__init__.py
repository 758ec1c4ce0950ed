"""Storefront service: aggregated product catalog and purchase recording."""

__version__ = "0.1.0"
