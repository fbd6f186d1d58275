"""Listing Canvas: marketing-graphic composition engine for property listings."""

__version__ = "0.1.0"
