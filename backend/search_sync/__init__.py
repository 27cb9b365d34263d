"""Webflow CMS -> search index sync."""

__version__ = "0.1.0"
