"""
Movie Catalog API Application Package.

This package contains the read-only movie catalog service: database access,
response shaping, the HTTP API and shared utilities.
"""

__version__ = "1.0.0"
