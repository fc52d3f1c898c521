"""
QuickDict - Pop-up Dictionary Lookup Core

Resolves word queries against a local indexed dictionary with an optional
online fallback, rewrites embedded assets to a cache-friendly addressing
scheme, and serves those assets from a bounded in-memory cache.
"""

__version__ = "1.0.0"
__author__ = "QuickDict Contributors"
