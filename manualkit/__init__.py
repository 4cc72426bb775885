"""
Manual Kit — Company intranet manual service

Hierarchical content wiki (pages of typed content blocks), FAQ list,
contact suggestions, role-based access and a page-scoped AI assistant,
served as a FastAPI application.
"""

from manualkit.version import __version__

__all__ = ["__version__"]
