"""
Domain models for the Stream Adaptor.
"""

from .path_mapping import PathMapping

__all__ = ["PathMapping"]
