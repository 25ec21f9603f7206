"""
Domain package for the Stream Adaptor.
Contains the domain models shared by the serializers.
"""

from .models import PathMapping

__all__ = ["PathMapping"]
