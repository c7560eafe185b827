"""
Stackshop backend
GraphQL API for a tech blog with a product shop
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
