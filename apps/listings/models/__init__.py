"""
Listing models module.
"""
from .listing import Listing

__all__ = [
    'Listing',
]
